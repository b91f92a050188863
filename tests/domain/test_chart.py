"""Tests for cyclebudget.domain.chart pure functions."""

from datetime import date

import pytest

from cyclebudget.domain.chart import generate_chart_data, totals_by_date
from cyclebudget.domain.models import LedgerEntry, Money


def entry(day: str, amount: int) -> LedgerEntry:
    return LedgerEntry(entry_date=day, amount=Money(amount))


class TestTotalsByDate:
    """Tests for totals_by_date."""

    def test_sums_same_day(self) -> None:
        """Should add up entries on the same date."""
        totals = totals_by_date([entry("2024-01-16", 50), entry("2024-01-16", 25), entry("2024-01-17", 10)])

        assert totals == {"2024-01-16": Money(75), "2024-01-17": Money(10)}


class TestGenerateChartData:
    """Tests for generate_chart_data."""

    def test_cumulative_series(self) -> None:
        """Should accumulate expenses net of incomes with an even budget line."""
        expenses = [entry("2024-01-15", 100), entry("2024-01-16", 50), entry("2024-01-16", 25)]
        incomes = [entry("2024-01-16", 30)]

        points = generate_chart_data(date(2024, 1, 15), date(2024, 1, 17), Money(300), expenses, incomes)

        assert [p.date for p in points] == ["2024-01-15", "2024-01-16", "2024-01-17"]
        assert [p.date_label for p in points] == ["1/15", "1/16", "1/17"]
        assert [p.actual_expense for p in points] == [100, 145, 145]
        assert [p.budget_line for p in points] == pytest.approx([100.0, 200.0, 300.0])

    def test_no_budget_omits_line(self) -> None:
        """Should leave the budget line empty without a budget."""
        points = generate_chart_data(date(2024, 1, 15), date(2024, 1, 16), None, [entry("2024-01-15", 10)], [])

        assert all(p.budget_line is None for p in points)
        assert [p.actual_expense for p in points] == [10, 10]

    def test_ignores_entries_outside_range(self) -> None:
        """Should ignore entries dated before or after the cycle."""
        expenses = [entry("2024-01-14", 999), entry("2024-01-15", 10), entry("2024-02-01", 999)]

        points = generate_chart_data(date(2024, 1, 15), date(2024, 1, 16), Money(100), expenses, [])

        assert [p.actual_expense for p in points] == [10, 10]

    def test_one_point_per_day_of_cycle(self) -> None:
        """Should cover a whole cycle across a month boundary."""
        points = generate_chart_data(date(2024, 1, 15), date(2024, 2, 14), Money(3100), [], [])

        assert len(points) == 31
        assert points[-1].date_label == "2/14"
        assert points[-1].budget_line == pytest.approx(3100.0)

    def test_empty_range(self) -> None:
        """Should return no points when the end precedes the start."""
        assert generate_chart_data(date(2024, 1, 16), date(2024, 1, 15), Money(100), [], []) == []
