"""End-to-end tests for the cyclebudget CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from cyclebudget.cli import app

runner = CliRunner()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config and data directories at a temporary home."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


@pytest.fixture
def initialised(home: Path) -> Path:
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0, result.output
    return home


class TestInit:
    """Tests for the init command."""

    def test_creates_files(self, home: Path) -> None:
        """Should create the database and config."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert (home / "config" / "cyclebudget" / "config.toml").exists()
        assert (home / "data" / "cyclebudget" / "cyclebudget.db").exists()

    def test_refuses_to_overwrite(self, initialised: Path) -> None:
        """Should fail on a second init without --force."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output


class TestSettings:
    """Tests for the settings command."""

    def test_show_default(self, initialised: Path) -> None:
        """Should show the default start day."""
        result = runner.invoke(app, ["settings"])

        assert result.exit_code == 0
        assert "Cycle start day: 1" in result.output

    def test_change(self, initialised: Path) -> None:
        """Should store a new start day."""
        assert runner.invoke(app, ["settings", "--start-day", "15"]).exit_code == 0

        result = runner.invoke(app, ["settings"])
        assert "Cycle start day: 15" in result.output

    def test_reject_out_of_range(self, initialised: Path) -> None:
        """Should refuse days outside 1-31."""
        result = runner.invoke(app, ["settings", "--start-day", "40"])

        assert result.exit_code == 1
        assert "between 1 and 31" in result.output

    def test_without_init(self, home: Path) -> None:
        """Should ask the user to initialise first."""
        result = runner.invoke(app, ["settings"])

        assert result.exit_code == 1
        assert "cyclebudget init" in result.output


class TestPeriod:
    """Tests for the period, periods and months commands."""

    def test_period_for_date(self, initialised: Path) -> None:
        """Should show the cycle containing the given date."""
        runner.invoke(app, ["settings", "--start-day", "15"])

        result = runner.invoke(app, ["period", "--date", "2024-01-10"])

        assert result.exit_code == 0
        assert "2023-12-15 to 2024-1-14" in result.output

    def test_period_for_month(self, initialised: Path) -> None:
        """Should show the cycle for a calendar month."""
        runner.invoke(app, ["settings", "--start-day", "15"])

        result = runner.invoke(app, ["period", "--year", "2024", "--month", "12"])

        assert result.exit_code == 0
        assert "2024-12-15 to 2025-1-14" in result.output

    def test_period_invalid_month(self, initialised: Path) -> None:
        """Should reject a month outside 1-12."""
        result = runner.invoke(app, ["period", "--year", "2024", "--month", "13"])

        assert result.exit_code == 1

    def test_period_invalid_date(self, initialised: Path) -> None:
        """Should reject an unparseable date."""
        result = runner.invoke(app, ["period", "--date", "yesterday-ish"])

        assert result.exit_code == 1

    def test_periods_table(self, initialised: Path) -> None:
        """Should list cycles in a table."""
        result = runner.invoke(app, ["periods", "--past", "2", "--future", "1"])

        assert result.exit_code == 0
        assert "Budget cycles" in result.output

    def test_periods_negative_count(self, initialised: Path) -> None:
        """Should reject negative counts."""
        result = runner.invoke(app, ["periods", "--past=-1"])

        assert result.exit_code == 1

    def test_months_table(self, initialised: Path) -> None:
        """Should list monthly cycles."""
        result = runner.invoke(app, ["months", "--back", "2"])

        assert result.exit_code == 0
        assert "Monthly cycles" in result.output


class TestLedger:
    """Tests for budget, add, entries, remove and chart."""

    def test_record_and_report(self, initialised: Path) -> None:
        """Should track entries and budget for a past cycle."""
        runner.invoke(app, ["settings", "--start-day", "15"])

        result = runner.invoke(app, ["add", "expense", "1200", "--date", "2024-01-20", "--note", "lunch"])
        assert result.exit_code == 0, result.output
        assert "Recorded expense #1" in result.output

        result = runner.invoke(app, ["add", "income", "500", "--date", "2024-02-14"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(app, ["budget", "--set", "50000", "--date", "2024-01-20"])
        assert result.exit_code == 0, result.output
        assert "50,000" in result.output
        assert "Remaining" in result.output
        assert "49,300" in result.output

        result = runner.invoke(app, ["entries", "--date", "2024-02-01"])
        assert result.exit_code == 0, result.output
        assert "lunch" in result.output
        assert "1,200" in result.output

        result = runner.invoke(app, ["chart", "--date", "2024-01-20"])
        assert result.exit_code == 0, result.output
        assert "1/15" in result.output

    def test_budget_without_amount(self, initialised: Path) -> None:
        """Should explain that no budget is set."""
        result = runner.invoke(app, ["budget", "--date", "2024-01-20"])

        assert result.exit_code == 0
        assert "No budget set" in result.output

    def test_invalid_amount(self, initialised: Path) -> None:
        """Should reject a non-numeric amount."""
        result = runner.invoke(app, ["add", "expense", "abc"])

        assert result.exit_code == 1
        assert "Enter a valid amount" in result.output

    def test_invalid_kind(self, initialised: Path) -> None:
        """Should reject unknown entry kinds."""
        result = runner.invoke(app, ["add", "transfer", "100"])

        assert result.exit_code == 1

    def test_remove(self, initialised: Path) -> None:
        """Should delete an entry once."""
        runner.invoke(app, ["add", "expense", "300", "--date", "2024-01-20"])

        result = runner.invoke(app, ["remove", "expense", "1"])
        assert result.exit_code == 0
        assert "Deleted expense #1" in result.output

        result = runner.invoke(app, ["remove", "expense", "1"])
        assert result.exit_code == 1

    @pytest.mark.parametrize(
        ("args", "message"),
        [
            (["add", "expense", "inf"], "Enter a valid amount"),
            (["add", "income", "1e30"], "at most"),
            (["add", "expense", "12.5"], "whole number"),
            (["budget", "--set", "1e30"], "at most"),
            (["budget", "--set", "inf"], "Enter a valid amount"),
        ],
    )
    def test_unstorable_amounts(self, initialised: Path, args: list[str], message: str) -> None:
        """Should refuse infinite, oversized and fractional amounts with a message."""
        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert message in result.output

    def test_add_invalid_date(self, initialised: Path) -> None:
        """Should refuse dates that do not exist."""
        result = runner.invoke(app, ["add", "expense", "100", "--date", "2023-02-29"])

        assert result.exit_code == 1
        assert "Enter a valid date" in result.output

    def test_add_relative_date(self, initialised: Path) -> None:
        """Should not accept relative words as dates."""
        result = runner.invoke(app, ["add", "expense", "100", "--date", "today"])

        assert result.exit_code == 1

    def test_clear_budget(self, initialised: Path) -> None:
        """Should remove the cycle budget once."""
        runner.invoke(app, ["budget", "--set", "50000", "--date", "2024-01-20"])

        result = runner.invoke(app, ["budget", "--clear", "--date", "2024-01-20"])
        assert result.exit_code == 0, result.output
        assert "cleared" in result.output
        assert "No budget set" in result.output

        result = runner.invoke(app, ["budget", "--clear", "--date", "2024-01-20"])
        assert result.exit_code == 0
        assert "No budget was set" in result.output

    def test_set_and_clear_conflict(self, initialised: Path) -> None:
        """Should refuse --set together with --clear."""
        result = runner.invoke(app, ["budget", "--set", "100", "--clear"])

        assert result.exit_code == 1


class TestEdit:
    """Tests for the edit command."""

    def test_edit_amount_and_note(self, initialised: Path) -> None:
        """Should change the given fields and keep the rest."""
        runner.invoke(app, ["add", "expense", "1200", "--date", "2024-01-20", "--note", "lunch"])

        result = runner.invoke(app, ["edit", "expense", "1", "--amount", "1500", "--note", "dinner"])
        assert result.exit_code == 0, result.output
        assert "Updated expense #1: 1,500 on 2024-01-20" in result.output

        result = runner.invoke(app, ["entries", "--date", "2024-01-20"])
        assert "dinner" in result.output
        assert "1,500" in result.output
        assert "lunch" not in result.output

    def test_edit_moves_date(self, initialised: Path) -> None:
        """Should move an entry into another cycle."""
        runner.invoke(app, ["add", "income", "500", "--date", "2024-01-20"])

        result = runner.invoke(app, ["edit", "income", "1", "--date", "2024-03-02"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(app, ["entries", "--date", "2024-01-20"])
        assert "No incomes" in result.output

        result = runner.invoke(app, ["entries", "--date", "2024-03-02"])
        assert "500" in result.output

    def test_edit_missing(self, initialised: Path) -> None:
        """Should fail for an unknown ID."""
        result = runner.invoke(app, ["edit", "income", "7", "--amount", "1"])

        assert result.exit_code == 1
        assert "No income with ID 7" in result.output

    def test_edit_without_changes(self, initialised: Path) -> None:
        """Should ask for at least one field."""
        runner.invoke(app, ["add", "expense", "300", "--date", "2024-01-20"])

        result = runner.invoke(app, ["edit", "expense", "1"])

        assert result.exit_code == 1
        assert "Nothing to change" in result.output

    def test_edit_rejects_fraction(self, initialised: Path) -> None:
        """Should validate the new amount like add does."""
        runner.invoke(app, ["add", "expense", "300", "--date", "2024-01-20"])

        result = runner.invoke(app, ["edit", "expense", "1", "--amount", "12.5"])

        assert result.exit_code == 1
        assert "whole number" in result.output
