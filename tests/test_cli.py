"""Tests for the command-line interface."""

from decimal import Decimal

import pytest
from typer.testing import CliRunner

from tripsplit.cli import app, format_money
from tripsplit.models import Expense
from tripsplit.snapshot import dump_snapshot

runner = CliRunner()


@pytest.fixture
def snapshot_file(tmp_path, sample_snapshot):
    """Write the sample snapshot to disk."""
    path = tmp_path / "alps.json"
    dump_snapshot(sample_snapshot, path)
    return path


class TestFormatMoney:
    """Tests for accounting-style money formatting."""

    def test_positive(self):
        assert format_money(Decimal("1234.5"), "EUR", use_color=False) == " 1,234.50 EUR "

    def test_negative(self):
        assert format_money(Decimal("-20"), use_color=False) == "(20.00)"

    def test_places(self):
        assert format_money(Decimal("1") / 3, places=3, use_color=False) == " 0.333 "

    def test_rounding_residue_is_not_negative(self):
        """A balance that rounds to zero is shown as zero, not as a debt."""
        assert format_money(Decimal("-1E-26"), use_color=False) == " 0.00 "
        assert "[red]" not in format_money(Decimal("-0.004"))

    def test_rounds_before_choosing_sign(self):
        assert format_money(Decimal("-0.006"), use_color=False) == "(0.01)"

    def test_color_markup(self):
        assert "[red]" in format_money(Decimal("-1"))
        assert "[green]" in format_money(Decimal("1"))


class TestSharesCommand:
    """Tests for the shares command."""

    def test_shows_balances(self, snapshot_file):
        result = runner.invoke(app, ["shares", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Alice" in result.output
        assert "Dana" not in result.output
        assert "100.00 EUR" in result.output
        assert "(80.00 EUR)" in result.output

    def test_single_traveller(self, snapshot_file):
        result = runner.invoke(app, ["shares", str(snapshot_file), "--traveller", "b"])

        assert result.exit_code == 0
        assert "Bob" in result.output
        assert "Alice" not in result.output

    def test_unknown_traveller_fails(self, snapshot_file):
        result = runner.invoke(app, ["shares", str(snapshot_file), "-t", "zzz"])

        assert result.exit_code == 1
        assert "zzz" in result.output

    def test_warns_about_unmatched_payer(self, tmp_path, sample_snapshot):
        sample_snapshot.trip.expenses.append(
            Expense(title="Souvenirs", amount=Decimal("9"), paid_by="Eve")
        )
        path = tmp_path / "trip.json"
        dump_snapshot(sample_snapshot, path)

        result = runner.invoke(app, ["shares", str(path)])

        assert result.exit_code == 0
        assert "Souvenirs: paid by Eve" in result.output

    def test_missing_snapshot(self, tmp_path):
        result = runner.invoke(app, ["shares", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestSummaryCommand:
    """Tests for the summary command."""

    def test_statistics(self, snapshot_file):
        result = runner.invoke(app, ["summary", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Alps Weekend" in result.output
        assert "Days: 3" in result.output
        assert "210.00 EUR" in result.output
        assert "Accommodation" in result.output


class TestExpensesCommand:
    """Tests for the expenses command."""

    def test_lists_expenses(self, snapshot_file):
        result = runner.invoke(app, ["expenses", str(snapshot_file)])

        assert result.exit_code == 0
        assert "Chalet" in result.output
        assert "Fondue" in result.output
        assert result.output.index("Fondue") < result.output.index("Chalet")
