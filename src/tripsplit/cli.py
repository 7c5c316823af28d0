"""CLI for TripSplit using Typer."""

import logging
import sys
from decimal import Decimal
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_settings
from .models import ExpenseShare, TripReport
from .service import TripService
from .snapshot import load_snapshot
from .trips import sorted_expenses

app = typer.Typer(
    name="tripsplit",
    help="Split shared trip expenses and see who owes whom",
)

console = Console()


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def format_money(
    amount: Decimal, currency: str = "", places: int = 2, use_color: bool = True
) -> str:
    """
    Format money in accounting style with alignment.

    Negative amounts use parentheses: (85.02 USD)
    Positive amounts have spaces:      85.02 USD
    The spaces ensure decimal points align in tables.
    """
    # Sign is taken after rounding so tiny residues never show as (0.00)
    amount = amount.quantize(Decimal(1).scaleb(-places))
    abs_amount = abs(amount)
    text = f"{abs_amount:,.{places}f}"
    if currency:
        text = f"{text} {currency}"

    if amount < 0:
        if use_color:
            return f"([red]{text}[/red])"
        return f"({text})"
    if use_color:
        return f" [green]{text}[/green] "
    return f" {text} "


def display_shares(
    shares: list[ExpenseShare], currency: str, places: int = 2
) -> None:
    """Display traveller shares in a table."""
    table = Table(title="Traveller Shares", show_header=True, header_style="bold magenta")
    table.add_column("Traveller", style="cyan")
    table.add_column("Share", justify="right")
    table.add_column("Paid", justify="right")
    table.add_column("Balance", justify="right")

    for share in shares:
        table.add_row(
            escape(share.traveller_name),
            format_money(share.share, currency, places, use_color=False),
            format_money(share.paid, currency, places, use_color=False),
            format_money(share.balance, currency, places),
        )

    console.print(table)


def display_report(report: TripReport, places: int = 2) -> None:
    """Display trip statistics and per-category totals."""
    stats = report.statistics
    currency = report.currency

    console.print(f"\n[bold]{escape(report.trip_name)}[/bold]")
    console.print(f"  Days: {stats.total_days}")
    console.print(f"  Travellers: {stats.total_members}")
    console.print(
        f"  Itinerary: {stats.completed_itinerary_items}/{stats.total_itinerary_items} "
        f"completed ({stats.itinerary_completion_percentage:.0f}%)"
    )
    console.print(
        f"  Total expenses: {format_money(stats.total_expenses, currency, places)} "
        f"[dim]({stats.expense_count} expenses)[/dim]"
    )
    console.print(
        f"  Per day: {format_money(stats.average_expense_per_day, currency, places)}"
    )
    console.print(
        f"  Per traveller: "
        f"{format_money(stats.average_expense_per_member, currency, places)}"
    )
    console.print()

    if not report.expenses_by_category:
        console.print("[yellow]No expenses recorded.[/yellow]")
        return

    table = Table(title="By Category", show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan")
    table.add_column("Amount", justify="right")

    for category, amount in sorted(
        report.expenses_by_category.items(), key=lambda item: item[1], reverse=True
    ):
        table.add_row(category.value, format_money(amount, currency, places))

    console.print(table)


def display_unmatched(report: TripReport) -> None:
    """Warn about expenses whose payer matches nobody on the roster."""
    if not report.unmatched_payers:
        return

    console.print(
        f"\n[yellow]⚠️  {len(report.unmatched_payers)} expense(s) paid by "
        f"someone not on the roster; paid totals will not add up:[/yellow]"
    )
    for expense in report.unmatched_payers:
        label = escape(expense.title or expense.id)
        payer = escape(expense.paid_by or "nobody")
        console.print(f"  [dim]{label}: paid by {payer}[/dim]")


@app.command()
def shares(
    snapshot_path: Path = typer.Argument(..., help="Trip snapshot JSON file"),
    traveller: str = typer.Option(
        None, "--traveller", "-t", help="Only show the traveller with this id"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Show each traveller's share, paid amount and balance.

    A positive balance means the group owes the traveller money; a negative
    balance means the traveller owes the group.
    """
    setup_logging(verbose)

    try:
        settings = load_settings()
        service = TripService(settings)
        snapshot = load_snapshot(snapshot_path)
        places = settings.money_places

        if traveller:
            share = service.get_traveller_share(
                snapshot.trip, snapshot.travellers, traveller
            )
            display_shares([share], service.report_currency(snapshot.trip), places)
            return

        report = service.build_report(snapshot)

        if not report.shares:
            console.print("[yellow]No travellers on this trip.[/yellow]")
            return

        display_shares(report.shares, report.currency, places)

        console.print()
        console.print(
            f"  Trip total: "
            f"{format_money(report.statistics.total_expenses, report.currency, places)}"
        )
        display_unmatched(report)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


@app.command()
def summary(
    snapshot_path: Path = typer.Argument(..., help="Trip snapshot JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Show trip statistics and spending per category."""
    setup_logging(verbose)

    try:
        settings = load_settings()
        service = TripService(settings)
        snapshot = load_snapshot(snapshot_path)

        report = service.build_report(snapshot)
        display_report(report, settings.money_places)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


@app.command()
def expenses(
    snapshot_path: Path = typer.Argument(..., help="Trip snapshot JSON file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """List the trip's expenses, newest first."""
    setup_logging(verbose)

    try:
        settings = load_settings()
        snapshot = load_snapshot(snapshot_path)
        names = {t.id: t.name for t in snapshot.travellers}

        if not snapshot.trip.expenses:
            console.print("[yellow]No expenses recorded.[/yellow]")
            return

        table = Table(title="Expenses", show_header=True, header_style="bold magenta")
        table.add_column("Date", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Category", style="yellow")
        table.add_column("Amount", justify="right")
        table.add_column("Paid By")
        table.add_column("Shared By", no_wrap=False)

        for expense in sorted_expenses(snapshot.trip.expenses):
            title = expense.title
            sharers = sorted(escape(names.get(tid, tid)) for tid in expense.shared_by)
            table.add_row(
                expense.date.strftime("%Y-%m-%d"),
                escape(title[:30] + "..." if len(title) > 30 else title),
                expense.category.value,
                format_money(
                    expense.amount, expense.currency, settings.money_places, False
                ),
                escape(expense.paid_by) or "—",
                ", ".join(sharers) or "[dim]nobody[/dim]",
            )

        console.print(table)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    app()
