"""Core settlement logic: each traveller's fair share, paid amount and balance."""

import logging
from collections.abc import Sequence
from decimal import Decimal

from .models import Expense, ExpenseShare, PayerMatch, Traveller

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def total_expenses(expenses: Sequence[Expense]) -> Decimal:
    """
    Sum every expense amount.

    Expenses nobody shares still count here even though they add nothing
    to any traveller's share.
    """
    return sum((expense.amount for expense in expenses), ZERO)


def compute_traveller_share(traveller_id: str, expenses: Sequence[Expense]) -> Decimal:
    """
    Compute how much a traveller should pay.

    Every expense the traveller is tagged as sharing is divided equally
    between its sharers.

    Args:
        traveller_id: Stable id of the traveller
        expenses: The trip's expenses

    Returns:
        The traveller's share as an exact Decimal
    """
    share = ZERO
    for expense in expenses:
        if traveller_id in expense.shared_by:
            share_count = max(len(expense.shared_by), 1)
            share += expense.amount / Decimal(share_count)
    return share


def compute_paid_amount(payer_key: str, expenses: Sequence[Expense]) -> Decimal:
    """
    Compute how much a traveller actually paid.

    Args:
        payer_key: Value compared by exact equality against ``Expense.paid_by``
        expenses: The trip's expenses

    Returns:
        Sum of the amounts of matching expenses
    """
    return sum(
        (expense.amount for expense in expenses if expense.paid_by == payer_key), ZERO
    )


def payer_key(traveller: Traveller, payer_match: PayerMatch = PayerMatch.NAME) -> str:
    """Return the value an expense's ``paid_by`` must equal for this traveller."""
    if payer_match is PayerMatch.ID:
        return traveller.id
    return traveller.name


def compute_shares(
    travellers: Sequence[Traveller],
    expenses: Sequence[Expense],
    payer_match: PayerMatch = PayerMatch.NAME,
) -> list[ExpenseShare]:
    """
    Compute every traveller's share, paid amount and balance.

    Balance is ``paid - share``: positive means the group owes the traveller,
    negative means the traveller owes the group. Inputs are not modified and
    nothing is validated; unmatched payers and negative amounts simply flow
    through the arithmetic.

    Args:
        travellers: The trip's roster
        expenses: The trip's expenses
        payer_match: How ``Expense.paid_by`` is matched to a traveller

    Returns:
        One ExpenseShare per traveller, sorted by display name (stable)
    """
    shares = []

    for traveller in travellers:
        share = compute_traveller_share(traveller.id, expenses)
        paid = compute_paid_amount(payer_key(traveller, payer_match), expenses)

        shares.append(
            ExpenseShare(
                traveller_id=traveller.id,
                traveller_name=traveller.name,
                share=share,
                paid=paid,
                balance=paid - share,
            )
        )

    logger.debug(
        f"Computed shares for {len(travellers)} travellers "
        f"over {len(expenses)} expenses"
    )

    return sorted(shares, key=lambda s: s.traveller_name)


def find_unmatched_payers(
    travellers: Sequence[Traveller],
    expenses: Sequence[Expense],
    payer_match: PayerMatch = PayerMatch.NAME,
) -> list[Expense]:
    """
    Find expenses whose payer matches nobody on the roster.

    Such expenses count toward the trip total but toward nobody's paid
    amount, so paid totals will not reconcile. Each one is logged.

    Args:
        travellers: The trip's roster
        expenses: The trip's expenses
        payer_match: How ``Expense.paid_by`` is matched to a traveller

    Returns:
        The unmatched expenses in input order
    """
    keys = {payer_key(traveller, payer_match) for traveller in travellers}
    unmatched = [expense for expense in expenses if expense.paid_by not in keys]

    for expense in unmatched:
        logger.warning(
            f"Expense '{expense.title}' ({expense.id}) paid by "
            f"'{expense.paid_by}' matches no traveller"
        )

    return unmatched
