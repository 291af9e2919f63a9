"""Mini README: Expense ledger operations.

Structure:
    * sort_expenses - newest-first ordering by creation time.
    * add_expense - validate, record and prepend a new expense.
    * delete_expense - remove an expense by id; unknown ids are ignored.

Rejected expenses raise ``InvalidExpenseError`` before the ledger is touched.
Ids are random uuid4 values rather than timestamps so two expenses added in
the same instant never collide.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List, Optional
from uuid import uuid4

from ..exceptions import InvalidExpenseError
from ..logging_utils import get_logger
from .parsing import parse_decimal
from .state import BudgetState, Expense

LOGGER = get_logger(__name__)


def sort_expenses(expenses: Iterable[Expense]) -> List[Expense]:
    """Return expenses newest first; equal timestamps keep their order."""

    return sorted(expenses, key=lambda expense: expense.created_at, reverse=True)


def add_expense(
    state: BudgetState,
    name: object,
    amount_raw: object,
    *,
    now: Optional[datetime] = None,
) -> Expense:
    """Validate and record an expense, returning the stored entry."""

    expense_name = str(name).strip() if name is not None else ""
    amount = parse_decimal(amount_raw)
    if not expense_name:
        raise InvalidExpenseError("Expense name must not be empty", field="name", value=name)
    if amount is None or amount <= 0:
        raise InvalidExpenseError(
            "Expense amount must be a positive number", field="amount", value=amount_raw
        )

    expense = Expense(
        expense_id=uuid4().hex,
        name=expense_name,
        amount=amount,
        created_at=now or datetime.now(timezone.utc),
    )
    state.expenses = sort_expenses([expense, *state.expenses])
    LOGGER.info("Added expense %s (%s, %.2f)", expense.expense_id, expense.name, expense.amount)
    return expense


def delete_expense(state: BudgetState, expense_id: str) -> bool:
    """Remove the expense with ``expense_id``; return whether one was removed."""

    remaining = [expense for expense in state.expenses if expense.expense_id != expense_id]
    if len(remaining) == len(state.expenses):
        LOGGER.debug("No expense %s to delete", expense_id)
        return False
    state.expenses = remaining
    LOGGER.info("Deleted expense %s", expense_id)
    return True
