"""Mini README: Error taxonomy for budget input handling.

Structure:
    * BudgetError - base class, a ``ValueError`` carrying the offending field.
    * InvalidRateError - savings rate outside 0-100 or not a number.
    * InvalidExpenseError - expense with a blank name or non-positive amount.

Rate errors never leave ``set_savings_rate``; the setter logs them and keeps
the previous rate. Expense errors propagate so the presentation layer can
tell the user. Deleting an unknown expense is not an error at all.
"""

from __future__ import annotations

from typing import Any, Optional


class BudgetError(ValueError):
    """Base error for rejected budget input."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def __str__(self) -> str:
        return self.message


class InvalidRateError(BudgetError):
    """Savings rate input that cannot be applied."""


class InvalidExpenseError(BudgetError):
    """Expense input rejected before it reaches the ledger."""


__all__ = ["BudgetError", "InvalidRateError", "InvalidExpenseError"]
