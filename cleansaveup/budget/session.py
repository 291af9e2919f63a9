"""Mini README: One planning session with its input fields and derived figures.

Structure:
    * PendingInputs - text currently shown in each input field.
    * BudgetSession - owns a ``BudgetState``, routes edits to the setters and
      ledger operations, and refreshes the summary after every change.

The session keeps what the user typed separately from the numbers in
effect. That lets the savings-rate field be cleared while typing without
losing the rate, and lets a rejected expense stay in the form for
correction while a successful add clears it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..configuration import CleanSaveUpSettings, get_settings
from ..exceptions import InvalidRateError
from ..logging_utils import get_logger
from .derivation import BudgetSummary, derive_summary
from .ledger import add_expense, delete_expense
from .parsing import is_blank
from .setters import parse_savings_rate, set_goal, set_income
from .state import BudgetState, Expense, create_budget_state

LOGGER = get_logger(__name__)


def _as_text(raw: object) -> str:
    return "" if raw is None else str(raw)


@dataclass(slots=True)
class PendingInputs:
    """Raw text of the planner's input fields."""

    income_text: str = ""
    rate_text: str = ""
    goal_name_text: str = ""
    goal_duration_text: str = ""
    expense_name_text: str = ""
    expense_amount_text: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {
            "income_text": self.income_text,
            "rate_text": self.rate_text,
            "goal_name_text": self.goal_name_text,
            "goal_duration_text": self.goal_duration_text,
            "expense_name_text": self.expense_name_text,
            "expense_amount_text": self.expense_amount_text,
        }


class BudgetSession:
    """Hold one user's budget for as long as the session lives."""

    def __init__(
        self,
        state: Optional[BudgetState] = None,
        *,
        settings: Optional[CleanSaveUpSettings] = None,
    ) -> None:
        self.state = state or create_budget_state(settings or get_settings())
        self.inputs = PendingInputs(
            rate_text=f"{self.state.savings_rate_percent:g}",
            goal_duration_text=str(self.state.goal.duration_months),
        )
        self.summary: BudgetSummary = derive_summary(self.state)
        LOGGER.debug("Budget session started with %s expenses", len(self.state.expenses))

    def _refresh(self) -> BudgetSummary:
        self.summary = derive_summary(self.state)
        return self.summary

    def set_income(self, raw: object) -> BudgetSummary:
        """Record the income field and apply it."""

        self.inputs.income_text = _as_text(raw)
        set_income(self.state, raw)
        return self._refresh()

    def set_savings_rate(self, raw: object) -> bool:
        """Apply the rate field; return ``True`` when the rate was applied.

        Blank input clears the field but keeps the rate. Invalid input is
        dropped entirely, leaving both the field and the rate as they were.
        """

        if is_blank(raw):
            self.inputs.rate_text = ""
            return False
        try:
            rate = parse_savings_rate(raw)
        except InvalidRateError as error:
            LOGGER.debug("Rate field stays %r, rejected %r: %s", self.inputs.rate_text, raw, error)
            return False
        self.inputs.rate_text = _as_text(raw)
        self.state.savings_rate_percent = rate
        LOGGER.debug("Savings rate set to %s%%", rate)
        self._refresh()
        return True

    def set_goal(self, name: object, duration_raw: object) -> BudgetSummary:
        """Record both goal fields and apply the normalised goal."""

        self.inputs.goal_name_text = _as_text(name)
        self.inputs.goal_duration_text = _as_text(duration_raw)
        set_goal(self.state, name, duration_raw)
        return self._refresh()

    def set_expense_draft(self, name: object = None, amount_raw: object = None) -> PendingInputs:
        """Update the pending expense fields without touching the ledger."""

        if name is not None:
            self.inputs.expense_name_text = _as_text(name)
        if amount_raw is not None:
            self.inputs.expense_amount_text = _as_text(amount_raw)
        return self.inputs

    def add_expense(self, name: object = None, amount_raw: object = None) -> Expense:
        """Add the drafted expense, clearing the draft on success.

        Arguments override the pending draft fields. ``InvalidExpenseError``
        propagates with the ledger unchanged and the draft kept for correction.
        """

        self.set_expense_draft(name, amount_raw)
        expense = add_expense(
            self.state, self.inputs.expense_name_text, self.inputs.expense_amount_text
        )
        self.inputs.expense_name_text = ""
        self.inputs.expense_amount_text = ""
        self._refresh()
        return expense

    def delete_expense(self, expense_id: str) -> bool:
        """Remove an expense; unknown ids are ignored."""

        removed = delete_expense(self.state, expense_id)
        if removed:
            self._refresh()
        return removed

    def export_snapshot(self) -> Dict[str, object]:
        """Export inputs, state and derived figures for JSON responses."""

        return {
            "inputs": self.inputs.as_dict(),
            "state": self.state.as_dict(),
            "summary": self.summary.as_dict(),
        }
