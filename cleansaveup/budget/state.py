"""Mini README: Budget state held for a single planning session.

Structure:
    * SavingsGoal - named target with a horizon in months.
    * Expense - one ad-hoc ledger entry.
    * BudgetState - income, savings rate, goal and the expense ledger.
    * create_budget_state - build a fresh state from configured defaults.

The state is plain mutable data. Setters and ledger operations receive it
explicitly, change it in place and hand it back, so every mutation point is
visible at the call site. Nothing here is persisted; a state lives exactly
as long as the session that created it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from ..configuration import FALLBACK_GOAL_NAME, CleanSaveUpSettings, get_settings
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class SavingsGoal:
    """What the user is saving towards and over how many months."""

    name: str = FALLBACK_GOAL_NAME
    duration_months: int = 1

    @property
    def duration_label(self) -> str:
        """Human readable horizon, e.g. ``"1 month"`` or ``"12 months"``."""

        unit = "month" if self.duration_months == 1 else "months"
        return f"{self.duration_months} {unit}"

    def as_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "duration_months": self.duration_months,
            "duration_label": self.duration_label,
        }


@dataclass(slots=True)
class Expense:
    """Ledger entry; ``created_at`` doubles as the ordering key."""

    expense_id: str
    name: str
    amount: float
    created_at: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "expense_id": self.expense_id,
            "name": self.name,
            "amount": self.amount,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(slots=True)
class BudgetState:
    """Inputs for one session. ``expenses`` is kept newest first."""

    income: float = 0.0
    savings_rate_percent: float = 35.0
    goal: SavingsGoal = field(default_factory=SavingsGoal)
    expenses: List[Expense] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {
            "income": self.income,
            "savings_rate_percent": self.savings_rate_percent,
            "goal": self.goal.as_dict(),
            "expenses": [expense.as_dict() for expense in self.expenses],
        }


def create_budget_state(settings: Optional[CleanSaveUpSettings] = None) -> BudgetState:
    """Create the state a new session starts from."""

    settings = settings or get_settings()
    state = BudgetState(
        income=0.0,
        savings_rate_percent=settings.default_savings_rate,
        goal=SavingsGoal(
            name=settings.default_goal_name,
            duration_months=settings.default_goal_duration_months,
        ),
    )
    LOGGER.debug(
        "Budget state created with rate=%s%% goal=%s (%s)",
        state.savings_rate_percent,
        state.goal.name,
        state.goal.duration_label,
    )
    return state
