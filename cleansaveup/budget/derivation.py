"""Mini README: Derived budget figures.

``derive_summary`` maps a ``BudgetState`` to the figures the dashboard shows.
It is pure and cheap, so callers simply invoke it again after every
mutation instead of caching anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .state import BudgetState


@dataclass(frozen=True, slots=True)
class BudgetSummary:
    """Figures derived from income, savings rate, goal and expenses."""

    savings_fraction: float
    monthly_savings: float
    total_spending_budget: float
    total_expenses: float
    remaining_budget: float
    projected_savings: float

    @property
    def spending_rate_percent(self) -> float:
        """Share of income left for spending, as a percentage."""

        return 100 - self.savings_fraction * 100

    @property
    def is_overspent(self) -> bool:
        """Expenses exceed the spending budget. A valid state, not an error."""

        return self.remaining_budget < 0

    def as_dict(self) -> Dict[str, object]:
        return {
            "savings_fraction": self.savings_fraction,
            "spending_rate_percent": self.spending_rate_percent,
            "monthly_savings": self.monthly_savings,
            "total_spending_budget": self.total_spending_budget,
            "total_expenses": self.total_expenses,
            "remaining_budget": self.remaining_budget,
            "projected_savings": self.projected_savings,
            "is_overspent": self.is_overspent,
        }


def derive_summary(state: BudgetState) -> BudgetSummary:
    """Compute savings, spending budget, totals and the goal projection."""

    savings_fraction = state.savings_rate_percent / 100
    monthly_savings = state.income * savings_fraction
    total_spending_budget = state.income * (1 - savings_fraction)
    total_expenses = sum((expense.amount for expense in state.expenses), 0.0)
    return BudgetSummary(
        savings_fraction=savings_fraction,
        monthly_savings=monthly_savings,
        total_spending_budget=total_spending_budget,
        total_expenses=total_expenses,
        remaining_budget=total_spending_budget - total_expenses,
        projected_savings=monthly_savings * state.goal.duration_months,
    )
