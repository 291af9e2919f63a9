"""Mini README: Budget calculation core for CleanSaveUp.

This package holds the session state, the setters that normalise what the
user types, the expense ledger operations and the pure derivation of the
figures shown on the dashboard. Nothing in here renders, formats currency
or stores data beyond the running session.
"""

from .derivation import BudgetSummary, derive_summary
from .ledger import add_expense, delete_expense, sort_expenses
from .session import BudgetSession, PendingInputs
from .setters import parse_savings_rate, set_goal, set_income, set_savings_rate
from .state import BudgetState, Expense, SavingsGoal, create_budget_state

__all__ = [
    "BudgetSession",
    "BudgetState",
    "BudgetSummary",
    "Expense",
    "PendingInputs",
    "SavingsGoal",
    "add_expense",
    "create_budget_state",
    "delete_expense",
    "derive_summary",
    "parse_savings_rate",
    "set_goal",
    "set_income",
    "set_savings_rate",
    "sort_expenses",
]
