"""Mini README: Setters for income, savings rate and the savings goal.

Structure:
    * set_income - coerce to a non-negative amount; never rejects.
    * parse_savings_rate - read a 0-100 rate or raise ``InvalidRateError``.
    * set_savings_rate - apply a rate; blank or invalid input is a no-op.
    * set_goal - normalise name and duration; never rejects.

Each setter mutates the given ``BudgetState`` in place and returns it.
"""

from __future__ import annotations

from ..configuration import FALLBACK_GOAL_NAME
from ..exceptions import InvalidRateError
from ..logging_utils import get_logger
from .parsing import is_blank, parse_decimal, parse_integer
from .state import BudgetState, SavingsGoal

LOGGER = get_logger(__name__)


def set_income(state: BudgetState, raw: object) -> BudgetState:
    """Store monthly income; unparseable or negative input becomes 0."""

    income = parse_decimal(raw)
    state.income = max(income, 0.0) if income is not None else 0.0
    LOGGER.debug("Income set to %.2f from %r", state.income, raw)
    return state


def parse_savings_rate(raw: object) -> float:
    """Return the rate in ``raw`` or raise ``InvalidRateError``."""

    rate = parse_decimal(raw)
    if rate is None:
        raise InvalidRateError("Savings rate must be a number", field="savings_rate", value=raw)
    if not 0 <= rate <= 100:
        raise InvalidRateError(
            "Savings rate must be between 0 and 100", field="savings_rate", value=raw
        )
    return rate


def set_savings_rate(state: BudgetState, raw: object) -> BudgetState:
    """Apply a savings rate, keeping the previous one for blank or invalid input."""

    if is_blank(raw):
        # Field cleared mid-edit; the numeric rate stays in effect.
        return state
    try:
        rate = parse_savings_rate(raw)
    except InvalidRateError as error:
        LOGGER.debug("Ignoring savings rate %r: %s", raw, error)
        return state
    state.savings_rate_percent = rate
    LOGGER.debug("Savings rate set to %s%%", rate)
    return state


def set_goal(state: BudgetState, name: object, duration_raw: object) -> BudgetState:
    """Replace the goal, defaulting a blank name and flooring the duration at 1."""

    goal_name = str(name).strip() if name is not None else ""
    duration = parse_integer(duration_raw)
    state.goal = SavingsGoal(
        name=goal_name or FALLBACK_GOAL_NAME,
        duration_months=max(1, duration or 1),
    )
    LOGGER.debug("Goal set to %s over %s", state.goal.name, state.goal.duration_label)
    return state
