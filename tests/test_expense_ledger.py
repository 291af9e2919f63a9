"""Mini README: Tests covering the expense ledger operations.

Structure:
    * adds are validated, trimmed and kept newest first.
    * rejected adds and unknown deletes leave the ledger untouched.
    * totals track the ledger through any mix of adds and deletes.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from cleansaveup.budget import (
    BudgetState,
    Expense,
    add_expense,
    delete_expense,
    derive_summary,
    sort_expenses,
)
from cleansaveup.exceptions import InvalidExpenseError

START = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


def _seeded_state() -> BudgetState:
    state = BudgetState(income=5000.0)
    entries = [("Groceries", "600"), ("Rent", "1500"), ("Gym", "45.5")]
    for offset, (name, amount) in enumerate(entries):
        add_expense(state, name, amount, now=START + timedelta(minutes=offset))
    return state


def test_add_expense_trims_and_records() -> None:
    state = BudgetState()
    expense = add_expense(state, "  Groceries ", " 600.25", now=START)

    assert expense.name == "Groceries"
    assert expense.amount == pytest.approx(600.25)
    assert expense.created_at == START
    assert state.expenses == [expense]


def test_add_expense_defaults_to_current_utc_time() -> None:
    state = BudgetState()
    before = datetime.now(timezone.utc)
    expense = add_expense(state, "Coffee", 4)
    assert before <= expense.created_at <= datetime.now(timezone.utc)


def test_ledger_is_newest_first_after_adds() -> None:
    state = _seeded_state()
    assert [expense.name for expense in state.expenses] == ["Gym", "Rent", "Groceries"]
    timestamps = [expense.created_at for expense in state.expenses]
    assert timestamps == sorted(timestamps, reverse=True)


def test_backdated_expense_is_sorted_into_place() -> None:
    """Prepending alone is not enough when a timestamp is older."""

    state = _seeded_state()
    add_expense(state, "Insurance", "90", now=START - timedelta(days=1))
    assert state.expenses[-1].name == "Insurance"


def test_identical_timestamps_keep_newest_insert_first() -> None:
    state = BudgetState()
    add_expense(state, "First", "1", now=START)
    add_expense(state, "Second", "2", now=START)
    assert [expense.name for expense in state.expenses] == ["Second", "First"]


def test_expense_ids_are_unique() -> None:
    state = BudgetState()
    ids = {add_expense(state, f"Item {index}", "1", now=START).expense_id for index in range(50)}
    assert len(ids) == 50


@pytest.mark.parametrize(
    ("name", "amount"),
    [
        ("", "10"),
        ("   ", "10"),
        (None, "10"),
        ("Rent", "0"),
        ("Rent", "-5"),
        ("Rent", "abc"),
        ("Rent", ""),
    ],
)
def test_invalid_expense_is_rejected(name: object, amount: object) -> None:
    """Blank names and non-positive or missing amounts never reach the ledger."""

    state = _seeded_state()
    before = list(state.expenses)

    with pytest.raises(InvalidExpenseError):
        add_expense(state, name, amount, now=START + timedelta(hours=1))

    assert state.expenses == before


def test_rejection_names_the_offending_field() -> None:
    with pytest.raises(InvalidExpenseError) as excinfo:
        add_expense(BudgetState(), "Rent", "0")
    assert excinfo.value.field == "amount"

    with pytest.raises(InvalidExpenseError) as excinfo:
        add_expense(BudgetState(), " ", "10")
    assert excinfo.value.field == "name"


def test_delete_expense_removes_match() -> None:
    state = _seeded_state()
    rent = next(expense for expense in state.expenses if expense.name == "Rent")

    assert delete_expense(state, rent.expense_id) is True
    assert [expense.name for expense in state.expenses] == ["Gym", "Groceries"]


def test_delete_unknown_expense_is_a_no_op() -> None:
    state = _seeded_state()
    before = list(state.expenses)

    assert delete_expense(state, "does-not-exist") is False
    assert state.expenses == before


def test_total_expenses_follow_adds_and_deletes() -> None:
    state = _seeded_state()
    assert derive_summary(state).total_expenses == pytest.approx(2145.5)

    gym = state.expenses[0]
    delete_expense(state, gym.expense_id)
    add_expense(state, "Utilities", "120", now=START + timedelta(hours=2))

    expected = sum(expense.amount for expense in state.expenses)
    assert derive_summary(state).total_expenses == pytest.approx(expected)
    assert derive_summary(state).total_expenses == pytest.approx(2220.0)


def test_sort_expenses_orders_by_creation_time() -> None:
    older = Expense(expense_id="a", name="Older", amount=1.0, created_at=START)
    newer = Expense(expense_id="b", name="Newer", amount=1.0, created_at=START + timedelta(days=1))
    assert sort_expenses([older, newer]) == [newer, older]


def test_expense_export_is_serialisable() -> None:
    expense = Expense(expense_id="x", name="Rent", amount=1500.0, created_at=START)
    assert expense.as_dict() == {
        "expense_id": "x",
        "name": "Rent",
        "amount": 1500.0,
        "created_at": "2024-06-01T09:00:00+00:00",
    }
