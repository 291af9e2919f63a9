"""Mini README: Core package initializer for the CleanSaveUp planner.

This module exposes convenience imports so callers can reach the logging
helper and the budget session without knowing the module layout. It stays
free of web framework imports so the calculation core can be used alone.
"""

from .budget import BudgetSession, derive_summary
from .logging_utils import get_logger

__all__ = ["BudgetSession", "derive_summary", "get_logger"]
