"""Mini README: Interactive interfaces for CleanSaveUp.

Exports the FastAPI application factory that serves the planner dashboard.
Display helpers live in ``formatting`` so they can be imported without
pulling in the web framework.
"""

from .web_app import create_application

__all__ = ["create_application"]
