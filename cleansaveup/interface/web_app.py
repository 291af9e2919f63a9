"""Mini README: FastAPI-powered dashboard for the CleanSaveUp planner.

Structure:
    * create_application - application factory wiring routes and templates.
    * Session state - one in-memory ``BudgetSession`` per application instance.

The dashboard renders the budget overview and exposes small form endpoints
for each input field. Browser form posts (``Accept: text/html``) are sent
back to the overview with a 303 redirect; other clients get the refreshed
snapshot as JSON. Rejected expenses are reported with HTTP 400 to JSON
clients and as a notice on the page to browsers; everything else is
normalised rather than refused.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from ..budget import BudgetSession
from ..configuration import CleanSaveUpSettings, get_settings
from ..exceptions import InvalidExpenseError
from ..logging_utils import get_logger
from .formatting import format_currency, format_percent, remaining_budget_tone

LOGGER = get_logger(__name__)

_MONEY_FIELDS = (
    "monthly_savings",
    "total_spending_budget",
    "total_expenses",
    "remaining_budget",
    "projected_savings",
)
_EXPENSE_REJECTED = "Please enter a valid name and positive amount for the expense."


def _dashboard_payload(session: BudgetSession, symbol: str) -> Dict[str, object]:
    """Snapshot plus display strings the page renders verbatim."""

    payload = session.export_snapshot()
    summary = session.summary
    display: Dict[str, object] = {
        field: format_currency(getattr(summary, field), symbol) for field in _MONEY_FIELDS
    }
    display["income"] = format_currency(session.state.income, symbol)
    display["savings_rate"] = format_percent(session.state.savings_rate_percent)
    display["spending_rate"] = format_percent(summary.spending_rate_percent)
    display["remaining_budget_tone"] = remaining_budget_tone(summary.remaining_budget)
    display["expenses"] = [
        {
            "expense_id": expense.expense_id,
            "name": expense.name,
            "amount": format_currency(expense.amount, symbol),
        }
        for expense in session.state.expenses
    ]
    payload["display"] = display
    return payload


def _wants_html(request: Request) -> bool:
    """Browsers submitting a form ask for HTML; API clients do not."""

    return "text/html" in request.headers.get("accept", "")


def _back_to_dashboard(notice: Optional[str] = None) -> RedirectResponse:
    url = "/" if notice is None else f"/?{urlencode({'notice': notice})}"
    return RedirectResponse(url, status_code=303)


def create_application(settings: Optional[CleanSaveUpSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and a fresh session."""

    settings = settings or get_settings()
    app = FastAPI(title="CleanSaveUp Planner", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    session = BudgetSession(settings=settings)
    symbol = settings.currency_symbol

    def respond(request: Request, **extra: object) -> Response:
        """Redirect browsers to the overview, otherwise return the snapshot."""

        if _wants_html(request):
            return _back_to_dashboard()
        payload = _dashboard_payload(session, symbol)
        payload.update(extra)
        return JSONResponse(payload)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request, notice: Optional[str] = None) -> HTMLResponse:
        """Render the budget overview."""

        payload = _dashboard_payload(session, symbol)
        LOGGER.debug(
            "Rendering dashboard: income=%.2f expenses=%s",
            session.state.income,
            len(session.state.expenses),
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "state": session.state,
                "summary": session.summary,
                "inputs": session.inputs,
                "display": payload["display"],
                "notice": notice,
            },
        )

    @app.get("/summary")
    async def summary() -> JSONResponse:
        """Return the current snapshot."""

        return JSONResponse(_dashboard_payload(session, symbol))

    @app.post("/income")
    async def update_income(request: Request, value: str = Form("")) -> Response:
        """Apply the income field."""

        session.set_income(value)
        return respond(request)

    @app.post("/savings-rate")
    async def update_savings_rate(request: Request, value: str = Form("")) -> Response:
        """Apply the savings-rate field; ``applied`` is false when it was ignored."""

        applied = session.set_savings_rate(value)
        return respond(request, applied=applied)

    @app.post("/goal")
    async def update_goal(
        request: Request, name: str = Form(""), duration: str = Form("")
    ) -> Response:
        """Apply both goal fields."""

        session.set_goal(name, duration)
        return respond(request)

    @app.post("/expenses")
    async def create_expense(
        request: Request, name: str = Form(""), amount: str = Form("")
    ) -> Response:
        """Add an expense or report why it was rejected."""

        try:
            expense = session.add_expense(name, amount)
        except InvalidExpenseError as error:
            LOGGER.info("Rejected expense %r / %r: %s", name, amount, error)
            if _wants_html(request):
                return _back_to_dashboard(_EXPENSE_REJECTED)
            raise HTTPException(status_code=400, detail=_EXPENSE_REJECTED) from error
        return respond(request, expense=expense.as_dict())

    @app.delete("/expenses/{expense_id}")
    async def remove_expense(request: Request, expense_id: str) -> Response:
        """Delete an expense; unknown ids report ``removed: false``."""

        removed = session.delete_expense(expense_id)
        return respond(request, removed=removed)

    @app.post("/expenses/{expense_id}/delete")
    async def remove_expense_from_form(request: Request, expense_id: str) -> Response:
        """Form-friendly delete used by the buttons on each expense row."""

        removed = session.delete_expense(expense_id)
        return respond(request, removed=removed)

    return app
