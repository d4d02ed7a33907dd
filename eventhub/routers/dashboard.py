"""Admin dashboard page and its JSON counterpart."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from eventhub.models.dashboard import DashboardSnapshot, ViewModeUpdate
from eventhub.viewmodels.dashboard import DashboardViewModel

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Admin Dashboard"])


def get_dashboard(request: Request) -> DashboardViewModel:
    """
    Provide the dashboard view-model created during application startup.

    Returns:
        DashboardViewModel: The process-wide view-model stored on `app.state`.
    """
    return request.app.state.dashboard


@router.get("/admin", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    dashboard: Annotated[DashboardViewModel, Depends(get_dashboard)],
    view: Annotated[str | None, Query()] = None,
):
    """
    Render the admin dashboard.

    While the dashboard is loading only a loading indicator is rendered;
    afterwards exactly one section, the active view mode, is shown.
    An optional `view` query parameter switches the mode first.
    """
    if view is not None:
        dashboard.set_view_mode(view)
    return templates.TemplateResponse(
        request, "admin/dashboard.html", {"dashboard": dashboard.snapshot()}
    )


@router.post("/admin/view/{mode}")
def switch_view(
    mode: str,
    dashboard: Annotated[DashboardViewModel, Depends(get_dashboard)],
) -> RedirectResponse:
    """Switch the active section from the page toggles and go back to the page."""
    dashboard.set_view_mode(mode)
    return RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/api/admin/dashboard", response_model=DashboardSnapshot)
def get_dashboard_snapshot(
    dashboard: Annotated[DashboardViewModel, Depends(get_dashboard)],
) -> DashboardSnapshot:
    """
    Return the current dashboard state with derived chart data.

    Revenue figures in `stats`, `trends` and `revenue_summary` are in minor
    units; `formatted_revenue` and the revenue chart labels are display strings.
    """
    return dashboard.snapshot()


@router.put("/api/admin/dashboard/view-mode", response_model=DashboardSnapshot)
def update_view_mode(
    update: ViewModeUpdate,
    dashboard: Annotated[DashboardViewModel, Depends(get_dashboard)],
) -> DashboardSnapshot:
    """
    Switch the active section.

    Example request:
        {"mode": "revenue"}
    """
    dashboard.set_view_mode(update.mode)
    return dashboard.snapshot()
