from fastapi import HTTPException, Request, status

from app.services.dashboard_service import ScheduleDashboard


def get_dashboard(request: Request) -> ScheduleDashboard:
    """Dashboard created by the app lifespan."""
    dashboard: ScheduleDashboard | None = getattr(request.app.state, "dashboard", None)
    if dashboard is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Dashboard not initialised",
        )
    return dashboard
