import asyncio
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import dashboard
from app.core.config import settings, _ENV_FILE
from app.services.dashboard_service import ScheduleDashboard
from app.services.schedule_client import ScheduleApiClient, build_http_client

if os.getenv("ENV") != "production":
    logging.basicConfig(level=logging.DEBUG)
else:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}',
    )
logger = logging.getLogger(__name__)


async def _next_appointment_loop(board: ScheduleDashboard, interval: int) -> None:
    """Keep the next appointment fresh as time passes, without refetching."""
    while True:
        await asyncio.sleep(interval)
        upcoming = board.refresh_next_appointment()
        logger.debug("Next appointment re-evaluated: %s", upcoming.id if upcoming else None)


def _log_startup() -> None:
    logger.info("Loading .env from: %s (exists: %s)", _ENV_FILE, _ENV_FILE.exists())
    logger.info("Upstream schedule API: %s (timezone %s)", settings.schedule_api_url, settings.timezone)
    if not settings.provider_id:
        logger.warning("PROVIDER_ID is not set; month availability requests will fail")
    if not settings.auth_configured:
        logger.warning("API_TOKEN is not set; upstream requests are sent unauthenticated")
    if settings.next_appointment_tick_seconds > 0:
        logger.info("Next appointment re-evaluated every %ds", settings.next_appointment_tick_seconds)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _log_startup()
    http = build_http_client()
    board = ScheduleDashboard(
        ScheduleApiClient(http),
        settings.provider_id,
        cutoff_hour=settings.morning_cutoff_hour,
    )
    # Load failures are kept on the stores; the app still starts
    await board.start()
    app.state.dashboard = board
    task = None
    if settings.next_appointment_tick_seconds > 0:
        task = asyncio.create_task(_next_appointment_loop(board, settings.next_appointment_tick_seconds))
    yield
    if task is not None:
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
    await http.aclose()


app = FastAPI(
    title="Schedule Dashboard API",
    description="Provider schedule dashboard: month availability, day schedule, next appointment",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(dashboard.router, prefix="/api/v1")


def _cors_headers(origin: str | None) -> dict[str, str]:
    """Add CORS headers to error responses so the browser doesn't block them."""
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "GET, POST, PUT, OPTIONS",
        "Access-Control-Allow-Headers": "Authorization, Content-Type",
    }
    if origin and origin in settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = origin
    elif settings.cors_origins_list:
        headers["Access-Control-Allow-Origin"] = settings.cors_origins_list[0]
    return headers


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return actual error in JSON; include CORS so 500 responses are not blocked by browser."""
    origin = request.headers.get("origin")
    headers = _cors_headers(origin)
    if isinstance(exc, HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=headers,
        )
    logger.exception("Unhandled exception: %s", exc)
    detail = f"{type(exc).__name__}: {str(exc)}"
    return JSONResponse(
        status_code=500,
        content={"detail": detail},
        headers=headers,
    )


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
