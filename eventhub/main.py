from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from eventhub.core.config import get_settings, parse_comma_separated_origins
from eventhub.core.error_handlers import register_exception_handlers
from eventhub.core.telemetry import setup_telemetry
from eventhub.routers import admin_events, dashboard
from eventhub.utils.logger import setup_logging
from eventhub.viewmodels.dashboard import DashboardViewModel


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Run startup and shutdown tasks around the application's lifetime.

    On startup: configures logging, initializes telemetry, and creates and activates the dashboard view-model (stored on `app.state.dashboard`). On shutdown: tears the view-model down, discarding its loading timer if it has not fired yet.
    """
    settings = get_settings()
    setup_logging(settings)
    setup_telemetry(app, settings)

    app.state.dashboard = DashboardViewModel(
        loading_delay=settings.DASHBOARD_LOADING_DELAY
    )
    app.state.dashboard.activate()
    yield
    await app.state.dashboard.teardown()


app = FastAPI(
    title=get_settings().PROJECT_NAME,
    description="Administration dashboard for the EventHub event platform",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        str(origin)
        for origin in parse_comma_separated_origins(get_settings().BACKEND_CORS_ORIGINS)
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health", include_in_schema=False)
def health_check():
    """
    Provide the application's liveness state for health checks.

    Returns:
        dict: A mapping with key "status" and value "ok" indicating the service is healthy.
    """
    return {"status": "ok"}


app.include_router(dashboard.router)
app.include_router(admin_events.router)
