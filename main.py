import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.core.config import Settings, settings
from app.core.database import ConnectionState, Database
from app.core.exceptions import register_exception_handlers
from app.core.middleware import BodySizeLimitMiddleware
from app.core.lifecycle import ConnectionSupervisor
from app.api.routers import app_usage, device, eye_tracking, sensor, touch

logger = logging.getLogger(__name__)

HEALTH_STATUS = {
    ConnectionState.connected: "healthy",
    ConnectionState.connecting: "starting",
    ConnectionState.degraded: "degraded",
    ConnectionState.disconnected: "unhealthy",
}


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    logging.basicConfig(
        level=app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # =====================================================================
    # LIFECYCLE
    # =====================================================================

    database = Database(app_settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        # uvicorn stops accepting and drains requests before this exits
        supervisor = ConnectionSupervisor.from_settings(database, app_settings)
        application.state.supervisor = supervisor
        await supervisor.start()
        try:
            yield
        finally:
            await supervisor.stop()

    # =====================================================================
    # CREATE APP
    # =====================================================================

    application = FastAPI(
        title=app_settings.APP_NAME,
        debug=app_settings.DEBUG,
        description="Telemetry ingestion API for the adaptive UI tracker app",
        version="1.0.0",
        lifespan=lifespan,
    )
    application.state.settings = app_settings
    application.state.database = database
    application.state.started_at = time.monotonic()

    # =====================================================================
    # MIDDLEWARE
    # =====================================================================

    application.add_middleware(BodySizeLimitMiddleware, max_body_bytes=app_settings.MAX_BODY_BYTES)

    # CORS is added last so it wraps every response, 413s included
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # =====================================================================
    # SYSTEM ENDPOINTS
    # =====================================================================

    @application.get("/", response_class=PlainTextResponse)
    def root():
        """Liveness text."""
        return f"{app_settings.APP_NAME} is running on {database.backend}"

    @application.get("/api/ping")
    def ping():
        """Connectivity check for clients."""
        logger.info("Ping received")
        return {
            "message": "pong",
            "database": database.backend,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @application.get("/health")
    def health_check(request: Request):
        """Liveness probe: store connectivity and process uptime."""
        return {
            "status": HEALTH_STATUS[database.state],
            "database": "connected" if database.is_connected else "disconnected",
            "uptime": round(time.monotonic() - request.app.state.started_at, 3),
        }

    # =====================================================================
    # ROUTES
    # =====================================================================

    application.include_router(device.router)
    application.include_router(sensor.router)
    application.include_router(touch.router)
    application.include_router(eye_tracking.router)
    application.include_router(app_usage.router)

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
    )
