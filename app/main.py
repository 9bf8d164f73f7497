"""
FastAPI Application Entry Point

Restaurant Ordering API - Hybrid Architecture
Uses the mock payment gateway in development and Stripe in production.

Endpoints:
    - POST /jwt: Bearer token issuing
    - /users, /menu, /reviews, /carts: Resource CRUD
    - /payments, /create-payment-intent: Stripe checkout
    - /admin-stats, /order-stats: Admin reporting
    - GET /health: System health check

Author: Khalil Bannouri
Version: 4.0.0
"""

import logging
from datetime import datetime
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import select
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import Settings, get_settings, setup_logging
from app.core.exceptions import AppError
from app.database import Database
from app.routers import all_routers
from app.schemas import HealthResponse
from app.services.payment import create_payment_service

logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.

    Builds the process-wide database handle and payment gateway and keeps
    them on ``app.state`` for the request dependencies.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    database = Database.from_settings(settings)
    await database.init_db()
    app.state.database = database
    logger.info("✅ Database initialized")

    payment_service = create_payment_service(settings)
    app.state.payment_service = payment_service
    logger.info(f"✅ Payment Service: {payment_service.provider_name}")

    # Validate production config
    if settings.use_real_services:
        missing = settings.validate_production_config()
        if missing:
            logger.warning(f"⚠️ Missing production config: {missing}")

    logger.info("✅ Application ready!")

    yield  # Application runs

    # Shutdown
    logger.info("Shutting down...")
    await database.dispose()
    logger.info("✅ Cleanup complete")


# =============================================================================
# ERROR HANDLERS
# =============================================================================

def _validation_message(exc: RequestValidationError) -> str:
    """Short human message for the first validation error."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    field = next(
        (str(part) for part in reversed(error.get("loc", ())) if isinstance(part, str)),
        "body",
    )
    if error.get("type") == "missing":
        return f"{field[:1].upper()}{field[1:]} is required"

    message = error.get("msg", "Invalid value").removeprefix("Value error, ")
    return f"{field}: {message}"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _validation_message(exc)
    logger.debug(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"message": message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    settings: Settings = request.app.state.settings
    return JSONResponse(
        status_code=500,
        content={
            "message": str(exc) if settings.debug else "Internal server error",
        },
    )


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings (tests); defaults to the cached
            environment settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Restaurant ordering backend: menu, carts, user roles, reviews "
            "and Stripe checkout."
        ),
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """API root with navigation links."""
        return {
            "message": "Restaurant server is running",
            "version": settings.app_version,
            "environment": settings.env_mode.value,
            "documentation": "/docs",
            "health": "/health",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="System Health Check",
    )
    async def health_check(request: Request) -> HealthResponse:
        """Verify the database and the payment gateway are reachable."""
        db_status = "healthy"
        try:
            async with request.app.state.database.session_maker() as session:
                await session.execute(select(1))
        except Exception as e:
            db_status = f"unhealthy: {str(e)}"
            logger.error(f"Database health check failed: {e}")

        gateway = request.app.state.payment_service
        gateway_status = "healthy" if await gateway.health_check() else "unhealthy"

        overall = "operational" if all(
            s == "healthy" for s in [db_status, gateway_status]
        ) else "degraded"

        return HealthResponse(
            status=overall,
            database=db_status,
            payment_gateway=gateway_status,
            timestamp=datetime.now(),
        )

    for router in all_routers:
        app.include_router(router)

    return app


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.api_host, port=settings.api_port)
