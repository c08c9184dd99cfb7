"""
FastAPI Application Entry Point

GrubDash API - dishes and orders for a food delivery service, kept in
process memory.

Endpoints:
    - /dishes: List, create, read and update dishes
    - /orders: List, create, read, update and delete orders
    - GET /health: Collection sizes and liveness

Version: 1.0.0
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from grubdash.api import router as api_router
from grubdash.core.config import Settings, get_settings, setup_logging
from grubdash.core.errors import register_exception_handlers
from grubdash.repositories import InMemoryRepository
from grubdash.schemas import Dish, HealthResponse, Order
from grubdash.services.fixtures import seed_repositories
from grubdash.services.ids import get_id_allocator

logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    settings: Settings = app.state.settings

    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info(f"   Id strategy: {settings.id_strategy.value}")
    logger.info("=" * 60)

    if settings.seed_data:
        seed_repositories(app.state.dishes, app.state.orders)

    logger.info(
        f"✅ Ready with {app.state.dishes.count()} dishes "
        f"and {app.state.orders.count()} orders"
    )

    yield  # Application runs

    # In-memory collections are discarded with the process
    logger.info("Shutting down...")


# =============================================================================
# APPLICATION FACTORY
# =============================================================================

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and configure the FastAPI application.

    Each application owns its own dish and order collections and id
    allocators, attached to ``app.state``.

    Args:
        settings: Settings to use instead of the cached environment ones

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    setup_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name,
        description="Dishes and orders for a food delivery service.",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.dishes = InMemoryRepository[Dish]("dishes")
    app.state.orders = InMemoryRepository[Order]("orders")
    app.state.dish_ids = get_id_allocator(settings.id_strategy)
    app.state.order_ids = get_id_allocator(settings.id_strategy)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=settings.debug)

    @app.get("/", tags=["Root"])
    async def root() -> dict[str, str]:
        """API root with navigation links."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "documentation": "/docs",
            "dishes": "/dishes",
            "orders": "/orders",
            "health": "/health",
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="System Health Check",
    )
    async def health_check(request: Request) -> HealthResponse:
        return HealthResponse(
            status="operational",
            dishes=request.app.state.dishes.count(),
            orders=request.app.state.orders.count(),
            timestamp=datetime.now(),
        )

    app.include_router(api_router)

    return app


app = create_app()
