"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.dependencies import build_data_manager
from app.core.logging import setup_logging
from app.api import health, menu, favorites, groups, orders
from app.api.error_handling import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    app.state.data_manager = build_data_manager()
    yield
    # Shutdown
    app.state.data_manager = None


app = FastAPI(
    title=settings.app_name,
    description="Menu, groups, favorites and order history",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(health.router, tags=["health"])
app.include_router(menu.router, tags=["menu"])
app.include_router(favorites.router, tags=["favorites"])
app.include_router(groups.router, tags=["groups"])
app.include_router(orders.router, tags=["orders"])


@app.get("/")
async def root():
    """API information."""
    return {
        "message": f"{settings.app_name} API",
        "version": "0.1.0",
    }
