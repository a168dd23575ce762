"""Router aggregation for the gateway server."""

from __future__ import annotations

from fastapi import APIRouter

from server.routes import health as health_router_module
from server.routes import messages as messages_router_module

# Create aggregated router
api_router = APIRouter(prefix="/api/v1")

# Include routers
api_router.include_router(health_router_module.router)
api_router.include_router(messages_router_module.router)

__all__ = ["api_router"]
