"""API route modules."""

from src.api.routes.health import router as health_router
from src.api.routes.production_plan import router as production_plan_router

__all__ = [
    "health_router",
    "production_plan_router",
]
