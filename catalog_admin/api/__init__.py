"""API layer module.

Contains FastAPI routers, middleware and transport schemas.
"""

from catalog_admin.api.categories import router as categories_router
from catalog_admin.api.health import router as health_router

__all__ = [
    "categories_router",
    "health_router",
]
