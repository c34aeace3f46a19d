"""
API route modules.
"""

from api.routes.articles import router as articles_router
from api.routes.categories import router as categories_router
from api.routes.health import router as health_router
from api.routes.solutions import router as solutions_router

__all__ = ["articles_router", "categories_router", "health_router", "solutions_router"]
