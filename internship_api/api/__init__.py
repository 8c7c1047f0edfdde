"""
API module - FastAPI routers and endpoint definitions.

Usage:
    from internship_api.api import api_router
    app.include_router(api_router, prefix="/api")
"""

from internship_api.api.routes import api_router

__all__ = ["api_router"]
