"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from internship_api.core.errors import NotFound
from internship_api.api.routes.student_routes import router as student_router
from internship_api.api.routes.internship_routes import router as internship_router
from internship_api.api.routes.placement_routes import router as placement_router
from internship_api.api.routes.upload_routes import router as upload_router
from internship_api.api.routes.recommendation_routes import router as recommendation_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(student_router)
api_router.include_router(internship_router)
api_router.include_router(placement_router)
api_router.include_router(upload_router)
api_router.include_router(recommendation_router)


# Must stay last: anything under /api that no router claimed
@api_router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False
)
async def api_not_found(path: str):
    raise NotFound("Not found")
