"""
Internship Tracker - Main Application

FastAPI backend with:
- PostgreSQL (asyncpg) for students, internships, placements
- Azure Blob Storage for resume files (read-only SAS links)
- Azure AI Language for skill analysis
- OpenAI-compatible LLM for internship recommendations

Run: uvicorn internship_api.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from internship_api.api.routes import api_router
from internship_api.core.config import get_settings
from internship_api.core.errors import AppError
from internship_api.db.postgres import get_pool_manager, test_postgres_connection
from internship_api.schemas.schemas import HealthResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Internship Tracker",
    description="""
    Record management for students, internships and placements.

    ## Features
    - **Students / Internships / Placements**: CRUD with partial updates
    - **Uploads**: Resume upload with a time-limited read-only link
    - **Recommendations**: LLM suggestions and static keyword matching
    - **Skill analysis**: Key phrases and entities from free text
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"error": "Invalid request"})
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    return JSONResponse(status_code=400, content={"error": message})


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Report whether the shared database pool can be reached."""
    connected = await test_postgres_connection()
    return HealthResponse(
        status="healthy" if connected else "degraded",
        database="connected" if connected else "disconnected"
    )


@app.get("/", tags=["Health"])
async def root():
    return {
        "status": "healthy",
        "app": "Internship Tracker",
        "database_pool": "ready" if get_pool_manager().is_ready else "not initialized"
    }
