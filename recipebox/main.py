"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipebox.api import auth, favorites, recipes
from recipebox.api.errors import register_exception_handlers
from recipebox.config import get_settings
from recipebox.database import SessionLocal, init_db
from recipebox.services.session_service import SessionService

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    db = SessionLocal()
    try:
        SessionService(db).purge_expired()
    finally:
        db.close()
    if settings.session_secret_is_default:
        logger.warning("Using the default session secret; set SESSION_SECRET")
    yield


app = FastAPI(
    title="RecipeBox API",
    description="Personal recipe collection with favorites and cook mode",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:8080",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(recipes.router)
app.include_router(favorites.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
