"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hero_draft.config import settings
from hero_draft.api.routes.heroes import router as heroes_router
from hero_draft.api.routes.rooms import router as rooms_router
from hero_draft.services.hero_catalog import HeroCatalog
from hero_draft.services.room_manager import RoomManager


def get_heroes_path() -> Path:
    """Get the hero catalog path from settings, resolving relative paths from the repo root."""
    heroes_path = Path(settings.heroes_path)
    if heroes_path.is_absolute():
        return heroes_path
    repo_root = Path(__file__).parent.parent.parent.parent
    return repo_root / heroes_path


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Tests may install their own catalog and room manager before startup
    if not hasattr(app.state, "catalog"):
        app.state.catalog = HeroCatalog.from_file(get_heroes_path())
    if not hasattr(app.state, "room_manager"):
        app.state.room_manager = RoomManager(ttl_seconds=settings.room_ttl_seconds)
    yield


app = FastAPI(
    title="Hero Draft",
    description="Ban/protect draft rooms for two-team matches",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "hero-draft"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Hero Draft API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(rooms_router)
app.include_router(heroes_router)
