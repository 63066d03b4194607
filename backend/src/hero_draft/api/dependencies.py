"""Shared app-state accessors for API routes."""

from fastapi import Request

from hero_draft.config import settings
from hero_draft.services.hero_catalog import HeroCatalog
from hero_draft.services.room_manager import RoomManager


def get_room_manager(request: Request) -> RoomManager:
    """Get the room manager from app state, creating it if startup did not."""
    if not hasattr(request.app.state, "room_manager"):
        request.app.state.room_manager = RoomManager(ttl_seconds=settings.room_ttl_seconds)
    return request.app.state.room_manager


def get_catalog(request: Request) -> HeroCatalog:
    """Get the hero catalog from app state, loading it if startup did not."""
    if not hasattr(request.app.state, "catalog"):
        from hero_draft.main import get_heroes_path

        request.app.state.catalog = HeroCatalog.from_file(get_heroes_path())
    return request.app.state.catalog
