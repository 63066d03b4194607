"""Business logic services."""

from hero_draft.services.draft_room import DraftCompleteError, DraftError, DraftRoom
from hero_draft.services.eligibility_resolver import resolve_grid, resolve_status
from hero_draft.services.hero_catalog import HeroCatalog
from hero_draft.services.room_manager import RoomManager
from hero_draft.services.selection_commit import (
    SelectionCommit,
    SelectionPhase,
    SelectionState,
)

__all__ = [
    "DraftCompleteError",
    "DraftError",
    "DraftRoom",
    "resolve_grid",
    "resolve_status",
    "HeroCatalog",
    "RoomManager",
    "SelectionCommit",
    "SelectionPhase",
    "SelectionState",
]
