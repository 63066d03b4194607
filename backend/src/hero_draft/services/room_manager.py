"""Draft room session management."""

import logging
import time
import uuid
from typing import Iterable

from hero_draft.models.draft import DraftConfiguration
from hero_draft.services.draft_room import DraftRoom

logger = logging.getLogger(__name__)


class RoomManager:
    """In-memory manager for active draft rooms."""

    def __init__(self, ttl_seconds: float = 60 * 60):
        self.ttl_seconds = ttl_seconds
        self.rooms: dict[str, DraftRoom] = {}

    def create_room(self, config: DraftConfiguration) -> DraftRoom:
        """Create a new draft room.

        Args:
            config: Settings captured by the room creation form

        Returns:
            The created DraftRoom
        """
        room_id = f"room_{uuid.uuid4().hex[:12]}"
        room = DraftRoom(id=room_id, config=config)
        self.rooms[room_id] = room
        logger.info(
            f"Created {config.mode.value} room {room_id}: "
            f"{config.team1_name} vs {config.team2_name}"
        )
        return room

    def get_room(self, room_id: str) -> DraftRoom | None:
        """Get a room by ID."""
        return self.rooms.get(room_id)

    def is_expired(self, room: DraftRoom, now: float | None = None) -> bool:
        now = now or time.time()
        return (now - room.last_access) >= self.ttl_seconds

    def touch(self, room: DraftRoom, now: float | None = None) -> None:
        room.last_access = now or time.time()

    def remove_room(self, room_id: str) -> bool:
        """Remove a room. Returns False if it did not exist."""
        return self.rooms.pop(room_id, None) is not None

    def prune_expired(
        self, now: float | None = None, skip: Iterable[str] = ()
    ) -> list[str]:
        """Remove idle rooms and return their IDs.

        Args:
            now: Reference time (defaults to the current time)
            skip: Room IDs to keep regardless of age, e.g. rooms in use
        """
        now = now or time.time()
        skip = set(skip)
        expired = [
            room_id
            for room_id, room in self.rooms.items()
            if room_id not in skip and self.is_expired(room, now)
        ]
        for room_id in expired:
            del self.rooms[room_id]
        if expired:
            logger.info(f"Pruned {len(expired)} expired room(s)")
        return expired

    def list_rooms(self) -> list[dict]:
        """List all active rooms (for debugging)."""
        return [
            {
                "id": r.id,
                "mode": r.config.mode.value,
                "step": r.step_index,
                "total_steps": len(r.sequence),
                "complete": r.is_complete,
            }
            for r in self.rooms.values()
        ]
