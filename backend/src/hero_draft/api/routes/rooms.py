"""REST endpoints for draft rooms."""

import logging
import threading
import time
from typing import Literal

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from hero_draft.api.dependencies import get_catalog, get_room_manager
from hero_draft.config import settings
from hero_draft.models.draft import (
    ActionType,
    DraftAction,
    DraftConfiguration,
    DraftMode,
    Team,
)
from hero_draft.services.draft_room import DraftRoom
from hero_draft.services.eligibility_resolver import resolve_status
from hero_draft.services.hero_catalog import HeroCatalog
from hero_draft.services.room_manager import RoomManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["rooms"])

# Per-room locks serialise propose/confirm/cancel on the same room
_room_locks: dict[str, threading.Lock] = {}
_room_locks_guard = threading.Lock()
_cleanup_lock = threading.Lock()
_last_cleanup = 0.0


def _prune_expired_rooms(manager: RoomManager, now: float | None = None) -> None:
    """Remove expired rooms opportunistically."""
    global _last_cleanup
    now = now or time.time()
    if now - _last_cleanup < settings.room_cleanup_interval_seconds:
        return

    with _cleanup_lock:
        if now - _last_cleanup < settings.room_cleanup_interval_seconds:
            return
        with _room_locks_guard:
            busy = {room_id for room_id, lock in _room_locks.items() if lock.locked()}
            for room_id in manager.prune_expired(now, skip=busy):
                _room_locks.pop(room_id, None)
        _last_cleanup = now


def _get_room_with_lock(request: Request, room_id: str) -> tuple[DraftRoom, threading.Lock]:
    """Fetch room and its lock, creating the lock if needed."""
    manager = get_room_manager(request)
    _prune_expired_rooms(manager)
    with _room_locks_guard:
        room = manager.get_room(room_id)
        if not room:
            raise HTTPException(status_code=404, detail="Room not found")
        lock = _room_locks.get(room_id)
        if lock is None:
            lock = threading.Lock()
            _room_locks[room_id] = lock
    return room, lock


def _touch_or_expire(manager: RoomManager, room: DraftRoom) -> None:
    now = time.time()
    if manager.is_expired(room, now):
        raise HTTPException(status_code=404, detail="Room expired")
    manager.touch(room, now)


class CreateRoomRequest(BaseModel):
    draft_mode: Literal["MRC", "MRI"] = "MRC"
    team1_name: str = Field("Team 1", min_length=1)
    team2_name: str = Field("Team 2", min_length=1)
    starting_team: Literal["team1", "team2"] = "team1"
    # Only checked for MRC; MRI ignores whatever the form last held
    bans_per_team: int = 3
    protects_per_team: int = 2


class SelectionRequest(BaseModel):
    hero: str


@router.post("", status_code=201)
async def create_room(request: Request, body: CreateRoomRequest):
    """Create a draft room from the room creation form."""
    manager = get_room_manager(request)
    _prune_expired_rooms(manager)

    try:
        config = DraftConfiguration(
            mode=DraftMode(body.draft_mode),
            team1_name=body.team1_name,
            team2_name=body.team2_name,
            starting_team=Team(body.starting_team),
            bans_per_team=body.bans_per_team,
            protects_per_team=body.protects_per_team,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    with _room_locks_guard:
        room = manager.create_room(config)
        _room_locks[room.id] = threading.Lock()

    return _serialize_room(room, get_catalog(request))


@router.get("")
async def list_rooms(request: Request):
    """List active rooms (for debugging)."""
    manager = get_room_manager(request)
    _prune_expired_rooms(manager)
    with _room_locks_guard:
        return {"rooms": manager.list_rooms()}


@router.get("/{room_id}")
async def get_room(request: Request, room_id: str):
    """Get room state and the hero grid for the current turn."""
    room, lock = _get_room_with_lock(request, room_id)
    with lock:
        _touch_or_expire(get_room_manager(request), room)
        return _serialize_room(room, get_catalog(request))


@router.post("/{room_id}/selection")
async def propose_selection(request: Request, room_id: str, body: SelectionRequest):
    """Propose a hero for the current turn and open the confirmation prompt."""
    room, lock = _get_room_with_lock(request, room_id)
    with lock:
        _touch_or_expire(get_room_manager(request), room)
        catalog = get_catalog(request)

        hero = catalog.get(body.hero)
        if hero is None:
            raise HTTPException(status_code=404, detail=f"Hero '{body.hero}' not found")

        if room.is_complete:
            raise HTTPException(status_code=400, detail="Draft is already complete")

        if room.selection.is_prompt_open:
            raise HTTPException(
                status_code=400,
                detail=f"Selection of '{room.selection.pending_hero}' is awaiting confirmation",
            )

        if not room.propose(hero):
            status = resolve_status(hero, room.state, room.context, room.config.mode)
            raise HTTPException(
                status_code=400,
                detail=f"Hero '{hero.name}' is not available ({status.kind.value})",
            )

        return _serialize_room(room, catalog)


@router.post("/{room_id}/selection/confirm")
async def confirm_selection(request: Request, room_id: str):
    """Commit the pending hero to the draft."""
    room, lock = _get_room_with_lock(request, room_id)
    with lock:
        _touch_or_expire(get_room_manager(request), room)

        action = room.confirm()
        if action is None:
            raise HTTPException(status_code=400, detail="No selection pending")

        response = _serialize_room(room, get_catalog(request))
        response["action"] = _serialize_action(action)
        return response


@router.post("/{room_id}/selection/cancel")
async def cancel_selection(request: Request, room_id: str):
    """Dismiss the confirmation prompt without committing."""
    room, lock = _get_room_with_lock(request, room_id)
    with lock:
        _touch_or_expire(get_room_manager(request), room)
        room.cancel()
        return _serialize_room(room, get_catalog(request))


@router.delete("/{room_id}")
async def end_room(request: Request, room_id: str):
    """End a room early."""
    manager = get_room_manager(request)
    with _room_locks_guard:
        if manager.remove_room(room_id):
            logger.info(f"Ended room {room_id}")
        _room_locks.pop(room_id, None)
    return {"status": "ended"}


# Helper functions

def _serialize_room(room: DraftRoom, catalog: HeroCatalog) -> dict:
    """Serialize a DraftRoom with its hero grid."""
    context = room.context
    config = room.config
    pending = room.selection.state

    return {
        "room_id": room.id,
        "config": {
            "draft_mode": config.mode.value,
            "team1_name": config.team1_name,
            "team2_name": config.team2_name,
            "starting_team": config.starting_team.value,
            "bans_per_team": config.effective_bans_per_team,
            "protects_per_team": config.effective_protects_per_team,
        },
        "draft_state": {
            "banned_heroes": sorted(room.state.banned_heroes),
            "team1_protected": sorted(room.state.team1_protected),
            "team2_protected": sorted(room.state.team2_protected),
            "action_count": room.step_index,
            "total_actions": len(room.sequence),
            "complete": room.is_complete,
            "remaining": {
                team.value: {action.value: room.remaining(team, action) for action in ActionType}
                for team in Team
            },
        },
        "turn": {
            "current_team": context.current_team.value,
            "current_team_name": config.team_name(context.current_team),
            "current_action": context.current_action.value if context.current_action else None,
            "disabled": context.disabled,
        },
        "pending_selection": (
            {
                "hero": pending.hero_name,
                "action": pending.action.value if pending.action else None,
                "team": pending.team.value,
            }
            if room.selection.is_prompt_open
            else None
        ),
        "history": [_serialize_action(a) for a in room.history],
        "heroes": [
            {
                "id": hero.id,
                "name": hero.name,
                "role": hero.role,
                "image": hero.image,
                "status": status.kind.value,
                "team": status.team.value if status.team else None,
            }
            for hero, status in room.grid(catalog)
        ],
    }


def _serialize_action(action: DraftAction) -> dict:
    """Serialize DraftAction to dict."""
    return {
        "sequence": action.sequence,
        "action_type": action.action_type.value,
        "team": action.team.value,
        "hero_name": action.hero_name,
    }
