"""Tests for in-memory room management."""

from hero_draft.models.draft import DraftConfiguration, DraftMode
from hero_draft.services.room_manager import RoomManager


def test_create_and_get_room():
    manager = RoomManager()
    room = manager.create_room(DraftConfiguration(mode=DraftMode.MRI))

    assert manager.get_room(room.id) is room
    assert room.config.mode == DraftMode.MRI
    assert manager.list_rooms() == [
        {"id": room.id, "mode": "MRI", "step": 0, "total_steps": 12, "complete": False}
    ]


def test_remove_room():
    manager = RoomManager()
    room = manager.create_room(DraftConfiguration())

    assert manager.remove_room(room.id) is True
    assert manager.get_room(room.id) is None
    assert manager.remove_room(room.id) is False


def test_prune_expired_skips_busy_rooms():
    manager = RoomManager(ttl_seconds=10)
    idle = manager.create_room(DraftConfiguration())
    busy = manager.create_room(DraftConfiguration())
    fresh = manager.create_room(DraftConfiguration())
    manager.touch(idle, now=100.0)
    manager.touch(busy, now=100.0)
    manager.touch(fresh, now=195.0)

    removed = manager.prune_expired(now=200.0, skip={busy.id})

    assert removed == [idle.id]
    assert manager.get_room(busy.id) is busy
    assert manager.get_room(fresh.id) is fresh


def test_room_manager_is_created_once_per_app():
    from types import SimpleNamespace

    from hero_draft.api.dependencies import get_catalog, get_room_manager
    from hero_draft.services.hero_catalog import HeroCatalog

    catalog = HeroCatalog()
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(catalog=catalog)))

    manager = get_room_manager(request)
    assert isinstance(manager, RoomManager)
    assert get_room_manager(request) is manager
    assert get_catalog(request) is catalog
