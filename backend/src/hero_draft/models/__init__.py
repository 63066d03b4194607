"""Data models for the hero draft backend."""

from hero_draft.models.draft import (
    ActionType,
    DraftAction,
    DraftConfiguration,
    DraftContext,
    DraftMode,
    DraftState,
    HeroStatus,
    StatusKind,
    Team,
    ban_record,
)
from hero_draft.models.hero import Hero

__all__ = [
    "ActionType",
    "DraftAction",
    "DraftConfiguration",
    "DraftContext",
    "DraftMode",
    "DraftState",
    "HeroStatus",
    "StatusKind",
    "Team",
    "ban_record",
    "Hero",
]
