"""Utility modules for hero_draft."""

from hero_draft.utils.role_normalizer import (
    ROLE_ALIASES,
    ROLE_ORDER,
    normalize_role,
    role_sort_key,
)

__all__ = [
    "ROLE_ALIASES",
    "ROLE_ORDER",
    "normalize_role",
    "role_sort_key",
]
