"""Centralized hero role normalization.

Catalog files and clients spell roles in many ways. The canonical format is
lowercase: vanguard, duelist, strategist.
"""

from typing import Optional

# Mapping from any known role spelling to canonical lowercase
ROLE_ALIASES: dict[str, str] = {
    # Vanguard variations
    "vanguard": "vanguard",
    "VANGUARD": "vanguard",
    "tank": "vanguard",
    "frontline": "vanguard",

    # Duelist variations
    "duelist": "duelist",
    "DUELIST": "duelist",
    "dps": "duelist",
    "DPS": "duelist",
    "damage": "duelist",

    # Strategist variations
    "strategist": "strategist",
    "STRATEGIST": "strategist",
    "support": "strategist",
    "healer": "strategist",
    "heal": "strategist",
}

# Role ordering for consistent display/sorting
ROLE_ORDER = ["vanguard", "duelist", "strategist"]


def normalize_role(role: Optional[str]) -> Optional[str]:
    """Normalize a role string to canonical lowercase format.

    Examples:
        >>> normalize_role("Tank")
        'vanguard'
        >>> normalize_role("DPS")
        'duelist'
        >>> normalize_role(None)
        None
    """
    if role is None:
        return None

    role_lower = role.strip().lower()

    if role in ROLE_ALIASES:
        return ROLE_ALIASES[role]

    if role_lower in ROLE_ALIASES:
        return ROLE_ALIASES[role_lower]

    return None


def role_sort_key(role: Optional[str]) -> int:
    """Position of ``role`` in ROLE_ORDER; unknown roles sort last."""
    normalized = normalize_role(role)
    if normalized is None:
        return len(ROLE_ORDER)
    return ROLE_ORDER.index(normalized)
