"""Hero catalog models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hero:
    """A draftable hero from the catalog."""

    id: str
    name: str
    role: str  # vanguard, duelist, strategist
    image: str  # File name under the frontend's /heroes/ directory
