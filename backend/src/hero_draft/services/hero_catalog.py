"""Hero catalog loading."""

import json
import logging
from pathlib import Path
from typing import Iterator, Optional

from hero_draft.models.hero import Hero
from hero_draft.utils.role_normalizer import normalize_role, role_sort_key

logger = logging.getLogger(__name__)


class HeroCatalog:
    """Ordered, read-only list of draftable heroes.

    Expected file format::

        {"heroes": [{"id": "...", "name": "...", "role": "...", "image": "..."}]}
    """

    def __init__(self, heroes: Optional[list[Hero]] = None):
        self._heroes: list[Hero] = list(heroes or [])
        self._by_name: dict[str, Hero] = {hero.name: hero for hero in self._heroes}

    @classmethod
    def from_file(cls, path: Path) -> "HeroCatalog":
        """Load a catalog from JSON. A missing file yields an empty catalog."""
        if not path.exists():
            logger.warning(f"Hero catalog not found at {path}")
            return cls()

        with open(path) as f:
            data = json.load(f)

        heroes = []
        for entry in data.get("heroes", []):
            role = entry.get("role", "")
            heroes.append(
                Hero(
                    id=str(entry.get("id") or entry["name"].lower().replace(" ", "-")),
                    name=entry["name"],
                    role=normalize_role(role) or role,
                    image=entry.get("image", ""),
                )
            )
        logger.info(f"Loaded {len(heroes)} heroes from {path}")
        return cls(heroes)

    def __iter__(self) -> Iterator[Hero]:
        return iter(self._heroes)

    def __len__(self) -> int:
        return len(self._heroes)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[Hero]:
        """Look up a hero by display name."""
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [hero.name for hero in self._heroes]

    def by_role(self) -> dict[str, list[Hero]]:
        """Group heroes by role, canonical roles first, catalog order within a role."""
        grouped: dict[str, list[Hero]] = {}
        for hero in self._heroes:
            grouped.setdefault(hero.role, []).append(hero)
        return dict(sorted(grouped.items(), key=lambda item: role_sort_key(item[0])))
