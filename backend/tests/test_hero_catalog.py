"""Tests for hero catalog loading and role normalization."""
import json
import pytest
from hero_draft.services.hero_catalog import HeroCatalog
from hero_draft.utils.role_normalizer import normalize_role, role_sort_key


@pytest.fixture
def heroes_file(tmp_path):
    """Create a small hero catalog file."""
    data = {
        "heroes": [
            {"id": "loki", "name": "Loki", "role": "Strategist", "image": "loki.png"},
            {"id": "hulk", "name": "Hulk", "role": "Tank", "image": "hulk.png"},
            {"name": "Star-Lord", "role": "DPS", "image": "star-lord.png"},
            {"id": "mystery", "name": "Mystery", "role": "Flex", "image": "mystery.png"},
            {"id": "storm", "name": "Storm", "role": "duelist", "image": "storm.png"},
        ]
    }
    path = tmp_path / "heroes.json"
    path.write_text(json.dumps(data))
    return path


def test_loads_heroes_in_file_order(heroes_file):
    catalog = HeroCatalog.from_file(heroes_file)
    assert len(catalog) == 5
    assert catalog.names() == ["Loki", "Hulk", "Star-Lord", "Mystery", "Storm"]


def test_roles_are_normalized(heroes_file):
    catalog = HeroCatalog.from_file(heroes_file)
    assert catalog.get("Hulk").role == "vanguard"
    assert catalog.get("Star-Lord").role == "duelist"
    assert catalog.get("Loki").role == "strategist"
    # Unknown roles are kept verbatim
    assert catalog.get("Mystery").role == "Flex"


def test_missing_id_is_derived_from_name(heroes_file):
    catalog = HeroCatalog.from_file(heroes_file)
    assert catalog.get("Star-Lord").id == "star-lord"


def test_lookup(heroes_file):
    catalog = HeroCatalog.from_file(heroes_file)
    assert "Loki" in catalog
    assert "Thanos" not in catalog
    assert catalog.get("Thanos") is None


def test_by_role_orders_canonical_roles_first(heroes_file):
    catalog = HeroCatalog.from_file(heroes_file)
    grouped = catalog.by_role()
    assert list(grouped) == ["vanguard", "duelist", "strategist", "Flex"]
    assert [h.name for h in grouped["duelist"]] == ["Star-Lord", "Storm"]


def test_missing_file_gives_empty_catalog(tmp_path):
    catalog = HeroCatalog.from_file(tmp_path / "nope.json")
    assert len(catalog) == 0
    assert list(catalog) == []


def test_normalize_role():
    assert normalize_role("Vanguard") == "vanguard"
    assert normalize_role(" healer ") == "strategist"
    assert normalize_role("DPS") == "duelist"
    assert normalize_role("Flex") is None
    assert normalize_role(None) is None


def test_role_sort_key():
    assert role_sort_key("tank") < role_sort_key("dps") < role_sort_key("healer")
    assert role_sort_key("unknown") == 3
