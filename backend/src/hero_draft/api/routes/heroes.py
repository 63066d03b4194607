"""REST endpoints for the hero catalog."""

from fastapi import APIRouter, Request

from hero_draft.api.dependencies import get_catalog

router = APIRouter(prefix="/api/heroes", tags=["heroes"])


@router.get("")
async def list_heroes(request: Request):
    """List heroes in catalog order, plus names grouped by role."""
    catalog = get_catalog(request)
    return {
        "heroes": [
            {"id": h.id, "name": h.name, "role": h.role, "image": h.image}
            for h in catalog
        ],
        "by_role": {
            role: [h.name for h in heroes]
            for role, heroes in catalog.by_role().items()
        },
    }
