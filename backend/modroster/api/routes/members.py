"""Member Routes — aggregate one person's products into derived facts.

Invariants:
    - Unknown product names degrade to placeholders (listed in unknown_mods), never 404
    - Request size bounded by settings.max_member_mods
"""

import logging

from fastapi import APIRouter, Depends

from modroster.api.dependencies import get_catalog
from modroster.config import Settings, get_settings
from modroster.core.catalog import CatalogRegistry
from modroster.core.errors import InputValidationError
from modroster.core.member import resolve_member
from modroster.schemas.member import MemberResolveRequest, MemberResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/members", tags=["members"])


@router.post("/resolve", response_model=MemberResponse)
async def resolve(
    body: MemberResolveRequest,
    catalog: CatalogRegistry = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Resolve a member's product names and return the aggregated facts."""
    if len(body.mods) > settings.max_member_mods:
        raise InputValidationError(
            f"Too many mods: {len(body.mods)} > {settings.max_member_mods}",
            field="mods",
        )
    member = resolve_member(body.mods, catalog, name=body.name)
    if member.unknown_mods:
        logger.info(f"Member resolved with {len(member.unknown_mods)} unknown mod(s)")
    return MemberResponse.from_member(member)
