"""Chip Routes — chip detail with emulation-resolved attributes.

Invariants:
    - Unknown chip names return the 404 CHIP_NOT_FOUND envelope
    - A chip with unresolvable attributes surfaces UNKNOWN_ATTRIBUTE (500), never a default
"""

from fastapi import APIRouter, Depends

from modroster.api.dependencies import get_catalog
from modroster.core.catalog import CatalogRegistry
from modroster.schemas.catalog import ChipDetail

router = APIRouter(prefix="/api/v1/chips", tags=["chips"])


@router.get("", response_model=list[str])
async def list_chips(catalog: CatalogRegistry = Depends(get_catalog)):
    return list(catalog.chips)


@router.get("/{name}", response_model=ChipDetail)
async def get_chip(
    name: str, catalog: CatalogRegistry = Depends(get_catalog),
):
    return ChipDetail.from_chip(catalog.require_chip(name))
