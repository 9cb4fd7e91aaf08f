"""Product Routes — read-only views over the product catalog.

Invariants:
    - Unknown product names return the 404 PRODUCT_NOT_FOUND envelope
    - Listing preserves catalog order; other_mod accessories included unless filtered
"""

from fastapi import APIRouter, Depends, Query

from modroster.api.dependencies import get_catalog
from modroster.core.catalog import CatalogRegistry
from modroster.schemas.catalog import ProductDetail, ProductSummary

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductSummary])
async def list_products(
    implants_only: bool = Query(False),
    catalog: CatalogRegistry = Depends(get_catalog),
):
    """List catalog products with their RF classification."""
    return [
        ProductSummary.from_product(p)
        for p in catalog.products.values()
        if not (implants_only and p.other_mod)
    ]


@router.get("/{name}", response_model=ProductDetail)
async def get_product(
    name: str, catalog: CatalogRegistry = Depends(get_catalog),
):
    return ProductDetail.from_product(catalog.require_product(name))
