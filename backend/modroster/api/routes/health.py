"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ returns 200 whenever the process is up and the catalog is built
"""

from fastapi import APIRouter, Depends, status

from modroster.api.dependencies import get_catalog
from modroster.core.catalog import CatalogRegistry

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(catalog: CatalogRegistry = Depends(get_catalog)):
    return {
        "status": "healthy",
        "service": "modroster-api",
        "products": len(catalog),
        "chips": len(catalog.chips),
    }
