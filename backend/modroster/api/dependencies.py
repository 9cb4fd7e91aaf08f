"""API Dependencies — hands the startup-built catalog to route handlers.

Invariants:
    - The catalog lives on app.state, set once by the lifespan
    - Routes never call build_catalog() themselves
"""

from fastapi import Request

from modroster.core.catalog import CatalogRegistry


def get_catalog(request: Request) -> CatalogRegistry:
    return request.app.state.catalog
