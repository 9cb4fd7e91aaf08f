"""Catalog Registry — the process-wide, read-only index of chips and products.

Invariants:
    - Built once by build_catalog(); never mutated afterwards
    - chips/products exposed as read-only mappings keyed by name
    - Every product chip reference resolves to a Chip in the registry
    - Missing chip attributes are NOT checked at build time (resolution is lazy);
      validate_catalog() reports them without raising

Design Decisions:
    - Explicit registry value passed to callers instead of a module-level dict
      filled by import side effect (ADR: build-once contract is testable)
    - Safe to share across readers without locks: no writer after build
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from modroster.core.chip import Chip, resolve_frequency, resolve_uid_length
from modroster.core.chip_table import CHIPS
from modroster.core.errors import (
    CatalogIntegrityError, ChipNotFoundError, ProductNotFoundError,
    UnknownAttributeError,
)
from modroster.core.product import Product, ProductMetadata
from modroster.core.product_table import PRODUCT_METADATA

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogRegistry:
    """Immutable chip and product index."""
    chips: Mapping[str, Chip]
    products: Mapping[str, Product]

    def get_product(self, name: str) -> Product | None:
        return self.products.get(name)

    def require_product(self, name: str) -> Product:
        product = self.products.get(name)
        if product is None:
            raise ProductNotFoundError(name)
        return product

    def get_chip(self, name: str) -> Chip | None:
        return self.chips.get(name)

    def require_chip(self, name: str) -> Chip:
        chip = self.chips.get(name)
        if chip is None:
            raise ChipNotFoundError(name)
        return chip

    def product_names(self) -> list[str]:
        return list(self.products)

    def __contains__(self, name: object) -> bool:
        return name in self.products

    def __len__(self) -> int:
        return len(self.products)


def build_catalog(
    chip_table: Mapping[str, Chip] = CHIPS,
    product_metadata: Mapping[str, ProductMetadata] = PRODUCT_METADATA,
) -> CatalogRegistry:
    """Build the registry once from the static tables."""
    chips: dict[str, Chip] = {}
    for key, chip in chip_table.items():
        if key != chip.name:
            raise CatalogIntegrityError(
                f"Chip table key '{key}' does not match chip name '{chip.name}'",
            )
        chips[key] = chip

    products: dict[str, Product] = {}
    for key, meta in product_metadata.items():
        if key != meta.name:
            raise CatalogIntegrityError(
                f"Product table key '{key}' does not match product name '{meta.name}'",
            )
        missing = [c for c in meta.chip if c not in chips]
        if missing:
            raise CatalogIntegrityError(
                f"Product '{meta.name}' references undefined chip(s): {', '.join(missing)}",
            )
        products[key] = Product.from_metadata(
            meta, tuple(chips[c] for c in meta.chip),
        )

    logger.info(f"Catalog built: {len(chips)} chips, {len(products)} products")
    return CatalogRegistry(
        chips=MappingProxyType(chips), products=MappingProxyType(products),
    )


def validate_catalog(registry: CatalogRegistry) -> list[str]:
    """Names of chips whose frequency or UID length cannot be resolved."""
    broken: list[str] = []
    for chip in registry.chips.values():
        try:
            resolve_frequency(chip)
            resolve_uid_length(chip)
        except UnknownAttributeError as e:
            logger.warning(
                f"Catalog integrity: {e.message}",
                extra={"chip_name": e.chip_name, "attribute": e.attribute},
            )
            broken.append(chip.name)
    return broken
