"""Member Aggregator — one person's products and the facts derived from them.

Invariants:
    - mod_names kept as supplied (order and duplicates preserved)
    - Unknown names resolve to Product.placeholder(), never raise, and are never
      inserted into the registry
    - implants excludes other_mod products and preserves order
    - duplicate_implants counts over implants, restricted to counts >= 2
    - Cached values are pure functions of mod_names: recomputing gives the same result

Design Decisions:
    - Explicit cache fields instead of hidden memoized getters: population is
      idempotent, so concurrent first access may compute twice and no lock is needed
    - duplicate_implants returned as a read-only mapping: callers share one cached value
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from modroster.core.catalog import CatalogRegistry
from modroster.core.product import Product

logger = logging.getLogger(__name__)


@dataclass
class Member:
    """A person and the products they carry."""
    mod_names: tuple[str, ...]
    mods: tuple[Product, ...]
    name: str | None = None
    unknown_mods: tuple[str, ...] = ()

    _implants_cache: tuple[Product, ...] | None = field(
        default=None, init=False, repr=False, compare=False,
    )
    _duplicate_implants_cache: Mapping[str, int] | None = field(
        default=None, init=False, repr=False, compare=False,
    )

    @property
    def number_of_mods(self) -> int:
        return len(self.mods)

    @property
    def implants(self) -> tuple[Product, ...]:
        if self._implants_cache is None:
            self._implants_cache = tuple(m for m in self.mods if not m.other_mod)
        return self._implants_cache

    @property
    def duplicate_implants(self) -> Mapping[str, int]:
        if self._duplicate_implants_cache is None:
            counts = Counter(imp.name for imp in self.implants)
            self._duplicate_implants_cache = MappingProxyType({
                name: count for name, count in counts.items() if count > 1
            })
        return self._duplicate_implants_cache

    @property
    def has_chip(self) -> bool:
        return any(imp.has_chip for imp in self.implants)

    @property
    def has_magnet(self) -> bool:
        return any(imp.magnet for imp in self.implants)

    @property
    def has_rfid(self) -> bool:
        return any(imp.rfid for imp in self.implants)

    @property
    def has_nfc(self) -> bool:
        return any(imp.nfc for imp in self.implants)


def resolve_member(
    names: Iterable[str], registry: CatalogRegistry, name: str | None = None,
) -> Member:
    """Resolve product names against the registry into a Member."""
    mod_names = tuple(names)
    mods: list[Product] = []
    unknown: list[str] = []
    for mod_name in mod_names:
        product = registry.get_product(mod_name)
        if product is None:
            logger.debug(
                f"Unknown product '{mod_name}', using placeholder",
                extra={"product_name": mod_name},
            )
            product = Product.placeholder(mod_name)
            unknown.append(mod_name)
        mods.append(product)
    return Member(
        mod_names=mod_names,
        mods=tuple(mods),
        name=name,
        unknown_mods=tuple(unknown),
    )
