"""Product (Mod) Entity — one catalog entry and its derived RF classification.

Invariants:
    - Product is read-only after construction; chip tuple is shared by reference
    - rfid is True iff ANY frequency across ALL chips (directly or via emulation) is RFID
    - nfc is True iff ANY frequency across ALL chips is NFC
    - Classification is order-independent and never raises: unresolvable chips
      contribute nothing
    - install_method and form_factor default to "Unknown"

Design Decisions:
    - rfid/nfc computed on demand, not stored (ADR: derived facts stay derived)
    - classify() scans every chip before answering: no early exit can skip a
      later chip that would flip a flag
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from modroster.core.chip import Chip, resolve_frequency
from modroster.core.domain_types import UNKNOWN, Frequency, RfBand
from modroster.core.errors import UnknownAttributeError
from modroster.core.rf_band import RF_BANDS, classify_frequency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductMetadata:
    """Static description of a product as written in the product table."""
    name: str
    chip: tuple[str, ...] = ()  # chip names, resolved by build_catalog()
    blink: bool | None = None
    magnet: bool | None = None
    other_mod: bool | None = None
    install_method: str | None = None
    form_factor: str | None = None


@dataclass(frozen=True)
class RfClassification:
    rfid: bool = False
    nfc: bool = False


@dataclass(frozen=True)
class Product:
    """A product ("mod") in the catalog."""
    name: str
    chip: tuple[Chip, ...] = ()
    blink: bool = False
    magnet: bool = False
    other_mod: bool = False
    install_method: str = UNKNOWN
    form_factor: str = UNKNOWN

    @classmethod
    def from_metadata(
        cls, meta: ProductMetadata, chips: tuple[Chip, ...],
    ) -> "Product":
        return cls(
            name=meta.name,
            chip=chips,
            blink=bool(meta.blink),
            magnet=bool(meta.magnet),
            other_mod=bool(meta.other_mod),
            install_method=meta.install_method or UNKNOWN,
            form_factor=meta.form_factor or UNKNOWN,
        )

    @classmethod
    def placeholder(cls, name: str) -> "Product":
        """Stub for a product name the catalog does not know."""
        return cls(name=name, chip=(), magnet=False, install_method=UNKNOWN)

    @property
    def rfid(self) -> bool:
        return classify(self).rfid

    @property
    def nfc(self) -> bool:
        return classify(self).nfc

    @property
    def has_chip(self) -> bool:
        return len(self.chip) > 0

    @property
    def frequencies(self) -> frozenset[Frequency]:
        return frozenset(_examined_frequencies(self))

    def __str__(self) -> str:
        return self.name


def _examined_frequencies(product: Product) -> Iterator[Frequency]:
    """Frequencies of every chip, or of its emulated chips when it emulates."""
    for chip in product.chip:
        sources = chip.magic if chip.magic else (chip,)
        for source in sources:
            try:
                yield from resolve_frequency(source)
            except UnknownAttributeError:
                logger.debug(
                    f"Skipping chip without frequency in {product.name}",
                    extra={"product_name": product.name, "chip_name": source.name},
                )


def classify(
    product: Product, table: Mapping[Frequency, RfBand] = RF_BANDS,
) -> RfClassification:
    """RF classification of a product. Pure, best-effort, order-independent."""
    bands = {classify_frequency(f, table) for f in _examined_frequencies(product)}
    return RfClassification(
        rfid=RfBand.RFID in bands,
        nfc=RfBand.NFC in bands,
    )
