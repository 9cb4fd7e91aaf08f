"""Catalog Schemas — response models for chips and products.

Invariants:
    - Frequencies and UID lengths are returned sorted for stable output
    - Product responses expose chip names only, never nested chip records
"""

from pydantic import BaseModel

from modroster.core.chip import Chip, emulated_chips, resolve_frequency, resolve_uid_length
from modroster.core.product import Product, classify
from modroster.core.product_summary import summarize_features


class ProductSummary(BaseModel):
    """One row of the product listing."""
    name: str
    rfid: bool
    nfc: bool
    magnet: bool
    blink: bool
    other_mod: bool
    install_method: str
    form_factor: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductSummary":
        rf = classify(product)
        return cls(
            name=product.name,
            rfid=rf.rfid,
            nfc=rf.nfc,
            magnet=product.magnet,
            blink=product.blink,
            other_mod=product.other_mod,
            install_method=product.install_method,
            form_factor=product.form_factor,
        )


class ProductFeature(BaseModel):
    key: str
    value: str | bool


class ProductDetail(ProductSummary):
    """Product detail — summary plus chips and the feature list."""
    chips: list[str]
    frequencies: list[str]
    features: list[ProductFeature]

    @classmethod
    def from_product(cls, product: Product) -> "ProductDetail":
        summary = ProductSummary.from_product(product)
        return cls(
            **summary.model_dump(),
            chips=[c.name for c in product.chip],
            frequencies=sorted(f.value for f in product.frequencies),
            features=[
                ProductFeature(key=k, value=v)
                for k, v in summarize_features(product)
            ],
        )


class ChipDetail(BaseModel):
    """Chip detail with resolved attributes. Raises UnknownAttributeError on bad data."""
    name: str
    frequencies: list[str]
    uid_lengths: list[str]
    payment: bool
    ndef_capable: bool
    cryptographic: bool
    power_harvesting: bool
    jcop: bool
    iso: list[str]
    emulates: list[str]

    @classmethod
    def from_chip(cls, chip: Chip) -> "ChipDetail":
        features = chip.features
        return cls(
            name=chip.name,
            frequencies=sorted(f.value for f in resolve_frequency(chip)),
            uid_lengths=sorted(u.value for u in resolve_uid_length(chip)),
            payment=features.payment,
            ndef_capable=features.ndef_capable,
            cryptographic=features.cryptographic,
            power_harvesting=features.power_harvesting,
            jcop=features.jcop,
            iso=[s.value for s in features.iso],
            emulates=[c.name for c in emulated_chips(chip)],
        )
