"""Product Summary — the feature list shown on a product detail view.

Invariants:
    - Only truthy fields are listed; name and chip are never listed
    - Field order follows the Product declaration, rfid/nfc appended last
"""

from dataclasses import fields

from modroster.core.product import Product, classify

_EXCLUDED = {"name", "chip"}


def summarize_features(product: Product) -> list[tuple[str, str | bool]]:
    """Truthy descriptive fields of a product, plus RF flags when set."""
    features: list[tuple[str, str | bool]] = [
        (f.name, getattr(product, f.name))
        for f in fields(product)
        if f.name not in _EXCLUDED and getattr(product, f.name)
    ]
    rf = classify(product)
    if rf.rfid:
        features.append(("rfid", True))
    if rf.nfc:
        features.append(("nfc", True))
    return features
