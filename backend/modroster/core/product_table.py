"""Product Table — static metadata for every product in the catalog.

Invariants:
    - Keys equal the ProductMetadata.name they map to
    - Chip references are chip names from chip_table.CHIPS
    - Accessories carry other_mod=True and are excluded from implant aggregation
"""

from collections.abc import Mapping
from types import MappingProxyType

from modroster.core.domain_types import FormFactor, InstallMethod
from modroster.core.product import ProductMetadata

_INJECTABLE = InstallMethod.INJECTABLE.value
_X_SERIES = FormFactor.X_SERIES.value

_PRODUCTS = (
    ProductMetadata(
        name="DT NExT",
        chip=("NTAG216", "T5577"),
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
        magnet=False,
    ),
    ProductMetadata(
        name="DT xEM",
        chip=("T5577",),
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
        magnet=False,
    ),
    ProductMetadata(
        name="DT xNT",
        chip=("NTAG216",),
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
        magnet=False,
    ),
    ProductMetadata(
        name="DT xSIID",
        chip=("NTAGI2C",),
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
        blink=True,
        magnet=False,
    ),
    ProductMetadata(
        name="DT xG3 v1",
        magnet=True,
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
    ),
    ProductMetadata(
        name="DT xG3 v2",
        magnet=True,
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
    ),
    ProductMetadata(
        name="DT TiTAN",
        magnet=True,
        install_method=InstallMethod.SCALPEL.value,
        form_factor=FormFactor.OTHER.value,
    ),
    ProductMetadata(
        name="DT xMagic",
        chip=("Ultimate Gen4",),
        install_method=_INJECTABLE,
        form_factor=_X_SERIES,
    ),
    ProductMetadata(
        name="DT Apex Flex",
        chip=("NXP P71",),
        install_method=InstallMethod.NEEDLE.value,
        form_factor=FormFactor.FLEX.value,
    ),
    # Accessories
    ProductMetadata(name="DT Proxmark3 Easy", other_mod=True),
    ProductMetadata(
        name="DT xEM Access Controller",
        chip=("EM410x",),
        other_mod=True,
    ),
)

PRODUCT_METADATA: Mapping[str, ProductMetadata] = MappingProxyType({
    meta.name: meta for meta in _PRODUCTS
})
