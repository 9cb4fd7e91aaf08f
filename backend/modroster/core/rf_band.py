"""RF Band Table — classifies operating frequencies as RFID or NFC.

Invariants:
    - Table is fixed at import time and exposed read-only
    - Frequencies absent from the table classify as None (neither band)
"""

from collections.abc import Mapping
from types import MappingProxyType

from modroster.core.domain_types import Frequency, RfBand

RF_BANDS: Mapping[Frequency, RfBand] = MappingProxyType({
    Frequency.LF_125: RfBand.RFID,
    Frequency.LF_134: RfBand.RFID,
    Frequency.HF_1356: RfBand.NFC,
})


def classify_frequency(
    frequency: Frequency, table: Mapping[Frequency, RfBand] = RF_BANDS,
) -> RfBand | None:
    return table.get(frequency)


def is_rf_band(
    frequency: Frequency,
    band: RfBand,
    table: Mapping[Frequency, RfBand] = RF_BANDS,
) -> bool:
    return classify_frequency(frequency, table) is band
