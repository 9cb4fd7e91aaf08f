"""Domain Types — enums for chip physical attributes and product descriptors.

Invariants:
    - Frequency, UidLength, IsoStandard, RfBand are closed enumerations
    - All valid values encoded as Enums — no raw string matching in core logic
    - "Unknown" is the single default for install method and form factor

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: API returns raw values)
    - 13.56 MHz spelled once here: the legacy table used two spellings, the enum is canonical
"""

from enum import Enum


UNKNOWN = "Unknown"


# ─── Chip Attributes ─────────────────────────────────────────────

class Frequency(str, Enum):
    """Operating band of a chip."""
    LF_125 = "125 kHz"
    LF_134 = "134 kHz"
    HF_1356 = "13.56 MHz"


class UidLength(str, Enum):
    """UID length — bytes (B) for HF chips, bits (b) for LF credentials."""
    BYTES_4 = "4B"
    BYTES_7 = "7B"
    BITS_26 = "26b"
    BITS_37 = "37b"
    BITS_40 = "40b"
    BITS_64 = "64b"


class IsoStandard(str, Enum):
    ISO_14443A = "14443a"
    ISO_14443B = "14443b"
    ISO_15693 = "15693"
    ISO_11784 = "11784"
    ISO_11785 = "11785"


class RfBand(str, Enum):
    """RF classification of a frequency."""
    RFID = "RFID"
    NFC = "NFC"


# ─── Product Descriptors ─────────────────────────────────────────

class InstallMethod(str, Enum):
    INJECTABLE = "Injectable"
    NEEDLE = "Needle"
    SCALPEL = "Scalpel"
    UNKNOWN = UNKNOWN


class FormFactor(str, Enum):
    FLEX = "flex"
    X_SERIES = "x-series"
    OTHER = "other"
    UNKNOWN = UNKNOWN
