"""Chip Table — static definitions of every chip type in the catalog.

Invariants:
    - Chip names are unique; CHIPS is keyed by name
    - Magic chips (T5577, Ultimate Gen4) carry no direct uid_length/frequency
    - Emulated chips are the same shared records as the standalone entries
"""

from collections.abc import Mapping
from types import MappingProxyType

from modroster.core.chip import Chip, ChipFeatures
from modroster.core.domain_types import Frequency, IsoStandard, UidLength


# ─── 125/134 kHz credentials ─────────────────────────────────────

US_PET_CHIP = Chip(
    name="US Pet Chip",
    uid_length=UidLength.BITS_64,
    frequency=Frequency.LF_134,
    # animal identification, not 14443/15693
    features=ChipFeatures(iso=(IsoStandard.ISO_11784, IsoStandard.ISO_11785)),
)

EM410X = Chip(name="EM410x", uid_length=UidLength.BITS_40, frequency=Frequency.LF_125)

HID_PROX = Chip(name="HID Prox", uid_length=UidLength.BITS_26, frequency=Frequency.LF_125)

AWID = Chip(name="AWID", uid_length=UidLength.BITS_26, frequency=Frequency.LF_125)

INDALA = Chip(name="Indala", uid_length=UidLength.BITS_26, frequency=Frequency.LF_125)

KERI = Chip(name="Keri", uid_length=UidLength.BITS_26, frequency=Frequency.LF_125)

T5577 = Chip(
    name="T5577",
    features=ChipFeatures(magic=(EM410X, HID_PROX, AWID, INDALA, KERI, US_PET_CHIP)),
)


# ─── 13.56 MHz chips ─────────────────────────────────────────────

NTAG216 = Chip(
    name="NTAG216",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=ChipFeatures(ndef_capable=True, iso=(IsoStandard.ISO_14443A,)),
)

NTAG_I2C = Chip(
    name="NTAGI2C",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=ChipFeatures(
        ndef_capable=True, power_harvesting=True, iso=(IsoStandard.ISO_14443A,),
    ),
)

NXP_P71 = Chip(
    name="NXP P71",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=ChipFeatures(
        cryptographic=True, jcop=True, iso=(IsoStandard.ISO_14443A,),
    ),
)

# Crypto1 is broken, so cryptographic stays False
MIFARE_CLASSIC_4B = Chip(
    name="MIFARE Classic (4-byte UID)",
    uid_length=UidLength.BYTES_4,
    frequency=Frequency.HF_1356,
    features=ChipFeatures(iso=(IsoStandard.ISO_14443A,)),
)

MIFARE_CLASSIC_7B = Chip(
    name="MIFARE Classic (7-byte UID)",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=ChipFeatures(iso=(IsoStandard.ISO_14443A,)),
)

_DESFIRE_FEATURES = ChipFeatures(
    ndef_capable=True, cryptographic=True, iso=(IsoStandard.ISO_14443A,),
)

DESFIRE_EV1 = Chip(
    name="MIFARE DESFire EV1",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=_DESFIRE_FEATURES,
)

DESFIRE_EV2 = Chip(
    name="MIFARE DESFire EV2",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=_DESFIRE_FEATURES,
)

DESFIRE_EV3 = Chip(
    name="MIFARE DESFire EV3",
    uid_length=UidLength.BYTES_7,
    frequency=Frequency.HF_1356,
    features=_DESFIRE_FEATURES,
)

ULTIMATE_GEN4 = Chip(
    name="Ultimate Gen4",
    features=ChipFeatures(magic=(NTAG216, MIFARE_CLASSIC_4B, MIFARE_CLASSIC_7B)),
)


CHIPS: Mapping[str, Chip] = MappingProxyType({
    chip.name: chip
    for chip in (
        US_PET_CHIP, EM410X, HID_PROX, AWID, INDALA, KERI, T5577,
        NTAG216, NTAG_I2C, NXP_P71, MIFARE_CLASSIC_4B, MIFARE_CLASSIC_7B,
        DESFIRE_EV1, DESFIRE_EV2, DESFIRE_EV3, ULTIMATE_GEN4,
    )
})
