"""Chip Capability Model — chip records and emulation-aware attribute resolution.

Invariants:
    - A chip has EITHER a non-empty magic (emulated chip) list OR direct attribute values
    - Resolution always returns a set, for emulating and non-emulating chips alike
    - Emulating chips expose the union of their emulated chips' values, transitively
    - A chip with neither a direct value nor emulation raises UnknownAttributeError
      at resolution time (never at construction time)

Design Decisions:
    - One frozen Chip record instead of a class per chip model: resolution is a
      pure function over data, not virtual dispatch (ADR: no subclass per chip)
    - Tuples for iso/magic: records are hashable and safely shared across products
"""

from dataclasses import dataclass, field
from typing import Literal

from modroster.core.domain_types import Frequency, IsoStandard, UidLength
from modroster.core.errors import UnknownAttributeError

ChipAttribute = Literal["uid_length", "frequency"]


@dataclass(frozen=True)
class ChipFeatures:
    """Feature flags of a chip. magic lists the chips it can impersonate."""
    payment: bool = False
    ndef_capable: bool = False
    cryptographic: bool = False
    power_harvesting: bool = False
    jcop: bool = False
    iso: tuple[IsoStandard, ...] = ()
    magic: tuple["Chip", ...] = ()


@dataclass(frozen=True)
class Chip:
    """A chip type in the catalog — immutable after construction."""
    name: str
    uid_length: UidLength | None = None
    frequency: Frequency | None = None
    features: ChipFeatures = field(default_factory=ChipFeatures)

    @property
    def magic(self) -> tuple["Chip", ...]:
        return self.features.magic

    @property
    def is_magic(self) -> bool:
        return len(self.features.magic) > 0

    def __str__(self) -> str:
        return self.name


def resolve_attribute(chip: Chip, attribute: ChipAttribute) -> frozenset:
    """Resolve a physical attribute, unioning through every emulation layer."""
    if chip.magic:
        resolved: set = set()
        for emulated in chip.magic:
            resolved |= resolve_attribute(emulated, attribute)
        return frozenset(resolved)
    value = getattr(chip, attribute)
    if value is not None:
        return frozenset({value})
    raise UnknownAttributeError(attribute, chip.name)


def resolve_uid_length(chip: Chip) -> frozenset[UidLength]:
    return resolve_attribute(chip, "uid_length")


def resolve_frequency(chip: Chip) -> frozenset[Frequency]:
    return resolve_attribute(chip, "frequency")


def emulated_chips(chip: Chip) -> list[Chip]:
    """Leaf chips reachable through emulation, first occurrence wins, in order.

    A chip without emulation returns an empty list (it impersonates nothing).
    """
    leaves: list[Chip] = []
    seen: set[str] = set()
    stack = list(reversed(chip.magic))
    while stack:
        current = stack.pop()
        if current.magic:
            stack.extend(reversed(current.magic))
            continue
        if current.name not in seen:
            seen.add(current.name)
            leaves.append(current)
    return leaves
