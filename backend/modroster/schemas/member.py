"""Member Schemas — request/response models for member aggregation.

Invariants:
    - MemberResolveRequest.mods: non-empty names, stripped; duplicates allowed
    - Response mirrors Member's derived facts; implants listed in input order
"""

from pydantic import BaseModel, Field, field_validator

from modroster.core.member import Member


class MemberResolveRequest(BaseModel):
    """A person's product names. Length upper bound checked against settings."""
    name: str | None = Field(None, max_length=200)
    mods: list[str]

    @field_validator("mods")
    @classmethod
    def strip_mod_names(cls, v: list[str]) -> list[str]:
        stripped = [m.strip() for m in v]
        if any(not m for m in stripped):
            raise ValueError("mod names cannot be empty or whitespace")
        return stripped


class MemberResponse(BaseModel):
    name: str | None
    number_of_mods: int
    implants: list[str]
    duplicate_implants: dict[str, int]
    unknown_mods: list[str]
    has_chip: bool
    has_magnet: bool
    has_rfid: bool
    has_nfc: bool

    @classmethod
    def from_member(cls, member: Member) -> "MemberResponse":
        return cls(
            name=member.name,
            number_of_mods=member.number_of_mods,
            implants=[p.name for p in member.implants],
            duplicate_implants=dict(member.duplicate_implants),
            unknown_mods=list(member.unknown_mods),
            has_chip=member.has_chip,
            has_magnet=member.has_magnet,
            has_rfid=member.has_rfid,
            has_nfc=member.has_nfc,
        )
