"""Member Aggregator — verifies resolution, implant filtering, duplicate counts.

Tests:
    - Unknown names resolve to placeholders without raising or touching the registry
    - implants preserves input order and excludes other_mod products
    - duplicate_implants reports only counts >= 2, counted over implants
    - Cached values are stable and identical across repeated access
"""

import pytest

from modroster.core.member import resolve_member


def test_duplicate_implants_reports_only_repeats(catalog):
    member = resolve_member(["DT NExT", "DT NExT", "DT xEM"], catalog)
    assert dict(member.duplicate_implants) == {"DT NExT": 2}


def test_duplicate_implants_empty_without_repeats(catalog):
    member = resolve_member(["DT NExT", "DT xEM"], catalog)
    assert dict(member.duplicate_implants) == {}


def test_duplicates_counted_over_implants_only(catalog):
    member = resolve_member(
        ["DT Proxmark3 Easy", "DT Proxmark3 Easy", "DT xNT"], catalog,
    )
    assert dict(member.duplicate_implants) == {}


def test_implants_preserve_order_and_exclude_accessories(catalog):
    member = resolve_member(
        ["DT xNT", "DT Proxmark3 Easy", "DT xEM", "DT xNT"], catalog,
    )
    assert [p.name for p in member.implants] == ["DT xNT", "DT xEM", "DT xNT"]
    assert member.number_of_mods == 4


def test_implants_share_registry_instances(catalog):
    member = resolve_member(["DT xNT", "DT xNT"], catalog)
    assert member.mods[0] is catalog.require_product("DT xNT")
    assert member.mods[0] is member.mods[1]


def test_unknown_name_becomes_placeholder(catalog):
    member = resolve_member(["DT Prototype"], catalog, name="alice")
    placeholder = member.mods[0]
    assert placeholder.name == "DT Prototype"
    assert placeholder.chip == ()
    assert placeholder.install_method == "Unknown"
    assert member.unknown_mods == ("DT Prototype",)
    assert member.name == "alice"


def test_placeholder_not_inserted_into_registry(catalog):
    size = len(catalog)
    resolve_member(["DT Prototype"], catalog)
    assert "DT Prototype" not in catalog
    assert len(catalog) == size


def test_unknown_placeholders_count_as_implants(catalog):
    member = resolve_member(["Mystery", "Mystery"], catalog)
    assert dict(member.duplicate_implants) == {"Mystery": 2}


def test_duplicate_implants_idempotent(catalog):
    member = resolve_member(["DT NExT", "DT NExT", "DT xEM"], catalog)
    first = member.duplicate_implants
    second = member.duplicate_implants
    assert first is second
    assert dict(first) == {"DT NExT": 2}


def test_duplicate_implants_same_with_prior_implants_access(catalog):
    names = ["DT NExT", "DT NExT", "DT xEM"]
    warmed = resolve_member(names, catalog)
    warmed.implants
    cold = resolve_member(names, catalog)
    assert dict(warmed.duplicate_implants) == dict(cold.duplicate_implants)


def test_duplicate_implants_is_read_only(catalog):
    member = resolve_member(["DT NExT", "DT NExT"], catalog)
    with pytest.raises(TypeError):
        member.duplicate_implants["DT NExT"] = 5


def test_mod_names_kept_as_supplied(catalog):
    names = ["DT xEM", "DT Prototype", "DT xEM"]
    assert resolve_member(names, catalog).mod_names == tuple(names)


def test_aggregate_flags(catalog):
    member = resolve_member(["DT xEM", "DT xG3 v1"], catalog)
    assert member.has_rfid
    assert not member.has_nfc
    assert member.has_magnet
    assert member.has_chip


def test_aggregate_flags_ignore_accessories(catalog):
    member = resolve_member(["DT xEM Access Controller"], catalog)
    assert not member.has_rfid
    assert not member.has_chip


def test_empty_member(catalog):
    member = resolve_member([], catalog)
    assert member.number_of_mods == 0
    assert member.implants == ()
    assert dict(member.duplicate_implants) == {}
