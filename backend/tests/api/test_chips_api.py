"""Chip Routes — resolved attributes, emulation list, data-integrity errors."""

from modroster.core.catalog import build_catalog
from modroster.core.chip import Chip
from modroster.main import app


async def test_magic_chip_detail(client):
    res = await client.get("/api/v1/chips/T5577")
    assert res.status_code == 200
    body = res.json()
    assert body["frequencies"] == ["125 kHz", "134 kHz"]
    assert body["uid_lengths"] == ["26b", "40b", "64b"]
    assert "US Pet Chip" in body["emulates"]


async def test_direct_chip_detail(client):
    body = (await client.get("/api/v1/chips/NXP P71")).json()
    assert body["frequencies"] == ["13.56 MHz"]
    assert body["jcop"] is True
    assert body["cryptographic"] is True
    assert body["iso"] == ["14443a"]
    assert body["emulates"] == []


async def test_unknown_chip_returns_404(client):
    res = await client.get("/api/v1/chips/T5578")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "CHIP_NOT_FOUND"


async def test_unresolvable_chip_surfaces_unknown_attribute(client):
    app.state.catalog = build_catalog({"Bare": Chip(name="Bare")}, {})
    res = await client.get("/api/v1/chips/Bare")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "UNKNOWN_ATTRIBUTE"
    assert error["context"]["chip_name"] == "Bare"
