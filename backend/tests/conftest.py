"""Root conftest — shared test configuration and catalog fixtures."""

import os

import pytest

# Human-readable logs in test output
os.environ.setdefault("MODROSTER_LOG_FORMAT", "text")

from modroster.core.catalog import build_catalog  # noqa: E402
from modroster.core.chip import Chip, ChipFeatures  # noqa: E402
from modroster.core.domain_types import Frequency, UidLength  # noqa: E402


@pytest.fixture
def catalog():
    """Registry built from the shipped static tables."""
    return build_catalog()


@pytest.fixture
def lf_chip():
    return Chip(name="LF Tag", uid_length=UidLength.BITS_40, frequency=Frequency.LF_125)


@pytest.fixture
def hf_chip():
    return Chip(name="HF Tag", uid_length=UidLength.BYTES_7, frequency=Frequency.HF_1356)


@pytest.fixture
def bare_chip():
    """Chip with neither direct attributes nor emulation — bad catalog data."""
    return Chip(name="Bare")


@pytest.fixture
def magic_chip(lf_chip, hf_chip):
    return Chip(name="Dual Magic", features=ChipFeatures(magic=(lf_chip, hf_chip)))
