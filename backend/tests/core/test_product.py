"""Product Entity — verifies construction defaults and RF classification.

Tests:
    - from_metadata copies scalars, defaults strings to "Unknown", shares chips
    - rfid/nfc are true iff any chip (directly or via emulation) is in that band
    - Classification is order-independent and never raises on unresolvable chips
"""

from itertools import permutations

from modroster.core.chip import Chip, ChipFeatures
from modroster.core.chip_table import NTAG216, T5577, ULTIMATE_GEN4
from modroster.core.domain_types import Frequency, RfBand
from modroster.core.product import Product, ProductMetadata, RfClassification, classify


def test_from_metadata_defaults():
    product = Product.from_metadata(ProductMetadata(name="Thing"), ())
    assert product.blink is False
    assert product.magnet is False
    assert product.other_mod is False
    assert product.install_method == "Unknown"
    assert product.form_factor == "Unknown"


def test_from_metadata_shares_chip_references():
    chips = (NTAG216, T5577)
    product = Product.from_metadata(
        ProductMetadata(name="DT NExT", chip=("NTAG216", "T5577")), chips,
    )
    assert product.chip is chips
    assert product.chip[1] is T5577


def test_placeholder_has_no_chips():
    product = Product.placeholder("Mystery")
    assert product.name == "Mystery"
    assert product.chip == ()
    assert product.install_method == "Unknown"
    assert product.magnet is False


def test_rfid_only_and_nfc_only_chips_set_both_flags(lf_chip, hf_chip):
    product = Product(name="Combo", chip=(lf_chip, hf_chip))
    assert product.rfid
    assert product.nfc


def test_nfc_only_product(hf_chip):
    assert classify(Product(name="HF", chip=(hf_chip,))) == RfClassification(
        rfid=False, nfc=True,
    )


def test_rfid_via_emulation_only():
    product = Product(name="xEM", chip=(T5577,))
    assert product.rfid
    assert not product.nfc


def test_nfc_via_emulation_only():
    product = Product(name="xMagic", chip=(ULTIMATE_GEN4,))
    assert product.nfc
    assert not product.rfid


def test_later_chip_still_flips_flag(bare_chip, hf_chip, lf_chip):
    product = Product(name="Late", chip=(bare_chip, hf_chip, bare_chip, lf_chip))
    assert classify(product) == RfClassification(rfid=True, nfc=True)


def test_classification_is_order_independent(lf_chip, hf_chip, bare_chip, magic_chip):
    chips = (lf_chip, hf_chip, bare_chip, magic_chip)
    results = {
        classify(Product(name="P", chip=order)) for order in permutations(chips)
    }
    assert results == {RfClassification(rfid=True, nfc=True)}


def test_unresolvable_chip_contributes_nothing(bare_chip):
    product = Product(name="Broken", chip=(bare_chip,))
    assert classify(product) == RfClassification(rfid=False, nfc=False)


def test_emulated_unresolvable_chip_is_skipped(bare_chip, lf_chip):
    chip = Chip(name="Half", features=ChipFeatures(magic=(bare_chip, lf_chip)))
    assert classify(Product(name="P", chip=(chip,))) == RfClassification(
        rfid=True, nfc=False,
    )


def test_no_chips_is_neither():
    product = Product(name="Magnet")
    assert not product.rfid
    assert not product.nfc
    assert not product.has_chip


def test_custom_band_table(lf_chip):
    table = {Frequency.LF_125: RfBand.NFC}
    assert classify(Product(name="P", chip=(lf_chip,)), table).nfc


def test_frequencies_are_best_effort_union(bare_chip, magic_chip):
    product = Product(name="P", chip=(bare_chip, magic_chip))
    assert product.frequencies == {Frequency.LF_125, Frequency.HF_1356}


def test_str_is_name():
    assert str(Product(name="DT xNT")) == "DT xNT"
