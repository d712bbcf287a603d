"""
Tests for the fixed-barcode exception table.
"""

import pytest

from src.barcode.fixed_cards import (
    EXCEPTION_TABLE,
    EpochProduct,
    OriginalHero,
    get_epoch_product,
    get_original_hero,
    is_original_hero,
    lookup,
)
from src.barcode.validator import validate_ean13_checksum
from src.models import CardType

ORIGINAL_HEROES = {
    "0120401154185": "Rarman",
    "0120201044181": "U-Ronchan",
    "0120102308184": "Bon-Curry",
    "0150604154187": "Cha-Han",
    "0180506308180": "Meatman",
}


class TestExceptionTable:
    """Tests for table contents and lookups."""

    def test_console_entries(self):
        """Test the two console entries."""
        console = lookup("4905040352507")
        assert isinstance(console, EpochProduct)
        assert console.product_name == "Barcode Battler Console"
        assert console.card_type == CardType.SOLDIER

        console_ii = lookup("4905040352521")
        assert isinstance(console_ii, EpochProduct)
        assert console_ii.card_type == CardType.WIZARD
        assert console_ii.stats.mp == 10

    @pytest.mark.parametrize("barcode, name", sorted(ORIGINAL_HEROES.items()))
    def test_original_heroes(self, barcode, name):
        """Test each original hero entry."""
        entry = lookup(barcode)
        assert isinstance(entry, OriginalHero)
        assert entry.hero_name == name
        assert entry.flag == 50
        assert entry.is_hero is True
        assert is_original_hero(barcode)

    def test_unknown_barcode(self):
        """Test that ordinary barcodes are not in the table."""
        assert lookup("0401207336501") is None
        assert not is_original_hero("0401207336501")

    def test_typed_getters(self):
        """Test that the getters only return their own entry type."""
        assert get_epoch_product("4905040352507") is not None
        assert get_original_hero("4905040352507") is None
        assert get_epoch_product("0120401154185") is None
        assert get_original_hero("0120401154185") is not None

    def test_consoles_are_not_original_heroes(self):
        """Test that consoles are not original heroes."""
        assert not is_original_hero("4905040352507")

    def test_table_is_read_only(self):
        """Test that the table cannot be modified."""
        with pytest.raises(TypeError):
            EXCEPTION_TABLE["0000000000000"] = OriginalHero(hero_name="Nobody")  # type: ignore[index]

    def test_all_entries_have_valid_check_digits(self):
        """Test that every table barcode passes validation."""
        for barcode in EXCEPTION_TABLE:
            assert validate_ean13_checksum(barcode), barcode
