"""
Tests for Method 2 decoding.
"""

import pytest

from src.barcode.method2 import decode_method2
from src.models import CardStats, CardType, ExplanationKind, Param, PowerUpType


class TestHeroes:
    """Tests for T < 5."""

    def test_rejected_ean13_hero(self):
        """4006381333931: P=3 Q=3 R=3 S=9 T=3."""
        result = decode_method2("4006381333931")

        assert result.card_type == CardType.SOLDIER
        assert result.stats == CardStats(hp=43300, st=10800, df=0, dx=0)
        assert result.flag == 50
        assert result.is_hero is True
        assert result.race is None
        assert result.occupation is None

    def test_all_zero_tail(self):
        """Zero digits still give ST and DF through the +5 and +7 rotations."""
        result = decode_method2("3000000000007")

        assert result.stats == CardStats(hp=0, st=7500, df=7700, dx=0)
        assert result.flag == 50

    def test_hero_flag_mapping_keeps_original(self):
        """The forced hero flag records the P/R flag it replaced."""
        mapping = decode_method2("4006381333931").digit_mappings["flag"]

        assert mapping.explanation_kind == ExplanationKind.FLAG_METHOD2_HERO
        assert mapping.source_indices == (11,)
        assert mapping.explanation_params[Param.ORIGINAL_FLAG] == 33


class TestItems:
    """Tests for weapons, armour and health power-ups."""

    def test_single_use_weapon(self):
        """5901234123457: P=1 Q=2 R=3 S=4 T=5."""
        result = decode_method2("5901234123457")

        assert result.card_type == CardType.WEAPON
        assert result.stats == CardStats(hp=0, st=1700, df=0, dx=0)
        assert result.flag == 13
        assert result.is_single_use is True
        assert result.is_hero is False

    def test_durable_weapon(self):
        """T=6 is a weapon that is not used up."""
        result = decode_method2("0000000123466")

        assert result.card_type == CardType.WEAPON
        assert result.stats == CardStats(hp=0, st=1700, df=0, dx=0)
        assert result.is_single_use is False
        assert result.digit_mappings["is_single_use"].explanation_params[Param.T] == 6

    def test_padded_ean8_weapon(self):
        """Padded EAN-8 input decodes like any other 13 digits."""
        result = decode_method2("0000000123456")

        assert result.card_type == CardType.WEAPON
        assert result.stats.st == 1700
        assert result.flag == 13

    def test_single_use_armour(self):
        """T=7 armour is single-use."""
        result = decode_method2("0000000123476")

        assert result.card_type == CardType.ARMOUR
        assert result.stats == CardStats(hp=0, st=0, df=800, dx=0)
        assert result.is_single_use is True

    def test_durable_armour(self):
        """T=8 armour is durable; Q=8 adds 2000 DF."""
        result = decode_method2("0000000183486")

        assert result.card_type == CardType.ARMOUR
        assert result.stats.df == 2800
        assert result.is_single_use is False

    def test_health_power_up(self):
        """T=9 is a health power-up with S=8 worth 10000 HP."""
        result = decode_method2("0000000305896")

        assert result.card_type == CardType.POWER_UP
        assert result.power_up_type == PowerUpType.HEALTH
        assert result.stats == CardStats(hp=15000, st=0, df=0, dx=0)
        assert result.is_hero is False

    def test_high_flag_reset_on_items(self):
        """Flag 35 with T=9 is out of range for an item."""
        result = decode_method2("0000000305896")

        assert result.flag == 0
        mapping = result.digit_mappings["flag"]
        assert mapping.explanation_kind == ExplanationKind.FLAG_METHOD2_ADJUSTED
        assert mapping.explanation_params[Param.ORIGINAL_FLAG] == 35
        assert mapping.source_indices == (7, 9, 11)

    def test_low_flag_kept_on_items(self):
        """Item flags up to 29 are kept as decoded."""
        result = decode_method2("0000000293496")
        assert result.flag == 23
        assert result.digit_mappings["flag"].explanation_kind == ExplanationKind.FLAG_METHOD2


class TestDigitMappings:
    """Tests for provenance recorded by Method 2."""

    def test_offset_shifts_indices(self):
        """EAN-8 offset maps indices back into the 8-digit barcode."""
        result = decode_method2("0000000123456", offset=5)
        mappings = result.digit_mappings

        assert mappings["flag"].source_indices == (2, 4)
        assert mappings["stats.st"].source_indices == (3, 4)
        assert mappings["card_type"].source_indices == (6,)
        assert mappings["is_single_use"].source_indices == (6,)

    def test_no_pp_or_mp(self):
        """Method 2 never produces PP or MP."""
        result = decode_method2("0000000123456")

        assert result.stats.pp is None
        assert result.stats.mp is None
        assert "stats.pp" not in result.digit_mappings
        assert result.digit_mappings["stats.dx"].source_indices == ()

    def test_rejects_unpadded_ean8(self):
        """Raw 8-digit input must be padded first."""
        with pytest.raises(ValueError):
            decode_method2("00123456")
