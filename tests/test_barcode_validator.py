"""
Tests for barcode cleaning and validation.
"""

import pytest

from src.barcode import validator as validator_module
from src.barcode.digits import BarcodeDigits
from src.barcode.validator import (
    calculate_ean13_checksum,
    clean_barcode,
    detect_barcode_type,
    validate_barcode,
    validate_ean13_checksum,
)
from src.models import BarcodeType, ErrorKind


class TestEAN13Checksum:
    """Tests for EAN-13 checksum validation."""

    def test_calculate_ean13_checksum(self):
        """Test checksum calculation for known EAN-13 codes."""
        assert calculate_ean13_checksum("400638133393") == 1
        assert calculate_ean13_checksum("590123412345") == 7
        assert calculate_ean13_checksum("040120733650") == 1

    def test_calculate_rejects_short_code(self):
        """Test that fewer than 12 digits raises."""
        with pytest.raises(ValueError):
            calculate_ean13_checksum("12345")

    def test_calculate_rejects_non_numeric(self):
        """Test that letters raise."""
        with pytest.raises(ValueError):
            calculate_ean13_checksum("40063813339A")

    def test_validate_ean13_valid(self):
        """Test validation of valid EAN-13 codes."""
        valid_codes = [
            "4006381333931",
            "5901234123457",
            "0401207336501",
            "4905040352507",
            "9780201379624",  # ISBN
        ]
        for code in valid_codes:
            assert validate_ean13_checksum(code), f"Expected {code} to be valid"

    def test_validate_ean13_invalid(self):
        """Test validation of invalid EAN-13 codes."""
        invalid_codes = [
            "4006381333932",  # Wrong checksum
            "1340912373503",  # Wrong checksum
            "123456789012",  # Too short
            "12345678901234",  # Too long
            "400638133393A",  # Non-numeric
        ]
        for code in invalid_codes:
            assert not validate_ean13_checksum(code), f"Expected {code} to be invalid"


class TestCleaning:
    """Tests for whitespace removal and type detection."""

    def test_clean_removes_all_whitespace(self):
        """Test that spaces, tabs and newlines are removed."""
        assert clean_barcode(" 04012 07336\t501\n") == "0401207336501"

    def test_clean_keeps_other_characters(self):
        """Test that non-whitespace characters are kept."""
        assert clean_barcode("12-34") == "12-34"

    def test_detect_types(self):
        """Test barcode type detection by length."""
        assert detect_barcode_type("00123456") == BarcodeType.EAN_8
        assert detect_barcode_type("0401207336501") == BarcodeType.EAN_13_UPC_A
        assert detect_barcode_type("012345678905") == BarcodeType.UNKNOWN
        assert detect_barcode_type("") == BarcodeType.UNKNOWN


class TestValidateBarcode:
    """Tests for complete barcode validation."""

    def test_valid_ean13(self):
        """Test a valid EAN-13 barcode."""
        result = validate_barcode("0401207336501")
        assert result.is_valid
        assert result.barcode_type == BarcodeType.EAN_13_UPC_A
        assert result.digits == BarcodeDigits("0401207336501")
        assert result.error_kind is None

    def test_valid_ean8_without_check_digit_verification(self):
        """EAN-8 check digits are not verified."""
        result = validate_barcode("00123456")
        assert result.is_valid
        assert result.barcode_type == BarcodeType.EAN_8

    def test_whitespace_is_stripped(self):
        """Test that whitespace is removed before validation."""
        result = validate_barcode("04012 07336 501")
        assert result.is_valid
        assert result.barcode == "0401207336501"

    def test_invalid_characters(self):
        """Test that letters are reported as invalid characters."""
        result = validate_barcode("ABCDEFGHIJKLM")
        assert not result.is_valid
        assert result.error_kind == ErrorKind.INVALID_CHARACTERS
        assert result.error_params.invalid_characters == "ABCDEFGHIJKLM"
        assert result.barcode_type == BarcodeType.EAN_13_UPC_A

    def test_invalid_characters_reported_once(self):
        """Test that repeated bad characters are listed once."""
        result = validate_barcode("12AB34A5")
        assert result.error_params.invalid_characters == "AB"
        assert result.barcode_type == BarcodeType.EAN_8

    def test_non_ascii_digits_are_invalid(self):
        """Unicode digits other than 0-9 are rejected."""
        result = validate_barcode("0012345٦")
        assert result.error_kind == ErrorKind.INVALID_CHARACTERS

    def test_characters_checked_before_length(self):
        """Test that characters are checked before length."""
        result = validate_barcode("12a45")
        assert result.error_kind == ErrorKind.INVALID_CHARACTERS
        assert result.barcode_type == BarcodeType.UNKNOWN

    @pytest.mark.parametrize("raw", ["12345", "", "   ", "012345678905", "04012073365012"])
    def test_invalid_length(self, raw):
        """Test lengths other than 8 and 13."""
        result = validate_barcode(raw)
        assert not result.is_valid
        assert result.error_kind == ErrorKind.INVALID_LENGTH
        assert result.error_params.length == len(clean_barcode(raw))
        assert result.barcode_type == BarcodeType.UNKNOWN

    def test_invalid_check_digit(self):
        """Test that the expected and actual check digits are reported."""
        result = validate_barcode("1340912373503")
        assert not result.is_valid
        assert result.error_kind == ErrorKind.INVALID_CHECK_DIGIT
        assert result.error_params.expected_check_digit == 2
        assert result.error_params.actual_check_digit == 3
        assert result.barcode_type == BarcodeType.EAN_13_UPC_A

    def test_check_digit_branch_uses_checksum_validator(self, monkeypatch):
        """Test that the check digit error comes from validate_ean13_checksum."""
        monkeypatch.setattr(validator_module, "validate_ean13_checksum", lambda code: False)

        result = validate_barcode("0401207336501")

        assert result.error_kind == ErrorKind.INVALID_CHECK_DIGIT
        assert result.error_params.expected_check_digit == 1
        assert result.error_params.actual_check_digit == 1

    @pytest.mark.parametrize("wrong_digit", [0, 2, 5, 9])
    def test_any_wrong_check_digit_rejected(self, wrong_digit):
        """Test every wrong final digit is caught."""
        result = validate_barcode("040120733650" + str(wrong_digit))
        assert result.error_kind == ErrorKind.INVALID_CHECK_DIGIT


class TestBarcodeDigits:
    """Tests for the validated digit sequence."""

    def test_indexing_returns_ints(self):
        """Test that indexing returns integer digits."""
        digits = BarcodeDigits("0401207336501")
        assert digits[0] == 0
        assert digits[1] == 4
        assert digits[12] == 1
        assert len(digits) == 13

    def test_padded_ean8(self):
        """Test zero-padding of EAN-8 to 13 digits."""
        digits = BarcodeDigits("00123456")
        assert digits.padded() == "0000000123456"
        assert digits.barcode_type == BarcodeType.EAN_8

    def test_padded_ean13_unchanged(self):
        """Test that EAN-13 padding is a no-op."""
        assert BarcodeDigits("0401207336501").padded() == "0401207336501"

    @pytest.mark.parametrize("code", ["12345", "0401207336A01", ""])
    def test_rejects_bad_input(self, code):
        """Test that unsupported codes raise ValueError."""
        with pytest.raises(ValueError):
            BarcodeDigits(code)
