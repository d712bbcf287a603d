"""
Barcode cleaning and validation for EAN-8 and EAN-13/UPC-A codes.
"""

from dataclasses import dataclass

from src.barcode.digits import SUPPORTED_LENGTHS, BarcodeDigits
from src.models.card import BarcodeType
from src.models.explanation import ErrorKind, ErrorParams


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of cleaning and validating a raw barcode string."""

    barcode: str
    barcode_type: BarcodeType
    digits: BarcodeDigits | None = None
    error_kind: ErrorKind | None = None
    error_params: ErrorParams | None = None

    @property
    def is_valid(self) -> bool:
        return self.digits is not None


def clean_barcode(raw: str) -> str:
    """Remove all whitespace from a raw barcode string."""
    return "".join(raw.split())


def calculate_ean13_checksum(code: str) -> int:
    """
    Calculate EAN-13 checksum digit.

    Algorithm:
    1. Multiply digits at odd positions (1, 3, 5, ...) by 1
    2. Multiply digits at even positions (2, 4, 6, ...) by 3
    3. Sum all results
    4. Checksum = (10 - (sum mod 10)) mod 10
    """
    if len(code) < 12:
        raise ValueError("Code must have at least 12 digits for EAN-13")

    total = 0
    for i, digit in enumerate(code[:12]):
        if not (digit.isascii() and digit.isdigit()):
            raise ValueError(f"Invalid character in code: {digit}")
        weight = 1 if i % 2 == 0 else 3
        total += int(digit) * weight

    return (10 - (total % 10)) % 10


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    if len(code) != 13:
        return False
    if not (code.isascii() and code.isdigit()):
        return False

    return calculate_ean13_checksum(code) == int(code[-1])


def detect_barcode_type(code: str) -> BarcodeType:
    """
    Detect barcode type from length alone.

    Args:
        code: Cleaned barcode string

    Returns:
        EAN-8 for 8 characters, EAN-13/UPC-A for 13, otherwise Unknown
    """
    length = len(code)
    if length == 8:
        return BarcodeType.EAN_8
    elif length == 13:
        return BarcodeType.EAN_13_UPC_A
    return BarcodeType.UNKNOWN


def _invalid_characters(code: str) -> str:
    seen: list[str] = []
    for char in code:
        if not (char.isascii() and char.isdigit()) and char not in seen:
            seen.append(char)
    return "".join(seen)


def validate_barcode(raw: str) -> ValidationResult:
    """
    Clean and validate a barcode.

    Checks run in this order and the first failure wins: non-digit
    characters, then length (8 or 13), then the EAN-13 check digit.
    EAN-8 check digits are not verified.

    Args:
        raw: Barcode as entered, possibly containing whitespace

    Returns:
        ValidationResult holding either the digits or the error
    """
    code = clean_barcode(raw)
    barcode_type = detect_barcode_type(code)

    invalid = _invalid_characters(code)
    if invalid:
        return ValidationResult(
            barcode=code,
            barcode_type=barcode_type,
            error_kind=ErrorKind.INVALID_CHARACTERS,
            error_params=ErrorParams(invalid_characters=invalid),
        )

    if len(code) not in SUPPORTED_LENGTHS:
        return ValidationResult(
            barcode=code,
            barcode_type=BarcodeType.UNKNOWN,
            error_kind=ErrorKind.INVALID_LENGTH,
            error_params=ErrorParams(length=len(code)),
        )

    if barcode_type == BarcodeType.EAN_13_UPC_A and not validate_ean13_checksum(code):
        return ValidationResult(
            barcode=code,
            barcode_type=barcode_type,
            error_kind=ErrorKind.INVALID_CHECK_DIGIT,
            error_params=ErrorParams(
                expected_check_digit=calculate_ean13_checksum(code),
                actual_check_digit=int(code[-1]),
            ),
        )

    return ValidationResult(
        barcode=code,
        barcode_type=barcode_type,
        digits=BarcodeDigits(code),
    )
