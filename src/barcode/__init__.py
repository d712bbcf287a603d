"""
Barcode validation and card decoding.
"""

from src.barcode.decoder import choose_method, decode_barcode
from src.barcode.digits import BarcodeDigits
from src.barcode.fixed_cards import EXCEPTION_TABLE, is_original_hero, lookup
from src.barcode.method1 import decode_method1, is_method1_rejected
from src.barcode.method2 import decode_method2
from src.barcode.validator import (
    ValidationResult,
    calculate_ean13_checksum,
    clean_barcode,
    detect_barcode_type,
    validate_barcode,
    validate_ean13_checksum,
)

__all__ = [
    "BarcodeDigits",
    "EXCEPTION_TABLE",
    "ValidationResult",
    "calculate_ean13_checksum",
    "choose_method",
    "clean_barcode",
    "decode_barcode",
    "decode_method1",
    "decode_method2",
    "detect_barcode_type",
    "is_method1_rejected",
    "is_original_hero",
    "lookup",
    "validate_barcode",
    "validate_ean13_checksum",
]
