"""
Validated barcode digit sequence.
"""

from dataclasses import dataclass

from src.models.card import BarcodeType

SUPPORTED_LENGTHS = (8, 13)
EAN8_PADDING = "00000"


@dataclass(frozen=True)
class BarcodeDigits:
    """
    A cleaned 8- or 13-digit barcode.

    Indexing returns the digit value at a 0-based position.
    """

    code: str

    def __post_init__(self) -> None:
        if not (self.code.isascii() and self.code.isdigit()):
            raise ValueError(f"Barcode must contain only digits: {self.code!r}")
        if len(self.code) not in SUPPORTED_LENGTHS:
            raise ValueError(f"Unsupported barcode length: {len(self.code)}")

    def __len__(self) -> int:
        return len(self.code)

    def __getitem__(self, index: int) -> int:
        return int(self.code[index])

    def __str__(self) -> str:
        return self.code

    @property
    def barcode_type(self) -> BarcodeType:
        if len(self.code) == 8:
            return BarcodeType.EAN_8
        return BarcodeType.EAN_13_UPC_A

    def padded(self) -> str:
        """
        13-digit form of the code.

        EAN-8 codes get five leading zeros; 13-digit codes are unchanged.
        """
        if len(self.code) == 8:
            return EAN8_PADDING + self.code
        return self.code
