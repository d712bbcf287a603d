"""
Decoded card record returned by the barcode decoder.
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import Field, model_validator

from src.models.base import CardBaseModel
from src.models.explanation import (
    DigitMapping,
    ErrorKind,
    ErrorParams,
    ReasonKind,
    ReasonParams,
)


class BarcodeType(str, Enum):
    """Barcode shapes the decoder recognises."""

    EAN_8 = "EAN-8"
    EAN_13_UPC_A = "EAN-13/UPC-A"
    UNKNOWN = "Unknown"


class DecodingMethod(str, Enum):
    """How the card fields were obtained."""

    METHOD_1 = "1"
    METHOD_2 = "2"
    EXCEPTION = "Exception"


class CardType(str, Enum):
    """Card categories."""

    SOLDIER = "Soldier"
    WIZARD = "Wizard"
    WEAPON = "Weapon"
    ARMOUR = "Armour"
    POWER_UP = "PowerUp"
    UNKNOWN = "Unknown"


class PowerUpType(str, Enum):
    """Power-up subtypes."""

    HEALTH = "Health"
    HERB = "Herb"
    MAGIC = "Magic"
    VAGUE_NEWS = "VagueNews"
    ACCURATE_NEWS = "AccurateNews"


class Race(IntEnum):
    """Warrior races, keyed by Method 1 digit H."""

    MECH = 0
    ANIMAL = 1
    OCEANIC = 2
    BIRD = 3
    HUMAN = 4


class CardStats(CardBaseModel):
    """Battle statistics. PP and MP are only present where meaningful."""

    hp: int = Field(..., ge=0, description="Hit points")
    st: int = Field(..., ge=0, description="Strength")
    df: int = Field(..., ge=0, description="Defence")
    dx: int = Field(..., ge=0, description="Speed")
    pp: int | None = Field(None, ge=0, description="Power points")
    mp: int | None = Field(None, ge=0, description="Magic points")


# Display order used by table renderers
FLAT_FIELD_ORDER = [
    "barcode",
    "barcode_type",
    "is_valid",
    "error_kind",
    "method_used",
    "reason_kind",
    "card_type",
    "power_up_type",
    "stats.hp",
    "stats.st",
    "stats.df",
    "stats.dx",
    "stats.pp",
    "stats.mp",
    "race",
    "occupation",
    "flag",
    "is_hero",
    "is_single_use",
]

_CARD_FIELDS = (
    "method_used",
    "reason_kind",
    "reason_params",
    "card_type",
    "stats",
    "race",
    "occupation",
    "flag",
    "is_hero",
    "is_single_use",
    "power_up_type",
)


class DecodedCard(CardBaseModel):
    """
    Result of decoding one barcode.

    An invalid card only carries the cleaned barcode, its detected type and
    the error. A valid card always has a resolved card type.
    """

    barcode: str = Field(..., description="Barcode with whitespace removed")
    barcode_type: BarcodeType = BarcodeType.UNKNOWN
    is_valid: bool = False

    # Failure
    error_kind: ErrorKind | None = None
    error_params: ErrorParams | None = None

    # Provenance of the decode
    method_used: DecodingMethod | None = None
    reason_kind: ReasonKind | None = None
    reason_params: ReasonParams | None = None

    # Card fields
    card_type: CardType | None = None
    stats: CardStats | None = None
    race: int | None = Field(None, ge=0, le=4)
    occupation: int | None = Field(None, ge=0, le=9)
    flag: int | None = Field(None, ge=0, le=99, description="Special ability code")
    is_hero: bool | None = None
    is_single_use: bool | None = None
    power_up_type: PowerUpType | None = None

    digit_mappings: dict[str, DigitMapping] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_validity(self) -> "DecodedCard":
        if self.is_valid:
            if self.error_kind is not None or self.error_params is not None:
                raise ValueError("A valid card cannot carry an error")
            if self.card_type in (None, CardType.UNKNOWN):
                raise ValueError("A valid card needs a resolved card type")
            if self.method_used is None:
                raise ValueError("A valid card needs a decoding method")
        else:
            if self.error_kind is None:
                raise ValueError("An invalid card needs an error kind")
            populated = [name for name in _CARD_FIELDS if getattr(self, name) is not None]
            if populated:
                raise ValueError(f"An invalid card cannot carry card fields: {populated}")
        return self

    @property
    def race_name(self) -> str | None:
        """Race label for warriors, e.g. 'BIRD'."""
        if self.race is None:
            return None
        return Race(self.race).name

    def to_flat_dict(self) -> dict[str, Any]:
        """
        Flatten the card into display order.

        Stats become 'stats.<name>' keys and enums become their values.
        Absent fields are skipped; mappings and parameters are left out.
        """
        data = self.model_dump(mode="json", exclude_none=True)
        stats = data.pop("stats", None) or {}
        for name, value in stats.items():
            data[f"stats.{name}"] = value

        return {key: data[key] for key in FLAT_FIELD_ORDER if key in data}
