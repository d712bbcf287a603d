"""
Pydantic models for decoded cards and their provenance.
"""

from src.models.card import (
    BarcodeType,
    CardStats,
    CardType,
    DecodedCard,
    DecodingMethod,
    PowerUpType,
    Race,
)
from src.models.explanation import (
    DigitMapping,
    EpochProductParams,
    ErrorKind,
    ErrorParams,
    ExplanationKind,
    MappedField,
    MethodCriteriaParams,
    OriginalHeroParams,
    Param,
    ReasonKind,
)
from src.models.saved_card import SavedCardState

__all__ = [
    # Card
    "BarcodeType",
    "CardStats",
    "CardType",
    "DecodedCard",
    "DecodingMethod",
    "PowerUpType",
    "Race",
    # Provenance
    "DigitMapping",
    "EpochProductParams",
    "ErrorKind",
    "ErrorParams",
    "ExplanationKind",
    "MappedField",
    "MethodCriteriaParams",
    "OriginalHeroParams",
    "Param",
    "ReasonKind",
    # Saved state
    "SavedCardState",
]
