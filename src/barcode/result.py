"""
Intermediate result shared by the Method 1 and Method 2 decoders.
"""

from dataclasses import dataclass, field

from src.models.card import CardStats, CardType, PowerUpType
from src.models.explanation import DigitMapping


@dataclass(frozen=True)
class MethodResult:
    """Card fields computed by one decoding method, before any override."""

    card_type: CardType
    stats: CardStats
    flag: int
    is_hero: bool
    race: int | None = None
    occupation: int | None = None
    is_single_use: bool | None = None
    power_up_type: PowerUpType | None = None
    digit_mappings: dict[str, DigitMapping] = field(default_factory=dict)


def clamp(value: int) -> int:
    """Clamp a stat to be non-negative."""
    return max(value, 0)
