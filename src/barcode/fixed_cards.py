"""
Barcodes whose cards are fixed rather than decoded.

Two kinds of entry:

- Epoch products (the game consoles): the stored card is returned as is
  and no decoding method runs.
- Original heroes: the barcode decodes normally with Method 1, then the
  flag and hero status are forced.
"""

from dataclasses import dataclass
from types import MappingProxyType

from src.models.card import CardStats, CardType


@dataclass(frozen=True)
class EpochProduct:
    """A complete precomputed card for a console barcode."""

    product_name: str
    card_type: CardType
    stats: CardStats
    race: int
    occupation: int
    flag: int
    is_hero: bool


@dataclass(frozen=True)
class OriginalHero:
    """Override applied on top of the Method 1 result."""

    hero_name: str
    flag: int = 50
    is_hero: bool = True


ExceptionEntry = EpochProduct | OriginalHero


EXCEPTION_TABLE: MappingProxyType[str, ExceptionEntry] = MappingProxyType(
    {
        "4905040352507": EpochProduct(
            product_name="Barcode Battler Console",
            card_type=CardType.SOLDIER,
            stats=CardStats(hp=5200, st=1500, df=100, dx=6, pp=5, mp=0),
            race=1,
            occupation=0,
            flag=50,
            is_hero=True,
        ),
        "4905040352521": EpochProduct(
            product_name="Barcode Battler II Console",
            card_type=CardType.WIZARD,
            stats=CardStats(hp=5200, st=1500, df=100, dx=7, pp=5, mp=10),
            race=1,
            occupation=8,
            flag=50,
            is_hero=True,
        ),
        "0120401154185": OriginalHero(hero_name="Rarman"),
        "0120201044181": OriginalHero(hero_name="U-Ronchan"),
        "0120102308184": OriginalHero(hero_name="Bon-Curry"),
        "0150604154187": OriginalHero(hero_name="Cha-Han"),
        "0180506308180": OriginalHero(hero_name="Meatman"),
    }
)


def lookup(barcode: str) -> ExceptionEntry | None:
    """Find the fixed entry for a cleaned barcode, if any."""
    return EXCEPTION_TABLE.get(barcode)


def get_epoch_product(barcode: str) -> EpochProduct | None:
    entry = lookup(barcode)
    return entry if isinstance(entry, EpochProduct) else None


def get_original_hero(barcode: str) -> OriginalHero | None:
    entry = lookup(barcode)
    return entry if isinstance(entry, OriginalHero) else None


def is_original_hero(barcode: str) -> bool:
    """Check if a cleaned barcode is one of the original hero cards."""
    return get_original_hero(barcode) is not None
