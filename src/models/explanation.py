"""
Machine-readable tags and parameters describing how a card was decoded.

The decoder never produces prose. Every error, reason and per-field
explanation is a stable tag plus the data a front end needs to render
its own localized message.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from src.models.base import CardBaseModel


class ErrorKind(str, Enum):
    """Reasons a barcode could not be decoded into a card."""

    INVALID_CHARACTERS = "invalid_characters"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHECK_DIGIT = "invalid_check_digit"
    UNRESOLVED_CARD_TYPE = "unresolved_card_type"


class ErrorParams(CardBaseModel):
    """Interpolation data for an error message."""

    length: int | None = Field(None, ge=0, description="Cleaned barcode length")
    invalid_characters: str | None = Field(
        None, description="Offending characters, in order of first appearance"
    )
    expected_check_digit: int | None = Field(None, ge=0, le=9)
    actual_check_digit: int | None = Field(None, ge=0, le=9)


class ReasonKind(str, Enum):
    """Why a decoding method or exception was applied."""

    METHOD2_EAN8 = "method2_ean8"
    METHOD1_REJECTED = "method1_rejected"
    METHOD1_CRITERIA_MET = "method1_criteria_met"
    EPOCH_PRODUCT = "epoch_product"
    ORIGINAL_HERO = "original_hero"


class MethodCriteriaParams(CardBaseModel):
    """Digits A, C and J that decide between Method 1 and Method 2."""

    kind: Literal["method_criteria"] = "method_criteria"
    a: int = Field(..., ge=0, le=9)
    c: int = Field(..., ge=0, le=9)
    j: int = Field(..., ge=0, le=9)


class EpochProductParams(CardBaseModel):
    kind: Literal["epoch_product"] = "epoch_product"
    product_name: str


class OriginalHeroParams(CardBaseModel):
    kind: Literal["original_hero"] = "original_hero"
    hero_name: str


ReasonParams = Annotated[
    MethodCriteriaParams | EpochProductParams | OriginalHeroParams,
    Field(discriminator="kind"),
]


class MappedField(str, Enum):
    """Output fields that carry a digit mapping."""

    BARCODE_TYPE = "barcode_type"
    CARD_TYPE = "card_type"
    HP = "stats.hp"
    ST = "stats.st"
    DF = "stats.df"
    DX = "stats.dx"
    PP = "stats.pp"
    MP = "stats.mp"
    RACE = "race"
    OCCUPATION = "occupation"
    FLAG = "flag"
    IS_HERO = "is_hero"
    IS_SINGLE_USE = "is_single_use"
    POWER_UP_TYPE = "power_up_type"


class ExplanationKind(str, Enum):
    """Which decoding rule produced a field value."""

    # Barcode shape
    BARCODE_TYPE_EAN8 = "barcode_type_ean8"
    BARCODE_TYPE_EAN13_UPCA = "barcode_type_ean13_upca"

    # Method 1
    HP_METHOD1 = "hp_method1"
    HP_METHOD1_ITEM = "hp_method1_item"
    HP_METHOD1_NEWS = "hp_method1_news"
    HP_METHOD1_HERB = "hp_method1_herb"
    HP_METHOD1_MAGIC = "hp_method1_magic"
    ST_METHOD1_WARRIOR = "st_method1_warrior"
    ST_METHOD1_WEAPON = "st_method1_weapon"
    ST_METHOD1_ARMOUR = "st_method1_armour"
    ST_METHOD1_HEALTH = "st_method1_health"
    ST_METHOD1_NEWS = "st_method1_news"
    ST_METHOD1_HERB = "st_method1_herb"
    ST_METHOD1_MAGIC = "st_method1_magic"
    DF_METHOD1_WARRIOR = "df_method1_warrior"
    DF_METHOD1_WEAPON = "df_method1_weapon"
    DF_METHOD1_ARMOUR = "df_method1_armour"
    DF_METHOD1_HEALTH = "df_method1_health"
    DF_METHOD1_NEWS = "df_method1_news"
    DF_METHOD1_HERB = "df_method1_herb"
    DF_METHOD1_MAGIC = "df_method1_magic"
    DX_METHOD1 = "dx_method1"
    FLAG_METHOD1 = "flag_method1"
    RACE_METHOD1 = "race_method1"
    OCCUPATION_METHOD1 = "occupation_method1"
    CARD_TYPE_METHOD1_WARRIOR = "card_type_method1_warrior"
    CARD_TYPE_METHOD1_WEAPON = "card_type_method1_weapon"
    CARD_TYPE_METHOD1_ARMOUR = "card_type_method1_armour"
    CARD_TYPE_METHOD1_POWER_UP = "card_type_method1_power_up"
    SINGLE_USE_METHOD1 = "single_use_method1"
    PP_METHOD1_WARRIOR = "pp_method1_warrior"
    MP_METHOD1_WARRIOR = "mp_method1_warrior"
    PP_METHOD1_HERB = "pp_method1_herb"
    MP_METHOD1_MAGIC = "mp_method1_magic"
    POWER_UP_TYPE_METHOD1 = "power_up_type_method1"
    IS_HERO_METHOD1 = "is_hero_method1"

    # Method 2
    DX_METHOD2 = "dx_method2"
    FLAG_METHOD2 = "flag_method2"
    FLAG_METHOD2_ADJUSTED = "flag_method2_adjusted"
    FLAG_METHOD2_HERO = "flag_method2_hero"
    CARD_TYPE_METHOD2_HERO = "card_type_method2_hero"
    HP_METHOD2_HERO = "hp_method2_hero"
    ST_METHOD2_HERO = "st_method2_hero"
    DF_METHOD2_HERO = "df_method2_hero"
    IS_HERO_METHOD2_HERO = "is_hero_method2_hero"
    CARD_TYPE_METHOD2_WEAPON = "card_type_method2_weapon"
    HP_METHOD2_WEAPON = "hp_method2_weapon"
    ST_METHOD2_WEAPON = "st_method2_weapon"
    DF_METHOD2_WEAPON = "df_method2_weapon"
    SINGLE_USE_METHOD2_WEAPON = "single_use_method2_weapon"
    CARD_TYPE_METHOD2_ARMOUR = "card_type_method2_armour"
    HP_METHOD2_ARMOUR = "hp_method2_armour"
    ST_METHOD2_ARMOUR = "st_method2_armour"
    DF_METHOD2_ARMOUR = "df_method2_armour"
    SINGLE_USE_METHOD2_ARMOUR = "single_use_method2_armour"
    CARD_TYPE_METHOD2_POWER_UP = "card_type_method2_power_up"
    POWER_UP_TYPE_METHOD2 = "power_up_type_method2"
    HP_METHOD2_POWER_UP = "hp_method2_power_up"
    ST_METHOD2_POWER_UP = "st_method2_power_up"
    DF_METHOD2_POWER_UP = "df_method2_power_up"
    IS_HERO_METHOD2_ITEM = "is_hero_method2_item"

    # Fixed-barcode overrides
    FLAG_ORIGINAL_HERO = "flag_original_hero"
    IS_HERO_ORIGINAL_HERO = "is_hero_original_hero"


class Param(str, Enum):
    """Keys for explanation interpolation data."""

    # Method 1 digits, labelled by position
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"

    # Method 2 digits, labelled from the end of the barcode
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"

    # Computed values
    HP = "hp"
    ST = "st"
    DF = "df"
    DX = "dx"
    PP = "pp"
    MP = "mp"
    BASE_HP = "base_hp"
    BASE_ST = "base_st"
    BASE_DF = "base_df"
    ST_BONUS = "st_bonus"
    DF_BONUS = "df_bonus"
    FLAG = "flag"
    ORIGINAL_FLAG = "original_flag"
    RACE = "race"
    OCCUPATION = "occupation"
    CARD_TYPE = "card_type"
    POWER_UP_TYPE = "power_up_type"
    IS_HERO = "is_hero"
    IS_SINGLE_USE = "is_single_use"
    LENGTH = "length"
    HERO_NAME = "hero_name"


ParamValue = bool | int | str

ExplanationParams = dict[Param, ParamValue]


class DigitMapping(CardBaseModel):
    """
    Provenance of one output field.

    Names the barcode positions a value was read from and the rule that
    produced it. Purely descriptive: nothing in decoding reads it back.
    """

    source_indices: tuple[Annotated[int, Field(ge=0)], ...] = ()
    explanation_kind: ExplanationKind
    explanation_params: ExplanationParams = Field(default_factory=dict)
