"""
Barcode-to-card decoder.

Turns a raw barcode string into a DecodedCard: validate, apply console
exceptions, choose Method 1 or Method 2, then apply original-hero
overrides. Pure and synchronous; failures come back as data on the card.
"""

import structlog

from src.barcode.digits import BarcodeDigits
from src.barcode.fixed_cards import EpochProduct, get_epoch_product, get_original_hero
from src.barcode.mappings import DigitMappingBuilder
from src.barcode.method1 import decode_method1, is_method1_rejected
from src.barcode.method2 import decode_method2
from src.barcode.result import MethodResult
from src.barcode.validator import validate_barcode
from src.models.card import BarcodeType, CardType, DecodedCard, DecodingMethod
from src.models.explanation import (
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

logger = structlog.get_logger(__name__)


def _invalid_card(
    barcode: str,
    barcode_type: BarcodeType,
    error_kind: ErrorKind,
    error_params: ErrorParams | None,
) -> DecodedCard:
    logger.debug(
        "Barcode rejected",
        barcode=barcode,
        barcode_type=barcode_type.value,
        error_kind=error_kind.value,
    )
    return DecodedCard(
        barcode=barcode,
        barcode_type=barcode_type,
        is_valid=False,
        error_kind=error_kind,
        error_params=error_params or ErrorParams(),
    )


def _epoch_product_card(
    digits: BarcodeDigits,
    product: EpochProduct,
    builder: DigitMappingBuilder,
) -> DecodedCard:
    return DecodedCard(
        barcode=digits.code,
        barcode_type=digits.barcode_type,
        is_valid=True,
        method_used=DecodingMethod.EXCEPTION,
        reason_kind=ReasonKind.EPOCH_PRODUCT,
        reason_params=EpochProductParams(product_name=product.product_name),
        card_type=product.card_type,
        stats=product.stats,
        race=product.race,
        occupation=product.occupation,
        flag=product.flag,
        is_hero=product.is_hero,
        digit_mappings=builder.build(),
    )


def choose_method(
    digits: BarcodeDigits,
) -> tuple[DecodingMethod, ReasonKind, MethodCriteriaParams | None]:
    """
    Pick the decoding method for a validated barcode.

    EAN-8 always uses Method 2. A 13-digit code uses Method 1 unless
    digits A, C and J reject it.
    """
    if digits.barcode_type == BarcodeType.EAN_8:
        return DecodingMethod.METHOD_2, ReasonKind.METHOD2_EAN8, None

    criteria = MethodCriteriaParams(a=digits[0], c=digits[2], j=digits[9])
    if is_method1_rejected(criteria.a, criteria.c, criteria.j):
        return DecodingMethod.METHOD_2, ReasonKind.METHOD1_REJECTED, criteria
    return DecodingMethod.METHOD_1, ReasonKind.METHOD1_CRITERIA_MET, criteria


def _run_method(method: DecodingMethod, digits: BarcodeDigits) -> MethodResult:
    if method == DecodingMethod.METHOD_1:
        return decode_method1(digits.code)
    padded = digits.padded()
    return decode_method2(padded, offset=len(padded) - len(digits))


def decode_barcode(raw: str) -> DecodedCard:
    """
    Decode a barcode into a card.

    Args:
        raw: Barcode string; whitespace anywhere is ignored

    Returns:
        DecodedCard. Check is_valid and error_kind before using card fields.
    """
    validation = validate_barcode(raw)
    if validation.digits is None:
        return _invalid_card(
            validation.barcode,
            validation.barcode_type,
            validation.error_kind,
            validation.error_params,
        )

    digits = validation.digits
    code = digits.code

    builder = DigitMappingBuilder()
    builder.set(
        MappedField.BARCODE_TYPE,
        [],
        ExplanationKind.BARCODE_TYPE_EAN8
        if digits.barcode_type == BarcodeType.EAN_8
        else ExplanationKind.BARCODE_TYPE_EAN13_UPCA,
        {Param.LENGTH: len(digits)},
    )

    product = get_epoch_product(code)
    if product is not None:
        logger.debug("Fixed product barcode", barcode=code, product_name=product.product_name)
        return _epoch_product_card(digits, product, builder)

    method, reason_kind, reason_params = choose_method(digits)
    result = _run_method(method, digits)
    builder.update(result.digit_mappings)

    flag = result.flag
    is_hero = result.is_hero

    hero = get_original_hero(code)
    if hero is not None:
        method = DecodingMethod.EXCEPTION
        reason_kind = ReasonKind.ORIGINAL_HERO
        reason_params = OriginalHeroParams(hero_name=hero.hero_name)
        builder.set(
            MappedField.FLAG,
            builder.indices(MappedField.FLAG),
            ExplanationKind.FLAG_ORIGINAL_HERO,
            {Param.FLAG: hero.flag, Param.ORIGINAL_FLAG: flag, Param.HERO_NAME: hero.hero_name},
        )
        builder.set(
            MappedField.IS_HERO,
            [],
            ExplanationKind.IS_HERO_ORIGINAL_HERO,
            {Param.IS_HERO: hero.is_hero, Param.HERO_NAME: hero.hero_name},
        )
        flag = hero.flag
        is_hero = hero.is_hero

    if result.card_type == CardType.UNKNOWN and method != DecodingMethod.EXCEPTION:
        return _invalid_card(
            code,
            digits.barcode_type,
            ErrorKind.UNRESOLVED_CARD_TYPE,
            ErrorParams(length=len(digits)),
        )

    logger.debug(
        "Barcode decoded",
        barcode=code,
        method=method.value,
        reason=reason_kind.value,
        card_type=result.card_type.value,
    )

    return DecodedCard(
        barcode=code,
        barcode_type=digits.barcode_type,
        is_valid=True,
        method_used=method,
        reason_kind=reason_kind,
        reason_params=reason_params,
        card_type=result.card_type,
        stats=result.stats,
        race=result.race,
        occupation=result.occupation,
        flag=flag,
        is_hero=is_hero,
        is_single_use=result.is_single_use,
        power_up_type=result.power_up_type,
        digit_mappings=builder.build(),
    )
