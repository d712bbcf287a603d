"""
Method 2 decoding for EAN-8 barcodes and 13-digit barcodes rejected by
Method 1.

Only the last six digits matter. They are labelled P Q R S T U, where T
picks the card class and U (the check digit) is unused.
"""

from src.barcode.mappings import DigitMappingBuilder
from src.barcode.result import MethodResult, clamp
from src.models.card import CardStats, CardType, PowerUpType
from src.models.explanation import ExplanationKind as Kind
from src.models.explanation import MappedField as Field
from src.models.explanation import Param

HERO_FLAG = 50
MAX_ITEM_FLAG = 29


def decode_method2(code: str, offset: int = 0) -> MethodResult:
    """
    Decode a 13-digit barcode with Method 2.

    Args:
        code: 13-digit barcode, already zero-padded if it started as EAN-8
        offset: Number of padding digits to subtract from recorded indices

    Raises:
        ValueError: If code is not 13 ASCII digits
    """
    if len(code) != 13 or not (code.isascii() and code.isdigit()):
        raise ValueError(f"Method 2 needs a 13-digit barcode: {code!r}")

    length = len(code)
    p_idx, q_idx, r_idx, s_idx, t_idx = range(length - 6, length - 1)
    P, Q, R, S, T = (int(code[i]) for i in (p_idx, q_idx, r_idx, s_idx, t_idx))
    m = DigitMappingBuilder(offset=offset)

    dx = 0
    m.set(Field.DX, [], Kind.DX_METHOD2, {Param.DX: dx})

    flag = 10 * P + R
    original_flag = flag
    if flag > MAX_ITEM_FLAG and T >= 5:
        flag = 0
        m.set(
            Field.FLAG,
            [p_idx, r_idx, t_idx],
            Kind.FLAG_METHOD2_ADJUSTED,
            {Param.FLAG: flag, Param.ORIGINAL_FLAG: original_flag, Param.P: P, Param.R: R, Param.T: T},
        )
    else:
        m.set(Field.FLAG, [p_idx, r_idx], Kind.FLAG_METHOD2, {Param.FLAG: flag, Param.P: P, Param.R: R})

    is_hero = False
    is_single_use: bool | None = None
    power_up_type: PowerUpType | None = None
    hp = st = df = 0

    if T < 5:
        # Method 2 cannot tell soldiers from wizards
        card_type = CardType.SOLDIER
        card_type_kind = Kind.CARD_TYPE_METHOD2_HERO

        hp = 1000 * (10 * (S // 2) + R) + 100 * Q
        m.set(
            Field.HP,
            [q_idx, r_idx, s_idx],
            Kind.HP_METHOD2_HERO,
            {Param.HP: hp, Param.Q: Q, Param.R: R, Param.S: S},
        )
        st = 1000 * ((R + 5) % 10 + 2) + 100 * ((Q + 5) % 10)
        m.set(Field.ST, [q_idx, r_idx], Kind.ST_METHOD2_HERO, {Param.ST: st, Param.Q: Q, Param.R: R})
        df = 1000 * ((Q + 7) % 10) + 100 * ((P + 7) % 10)
        m.set(Field.DF, [p_idx, q_idx], Kind.DF_METHOD2_HERO, {Param.DF: df, Param.P: P, Param.Q: Q})

        # Every Method 2 warrior is a hero, whatever P and R said
        flag = HERO_FLAG
        m.set(
            Field.FLAG,
            [t_idx],
            Kind.FLAG_METHOD2_HERO,
            {Param.FLAG: flag, Param.ORIGINAL_FLAG: original_flag, Param.T: T},
        )
        is_hero = True
        m.set(Field.IS_HERO, [t_idx], Kind.IS_HERO_METHOD2_HERO, {Param.IS_HERO: is_hero, Param.T: T})

    elif T in (5, 6):
        card_type = CardType.WEAPON
        card_type_kind = Kind.CARD_TYPE_METHOD2_WEAPON

        st = 1000 * (1 + R // 4) + 100 * ((Q + 5) % 10)
        m.set(Field.ST, [q_idx, r_idx], Kind.ST_METHOD2_WEAPON, {Param.ST: st, Param.Q: Q, Param.R: R})
        is_single_use = T == 5
        m.set(
            Field.IS_SINGLE_USE,
            [t_idx],
            Kind.SINGLE_USE_METHOD2_WEAPON,
            {Param.IS_SINGLE_USE: is_single_use, Param.T: T},
        )
        m.set(Field.HP, [], Kind.HP_METHOD2_WEAPON)
        m.set(Field.DF, [], Kind.DF_METHOD2_WEAPON)

    elif T in (7, 8):
        card_type = CardType.ARMOUR
        card_type_kind = Kind.CARD_TYPE_METHOD2_ARMOUR

        df = 1000 * (Q // 4) + 100 * ((P + 7) % 10)
        m.set(Field.DF, [p_idx, q_idx], Kind.DF_METHOD2_ARMOUR, {Param.DF: df, Param.P: P, Param.Q: Q})
        is_single_use = T == 7
        m.set(
            Field.IS_SINGLE_USE,
            [t_idx],
            Kind.SINGLE_USE_METHOD2_ARMOUR,
            {Param.IS_SINGLE_USE: is_single_use, Param.T: T},
        )
        m.set(Field.HP, [], Kind.HP_METHOD2_ARMOUR)
        m.set(Field.ST, [], Kind.ST_METHOD2_ARMOUR)

    else:
        card_type = CardType.POWER_UP
        card_type_kind = Kind.CARD_TYPE_METHOD2_POWER_UP

        power_up_type = PowerUpType.HEALTH
        m.set(
            Field.POWER_UP_TYPE,
            [t_idx],
            Kind.POWER_UP_TYPE_METHOD2,
            {Param.POWER_UP_TYPE: power_up_type.value, Param.T: T},
        )
        hp = 10000 * (S // 8) + 1000 * R + 100 * Q
        m.set(
            Field.HP,
            [q_idx, r_idx, s_idx],
            Kind.HP_METHOD2_POWER_UP,
            {Param.HP: hp, Param.Q: Q, Param.R: R, Param.S: S},
        )
        m.set(Field.ST, [], Kind.ST_METHOD2_POWER_UP)
        m.set(Field.DF, [], Kind.DF_METHOD2_POWER_UP)

    if not is_hero:
        m.set(Field.IS_HERO, [t_idx], Kind.IS_HERO_METHOD2_ITEM, {Param.IS_HERO: is_hero, Param.T: T})

    m.set(
        Field.CARD_TYPE,
        [t_idx],
        card_type_kind,
        {Param.CARD_TYPE: card_type.value, Param.T: T},
    )

    return MethodResult(
        card_type=card_type,
        stats=CardStats(hp=clamp(hp), st=clamp(st), df=clamp(df), dx=dx),
        flag=flag,
        is_hero=is_hero,
        is_single_use=is_single_use,
        power_up_type=power_up_type,
        digit_mappings=m.build(),
    )
