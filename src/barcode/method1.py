"""
Method 1 decoding for 13-digit barcodes.

Digits are labelled A..M by position (M is the check digit and is unused):

    A B C  -> HP          D E -> ST        F G -> DF
    H      -> card class  I   -> occupation / power-up subtype
    J      -> DX          K L -> special ability flag
"""

from src.barcode.mappings import DigitMappingBuilder
from src.barcode.result import MethodResult, clamp
from src.models.card import CardStats, CardType, PowerUpType
from src.models.explanation import ExplanationKind as Kind
from src.models.explanation import MappedField as Field
from src.models.explanation import Param

HERO_FLAGS = (19, 50)
HERO_MAX_HP = 6000
HERO_MAX_ST = 2000
HERO_MAX_DF = 2000

WARRIOR_PP = 5
WARRIOR_MP = 10
ATTRIBUTE_BONUS = 10000


def is_method1_rejected(a: int, c: int, j: int) -> bool:
    """True when digits A, C and J rule out Method 1."""
    return a > 2 and (c < 9 or j != 5)


def decode_method1(code: str) -> MethodResult:
    """
    Decode a 13-digit barcode with Method 1.

    The caller decides whether Method 1 applies; see is_method1_rejected.

    Raises:
        ValueError: If code is not 13 ASCII digits
    """
    if len(code) != 13 or not (code.isascii() and code.isdigit()):
        raise ValueError(f"Method 1 needs a 13-digit barcode: {code!r}")

    A, B, C, D, E, F, G, H, I, J, K, L = (int(d) for d in code[:12])  # noqa: E741
    m = DigitMappingBuilder()

    base_hp = A * 10000 + B * 1000 + C * 100
    base_st = D * 1000 + E * 100
    base_df = F * 1000 + G * 100
    hp = base_hp
    m.set(
        Field.HP,
        [0, 1, 2],
        Kind.HP_METHOD1,
        {Param.HP: hp, Param.A: A, Param.B: B, Param.C: C},
    )

    dx = J
    m.set(Field.DX, [9], Kind.DX_METHOD1, {Param.DX: dx, Param.J: J})

    flag = K * 10 + L
    m.set(Field.FLAG, [10, 11], Kind.FLAG_METHOD1, {Param.FLAG: flag, Param.K: K, Param.L: L})

    # High-A barcodes that pass the Method 1 gate may boost ST and/or DF.
    # H == 2 triggers both.
    st_bonus = 0
    df_bonus = 0
    st_indices = [3, 4]
    df_indices = [5, 6]
    if A > 2:
        if H in (0, 2):
            st_bonus = ATTRIBUTE_BONUS
            st_indices.append(7)
        if H in (1, 2):
            df_bonus = ATTRIBUTE_BONUS
            df_indices.append(7)

    st = 0
    df = 0
    race: int | None = None
    occupation: int | None = None
    is_single_use: bool | None = None
    power_up_type: PowerUpType | None = None
    pp: int | None = None
    mp: int | None = None

    card_type_indices = [7]
    card_type_params = {Param.H: H, Param.I: I}

    if H <= 4:
        race = H
        m.set(Field.RACE, [7], Kind.RACE_METHOD1, {Param.RACE: race, Param.H: H})
        occupation = I
        m.set(
            Field.OCCUPATION,
            [8],
            Kind.OCCUPATION_METHOD1,
            {Param.OCCUPATION: occupation, Param.I: I},
        )
        card_type = CardType.WIZARD if I >= 7 else CardType.SOLDIER
        card_type_indices.append(8)
        card_type_kind = Kind.CARD_TYPE_METHOD1_WARRIOR

        st = base_st + st_bonus
        df = base_df + df_bonus
        m.set(
            Field.ST,
            st_indices,
            Kind.ST_METHOD1_WARRIOR,
            {Param.ST: st, Param.BASE_ST: base_st, Param.ST_BONUS: st_bonus, Param.A: A, Param.H: H},
        )
        m.set(
            Field.DF,
            df_indices,
            Kind.DF_METHOD1_WARRIOR,
            {Param.DF: df, Param.BASE_DF: base_df, Param.DF_BONUS: df_bonus, Param.A: A, Param.H: H},
        )

        pp = WARRIOR_PP
        m.set(Field.PP, [], Kind.PP_METHOD1_WARRIOR, {Param.PP: pp})
        mp = WARRIOR_MP if I >= 6 else 0
        m.set(Field.MP, [8], Kind.MP_METHOD1_WARRIOR, {Param.MP: mp, Param.I: I})

    elif H in (5, 6):
        card_type = CardType.WEAPON
        card_type_kind = Kind.CARD_TYPE_METHOD1_WEAPON
        occupation = I
        m.set(
            Field.OCCUPATION,
            [8],
            Kind.OCCUPATION_METHOD1,
            {Param.OCCUPATION: occupation, Param.I: I},
        )
        is_single_use = H == 5
        m.set(
            Field.IS_SINGLE_USE,
            [7],
            Kind.SINGLE_USE_METHOD1,
            {Param.IS_SINGLE_USE: is_single_use, Param.H: H},
        )

        st = base_st + st_bonus
        m.set(
            Field.ST,
            st_indices,
            Kind.ST_METHOD1_WEAPON,
            {Param.ST: st, Param.BASE_ST: base_st, Param.ST_BONUS: st_bonus, Param.A: A, Param.H: H},
        )
        m.set(Field.DF, df_indices, Kind.DF_METHOD1_WEAPON, {Param.BASE_DF: base_df})
        hp = 0
        m.set(
            Field.HP,
            [0, 1, 2],
            Kind.HP_METHOD1_ITEM,
            {Param.BASE_HP: base_hp, Param.CARD_TYPE: card_type.value},
        )

    elif H in (7, 8):
        card_type = CardType.ARMOUR
        card_type_kind = Kind.CARD_TYPE_METHOD1_ARMOUR
        occupation = I
        m.set(
            Field.OCCUPATION,
            [8],
            Kind.OCCUPATION_METHOD1,
            {Param.OCCUPATION: occupation, Param.I: I},
        )
        is_single_use = H == 7
        m.set(
            Field.IS_SINGLE_USE,
            [7],
            Kind.SINGLE_USE_METHOD1,
            {Param.IS_SINGLE_USE: is_single_use, Param.H: H},
        )

        df = base_df + df_bonus
        m.set(
            Field.DF,
            df_indices,
            Kind.DF_METHOD1_ARMOUR,
            {Param.DF: df, Param.BASE_DF: base_df, Param.DF_BONUS: df_bonus, Param.A: A, Param.H: H},
        )
        m.set(Field.ST, st_indices, Kind.ST_METHOD1_ARMOUR, {Param.BASE_ST: base_st})
        hp = 0
        m.set(
            Field.HP,
            [0, 1, 2],
            Kind.HP_METHOD1_ITEM,
            {Param.BASE_HP: base_hp, Param.CARD_TYPE: card_type.value},
        )

    else:
        card_type = CardType.POWER_UP
        card_type_kind = Kind.CARD_TYPE_METHOD1_POWER_UP
        card_type_indices.append(8)

        if I <= 4:
            power_up_type = PowerUpType.HEALTH
            # HP keeps its A B C value
            m.set(Field.ST, [3, 4], Kind.ST_METHOD1_HEALTH, {Param.BASE_ST: base_st})
            m.set(Field.DF, [5, 6], Kind.DF_METHOD1_HEALTH, {Param.BASE_DF: base_df})

        elif I in (5, 6):
            power_up_type = PowerUpType.VAGUE_NEWS if I == 5 else PowerUpType.ACCURATE_NEWS
            hp = 0
            m.set(Field.HP, [0, 1, 2], Kind.HP_METHOD1_NEWS, {Param.BASE_HP: base_hp})
            m.set(Field.ST, [3, 4], Kind.ST_METHOD1_NEWS, {Param.BASE_ST: base_st})
            m.set(Field.DF, [5, 6], Kind.DF_METHOD1_NEWS, {Param.BASE_DF: base_df})

        elif I == 7:
            power_up_type = PowerUpType.HERB
            pp = D * 100 + E
            m.set(Field.PP, [3, 4], Kind.PP_METHOD1_HERB, {Param.PP: pp, Param.D: D, Param.E: E})
            hp = 0
            m.set(Field.HP, [0, 1, 2], Kind.HP_METHOD1_HERB, {Param.BASE_HP: base_hp})
            m.set(Field.ST, [3, 4], Kind.ST_METHOD1_HERB, {Param.BASE_ST: base_st})
            m.set(Field.DF, [5, 6], Kind.DF_METHOD1_HERB, {Param.BASE_DF: base_df})

        else:
            power_up_type = PowerUpType.MAGIC
            mp = F * 100 + G
            m.set(Field.MP, [5, 6], Kind.MP_METHOD1_MAGIC, {Param.MP: mp, Param.F: F, Param.G: G})
            hp = 0
            m.set(Field.HP, [0, 1, 2], Kind.HP_METHOD1_MAGIC, {Param.BASE_HP: base_hp})
            m.set(Field.ST, [3, 4], Kind.ST_METHOD1_MAGIC, {Param.BASE_ST: base_st})
            m.set(Field.DF, [5, 6], Kind.DF_METHOD1_MAGIC, {Param.BASE_DF: base_df})

        m.set(
            Field.POWER_UP_TYPE,
            [8],
            Kind.POWER_UP_TYPE_METHOD1,
            {Param.POWER_UP_TYPE: power_up_type.value, Param.I: I},
        )

    card_type_params[Param.CARD_TYPE] = card_type.value
    m.set(Field.CARD_TYPE, card_type_indices, card_type_kind, card_type_params)

    hp, st, df = clamp(hp), clamp(st), clamp(df)

    is_hero = flag in HERO_FLAGS and hp < HERO_MAX_HP and st < HERO_MAX_ST and df < HERO_MAX_DF
    hero_indices: list[int] = []
    for field in (Field.FLAG, Field.HP, Field.ST, Field.DF):
        for index in m.indices(field):
            if index not in hero_indices:
                hero_indices.append(index)
    m.set(
        Field.IS_HERO,
        hero_indices,
        Kind.IS_HERO_METHOD1,
        {Param.IS_HERO: is_hero, Param.FLAG: flag, Param.HP: hp, Param.ST: st, Param.DF: df},
    )

    return MethodResult(
        card_type=card_type,
        stats=CardStats(hp=hp, st=st, df=df, dx=dx, pp=pp, mp=mp),
        flag=flag,
        is_hero=is_hero,
        race=race,
        occupation=occupation,
        is_single_use=is_single_use,
        power_up_type=power_up_type,
        digit_mappings=m.build(),
    )
