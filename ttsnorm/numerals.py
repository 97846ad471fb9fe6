"""Spell integers and floats out as Chinese numerals."""

from __future__ import annotations

import math
from enum import Enum

__all__ = [
    "ChineseVariant",
    "ChineseCase",
    "ChineseCountMethod",
    "NumberToChineseError",
    "to_chinese",
    "to_chinese_naive",
]


class ChineseVariant(Enum):
    """Script variant of the output."""

    TRADITIONAL = "traditional"
    SIMPLE = "simple"


class ChineseCase(Enum):
    """Ordinary (lower) or financial (upper) digit forms."""

    UPPER = "upper"
    LOWER = "lower"


class ChineseCountMethod(Enum):
    """How the large units scale."""

    LOW = "low"
    TEN_THOUSAND = "ten_thousand"
    MIDDLE = "middle"
    HIGH = "high"


class NumberToChineseError(ValueError):
    """The value is too large or too small for the chosen count method."""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"

    def __init__(self, kind: str) -> None:
        super().__init__(kind)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NumberToChineseError) and other.kind == self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


_DIGITS = {
    (ChineseVariant.TRADITIONAL, ChineseCase.UPPER): "零壹貳參肆伍陸柒捌玖",
    (ChineseVariant.TRADITIONAL, ChineseCase.LOWER): "零一二三四五六七八九",
    (ChineseVariant.SIMPLE, ChineseCase.UPPER): "零壹贰叁肆伍陆柒捌玖",
    (ChineseVariant.SIMPLE, ChineseCase.LOWER): "零一二三四五六七八九",
}
_SMALL_UNITS = {ChineseCase.UPPER: "拾佰仟", ChineseCase.LOWER: "十百千"}
_BIG_UNITS = {
    ChineseVariant.TRADITIONAL: "萬億兆京垓秭穰溝澗正載極",
    ChineseVariant.SIMPLE: "万亿兆京垓秭穰沟涧正载极",
}
_NEGATIVE = {ChineseVariant.TRADITIONAL: "負", ChineseVariant.SIMPLE: "负"}
_POINT = {ChineseVariant.TRADITIONAL: "點", ChineseVariant.SIMPLE: "点"}
_JIAO = "角"
_FEN = "分"


def _big_exponents(method: ChineseCountMethod) -> list[int]:
    if method is ChineseCountMethod.LOW:
        return [i + 4 for i in range(12)]
    if method is ChineseCountMethod.TEN_THOUSAND:
        return [4 * (i + 1) for i in range(12)]
    if method is ChineseCountMethod.MIDDLE:
        return [4] + [8 * i for i in range(1, 12)]
    return [2 ** (i + 2) for i in range(12)]


def _limit(method: ChineseCountMethod) -> int:
    top = _big_exponents(method)[-1]
    width = {
        ChineseCountMethod.LOW: 1,
        ChineseCountMethod.TEN_THOUSAND: 4,
        ChineseCountMethod.MIDDLE: 8,
        ChineseCountMethod.HIGH: top,
    }[method]
    return 10 ** (top + width)


def _units(variant, case, method) -> list[tuple[str, int]]:
    big = list(zip(_BIG_UNITS[variant], _big_exponents(method)))
    small = list(zip(_SMALL_UNITS[case], (1, 2, 3)))
    return list(reversed(small + big))


def _render(n: int, units: list[tuple[str, int]], digits: str) -> str:
    for pos, (char, exp) in enumerate(units):
        base = 10**exp
        if n >= base:
            high, low = divmod(n, base)
            rest = units[pos + 1:]
            text = _render(high, rest, digits) + char
            if low:
                if low < base // 10:
                    text += digits[0]
                text += _render(low, rest, digits)
            return text
    return digits[n]


def _split_float(value: float) -> tuple[bool, int, int]:
    """Return (negative, integer part, hundredths rounded)."""
    if math.isnan(value):
        raise ValueError("cannot spell NaN")
    negative = value < 0
    magnitude = abs(value)
    if math.isinf(magnitude):
        raise NumberToChineseError(
            NumberToChineseError.UNDERFLOW if negative else NumberToChineseError.OVERFLOW
        )
    integer = int(magnitude)
    cents = round((magnitude - integer) * 100)
    if cents >= 100:
        integer += 1
        cents -= 100
    return negative, integer, cents


def to_chinese(value, variant, case, method) -> str:
    """Spell ``value`` with units; floats get 角 and 分 for two decimals."""
    digits = _DIGITS[(variant, case)]
    if isinstance(value, float):
        negative, integer, cents = _split_float(value)
    else:
        negative, integer, cents = value < 0, abs(int(value)), 0
    if integer >= _limit(method):
        raise NumberToChineseError(
            NumberToChineseError.UNDERFLOW if negative else NumberToChineseError.OVERFLOW
        )
    units = _units(variant, case, method)
    jiao, fen = divmod(cents, 10)
    text = ""
    if integer or not cents:
        text = _render(integer, units, digits)
    if jiao:
        text += digits[jiao] + _JIAO
    if fen:
        if not jiao and integer:
            text += digits[0]
        text += digits[fen] + _FEN
    if negative and (integer or cents):
        text = _NEGATIVE[variant] + text
    return text


def to_chinese_naive(value, variant, case) -> str:
    """Spell ``value`` digit by digit, with up to two decimals for floats."""
    digits = _DIGITS[(variant, case)]
    if isinstance(value, float):
        negative, integer, cents = _split_float(value)
    else:
        negative, integer, cents = value < 0, abs(int(value)), 0
    text = "".join(digits[int(d)] for d in str(integer))
    decimals = f"{cents:02d}".rstrip("0")
    if decimals:
        text += _POINT[variant] + "".join(digits[int(d)] for d in decimals)
    if negative and (integer or cents):
        text = _NEGATIVE[variant] + text
    return text