"""Chinese text normalization: spell out dates, money, phones and numbers."""

from __future__ import annotations

import re
import string
from typing import Callable

from ttsnorm.numerals import (
    ChineseCase,
    ChineseCountMethod,
    ChineseVariant,
    to_chinese,
    to_chinese_naive,
)

__all__ = [
    "CHINESE_DIGIS",
    "CHINESE_DIGIS_ALTS",
    "SMALLER_BIG_CHINESE_UNITS_SIMPLIFIED",
    "LARGER_CHINESE_NUMERING_UNITS_SIMPLIFIED",
    "SMALLER_CHINESE_NUMERING_UNITS_SIMPLIFIED",
    "ZERO",
    "POSITIVE",
    "NEGATIVE",
    "POINT",
    "PLUS",
    "GANG",
    "FRACTION",
    "PERCENT",
    "CURRENCY_NAMES",
    "CURRENCY_UNITS",
    "COM_QUANTIFIERS",
    "CHINESE_PUNC_STOP",
    "CHINESE_PUNC_NON_STOP",
    "CHINESE_PUNC_OTHER",
    "CHINESE_PUNC_LIST",
    "UNITS",
    "DIGITS",
    "SYMBOLS",
    "digit_to_chntext",
    "fraction_to_chntext",
    "percentage_to_chntext",
    "telephone_to_chntext",
    "mobilephone_to_chntext",
    "date_to_chntext",
    "money_to_chntext",
    "normalize",
]

CHINESE_DIGIS = "零一二三四五六七八九"
CHINESE_DIGIS_ALTS = "〇幺两"
SMALLER_BIG_CHINESE_UNITS_SIMPLIFIED = "十百千万"
LARGER_CHINESE_NUMERING_UNITS_SIMPLIFIED = "亿兆京垓秭穰沟涧正载"
SMALLER_CHINESE_NUMERING_UNITS_SIMPLIFIED = "十百千万"

ZERO = "零"
POSITIVE = "正"
NEGATIVE = "负"
POINT = "点"
PLUS = "加"
GANG = "杠"
FRACTION = "分之"
PERCENT = "百分之"

CURRENCY_NAMES = (
    "(人民币|美元|日元|英镑|欧元|马克|法郎|加拿大元|澳元|港币|先令|芬兰马克|爱尔兰镑|"
    "里拉|荷兰盾|埃斯库多|比塞塔|印尼盾|林吉特|新西兰元|比索|卢布|新加坡元|韩元|泰铢)"
)
CURRENCY_UNITS = (
    "((亿|千万|百万|万|千|百)|(亿|千万|百万|万|千|百|)元|"
    "(亿|千万|百万|万|千|百|)块|角|毛|分)"
)
COM_QUANTIFIERS = (
    "(匹|张|座|回|场|尾|条|个|首|阙|阵|网|炮|顶|丘|棵|只|支|袭|辆|挑|担|颗|壳|窠|曲|墙|群|"
    "腔|砣|座|客|贯|扎|捆|刀|令|打|手|罗|坡|山|岭|江|溪|钟|队|单|双|对|出|口|头|脚|板|跳|"
    "枝|件|贴|针|线|管|名|位|身|堂|课|本|页|家|户|层|丝|毫|厘|分|钱|两|斤|担|铢|石|钧|锱|忽|"
    "(千|毫|微)?克|毫|厘|分|寸|尺|丈|里|寻|常|铺|程|(千|分|厘|毫|微|平方)?米|撮|勺|合|升|斗|石|盘|碗|"
    "碟|叠|桶|笼|盆|盒|杯|钟|斛|锅|簋|篮|盘|桶|罐|瓶|壶|卮|盏|箩|箱|煲|啖|袋|钵|年|月|日|季|"
    "刻|时|周|天|秒|分|旬|纪|岁|世|更|夜|春|夏|秋|冬|代|伏|辈|丸|泡|粒|颗|幢|堆|条|根|支|道|面|"
    "片|张|颗|块)"
)

CHINESE_PUNC_STOP = "！？｡。"
CHINESE_PUNC_NON_STOP = (
    "＂＃＄％＆＇（）＊＋，－／：；＜＝＞＠［＼］＾＿｀｛｜｝～｟｠｢｣､、〃《》「」『』【】〔〕〖〗〘〙〚〛〜〝〞〟〰〾〿–—‘’‛“”„‟…‧﹏"
)
CHINESE_PUNC_OTHER = "·〈〉-"
CHINESE_PUNC_LIST = CHINESE_PUNC_STOP + CHINESE_PUNC_NON_STOP + CHINESE_PUNC_OTHER

UNITS = {
    0: ("十", "1"),
    1: ("百", "2"),
    2: ("千", "3"),
    3: ("万", "4"),
    4: ("亿", "8"),
    5: ("兆", "8"),
    6: ("兆", "12"),
    7: ("京", "16"),
    8: ("垓", "20"),
    9: ("秭", "24"),
    10: ("穰", "28"),
    11: ("沟", "32"),
    12: ("涧", "36"),
    13: ("正", "40"),
    14: ("载", "44"),
}
DIGITS = {
    0: ("零", "〇"),
    1: ("一", "幺"),
    2: ("二", "两"),
    3: ("三", ""),
    4: ("四", ""),
    5: ("五", ""),
    6: ("六", ""),
    7: ("七", ""),
    8: ("八", ""),
    9: ("九", ""),
}
SYMBOLS = {0: ("正", "+"), 1: ("负", "-"), 2: ("点", ".")}

_DIGIT_RE = re.compile(r"((?P<integer>\d+)(((?P<symbol>\.)(?P<zeros>0+)?(?P<decimal>\d+)))?)")
_FRACTION_RE = re.compile(r"((?P<num>\d+)(((?P<symbol>/)(?P<den>\d+)))?)")
_PERCENT_RE = re.compile(r"((?P<num>\d+(\.\d+)?)?(?P<symbol>%))")
_TELEPHONE_RE = re.compile(
    r"(((?P<pre>0(10|2[1-3]|[3-9]\d{2}))(?P<symbol>-)?)?(?P<tel>[1-9]\d{6,7}))"
)
_MOBILE_RE = re.compile(
    r"(((?P<symbol>\+)?(?P<pre>86) ?)?(?P<tel>1([38]\d|5[0-35-9]|7[678]|9[89])\d{8}))"
)
_DATE_RE = re.compile(
    r"(((?P<year>([089]\d|(19|20)\d{2}))年)?((?P<month>\d{1,2})月)?((?P<day>\d{1,2})[日号])?)"
)
_NUMBER_RE = re.compile(r"(\d+(\.\d+)?)")

_NSW_DATE_RE = re.compile(r"((([089]\d|(19|20)\d{2})年)?(\d{1,2}月(\d{1,2}[日号])?))")
_NSW_MONEY_RE = re.compile(
    r"((\d+(\.\d+)?)[多余几]?" + CURRENCY_UNITS + r"(\d" + CURRENCY_UNITS + r"?)?)"
)
_NSW_MOBILE_RE = re.compile(r"\D((\+?86 ?)?1([38]\d|5[0-35-9]|7[678]|9[89])\d{8})\D")
_NSW_TELEPHONE_RE = re.compile(r"\D((0(10|2[1-3]|[3-9]\d{2})-?)?[1-9]\d{6,7})\D")
_NSW_FRACTION_RE = re.compile(r"(\d+/\d+)")
_NSW_PERCENT_RE = re.compile(r"(\d+(\.\d+)?%)")
_NSW_QUANTIFIER_RE = re.compile(r"(\d+(\.\d+)?)[多余几]?" + COM_QUANTIFIERS)
_NSW_SERIAL_RE = re.compile(r"(\d{4,32})")
_PARTICULAR_RE = re.compile(r"(([a-zA-Z]+)2([a-zA-Z]+))")

_IGNORED = frozenset("、，。！？：”“")
_ASCII_PUNCTUATION = frozenset(string.punctuation)


def _parse(text: str, bits: int) -> int:
    """Parse an unsigned decimal that must fit in ``bits`` bits."""
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"not a decimal number: {text!r}")
    value = int(text)
    if value >= 1 << bits:
        raise ValueError(f"number too large: {text}")
    return value


def _spell(value: int) -> str:
    return to_chinese(
        value, ChineseVariant.SIMPLE, ChineseCase.LOWER, ChineseCountMethod.TEN_THOUSAND
    )


def _spell_naive(value: int) -> str:
    return to_chinese_naive(value, ChineseVariant.SIMPLE, ChineseCase.LOWER)


def digit_to_chntext(text: str) -> str:
    """Spell the first number in ``text``, decimals digit by digit."""
    result = text
    match = _DIGIT_RE.search(text)
    if match:
        integer, point, zeros, decimal = match.group("integer", "symbol", "zeros", "decimal")
        if integer:
            result = result.replace(integer, _spell(_parse(integer, 32)))
        if point and zeros:
            result = result.replace(f".{zeros}", POINT + ZERO * len(zeros))
        elif point and zeros is None:
            result = result.replace(point, POINT)
        if decimal:
            result = result.replace(decimal, _spell_naive(_parse(decimal, 32)))
    return result


def fraction_to_chntext(text: str) -> str:
    """Read ``a/b`` as 'b 分之 a'."""
    result = text
    match = _FRACTION_RE.search(text)
    if match:
        num, slash, den = match.group("num", "symbol", "den")
        if num and den:
            result = result.replace(num, _spell(_parse(den, 32)))
            result = result.replace(den, _spell(_parse(num, 32)))
        if slash:
            result = result.replace(slash, FRACTION)
    return result


def percentage_to_chntext(text: str) -> str:
    """Read ``n%`` as '百分之 n'."""
    result = text
    match = _PERCENT_RE.search(text)
    if match:
        num, sign = match.group("num", "symbol")
        if num and sign:
            result = result.replace(num, PERCENT)
            result = result.replace(sign, digit_to_chntext(num))
    return result


def telephone_to_chntext(text: str) -> str:
    """Read a landline number digit by digit, with its area code."""
    result = text
    match = _TELEPHONE_RE.search(text)
    if match:
        dash, prefix, tel = match.group("symbol", "pre", "tel")
        if dash:
            result = result.replace(dash, GANG)
        if prefix:
            spoken = _spell_naive(_parse(prefix, 128))
            if prefix.startswith("0"):
                spoken = ZERO + spoken
            result = result.replace(prefix, spoken)
        if tel:
            result = result.replace(tel, _spell_naive(_parse(tel, 128)))
    return result


def mobilephone_to_chntext(text: str) -> str:
    """Read a mobile number digit by digit, with its country code."""
    result = text
    match = _MOBILE_RE.search(text)
    if match:
        plus, prefix, tel = match.group("symbol", "pre", "tel")
        if plus:
            result = result.replace(plus, PLUS)
        if prefix:
            result = result.replace(f"{prefix} ", _spell_naive(_parse(prefix, 32)))
        if tel:
            result = result.replace(tel, _spell_naive(_parse(tel, 128)))
    return result


def date_to_chntext(text: str) -> str:
    """Read the year digit by digit and month and day as numbers."""
    result = text
    match = _DATE_RE.search(text)
    if match:
        year, month, day = match.group("year", "month", "day")
        if year:
            result = result.replace(year, _spell_naive(_parse(year, 32)))
        if month:
            result = result.replace(month, _spell(_parse(month, 32)))
        if day:
            result = result.replace(day, _spell(_parse(day, 32)))
    return result


def money_to_chntext(text: str) -> str:
    """Spell every amount in ``text``."""
    result = text
    for match in _NUMBER_RE.finditer(text):
        amount = match.group(0)
        if amount:
            result = result.replace(amount, digit_to_chntext(amount))
    return result


def _rewrite(text: str, pattern: re.Pattern, convert: Callable[[str], str]) -> str:
    for match in list(pattern.finditer(text)):
        found = match.group(0)
        text = text.replace(found, convert(found))
    return text


def _serial_to_chntext(text: str) -> str:
    return _spell_naive(_parse(text, 128))


def normalize(text: str) -> str:
    """Turn the numbers, dates, money and phones in ``text`` into spoken Chinese."""
    raw = f"^{text}$"
    work = raw.replace("％", "%")
    work = _rewrite(work, _NSW_DATE_RE, date_to_chntext)
    work = _rewrite(work, _NSW_MONEY_RE, money_to_chntext)
    work = _rewrite(work, _NSW_MOBILE_RE, mobilephone_to_chntext)
    work = _rewrite(work, _NSW_TELEPHONE_RE, telephone_to_chntext)
    work = _rewrite(work, _NSW_FRACTION_RE, fraction_to_chntext)
    work = _rewrite(work, _NSW_PERCENT_RE, percentage_to_chntext)
    work = _rewrite(work, _NSW_QUANTIFIER_RE, digit_to_chntext)
    work = _rewrite(work, _NSW_SERIAL_RE, _serial_to_chntext)
    work = _rewrite(work, _NUMBER_RE, digit_to_chntext)

    normalized = "".join(
        c for c in work.strip() if c not in _IGNORED and c not in _ASCII_PUNCTUATION
    )
    if _PARTICULAR_RE.search(raw):
        normalized = raw.replace("2", "图")
    return normalized.lstrip("^").rstrip("$")