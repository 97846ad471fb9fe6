import sys

import pytest

from ttsnorm.numerals import (
    ChineseCase,
    ChineseCountMethod,
    ChineseVariant,
    NumberToChineseError,
    to_chinese,
    to_chinese_naive,
)

I8_MAX, I8_MIN, U8_MAX = 127, -128, 255
I16_MAX, I16_MIN, U16_MAX = 32767, -32768, 65535
I32_MAX, I32_MIN, U32_MAX = 2**31 - 1, -(2**31), 2**32 - 1
I64_MAX, I64_MIN, U64_MAX = 2**63 - 1, -(2**63), 2**64 - 1
I128_MAX, I128_MIN, U128_MAX = 2**127 - 1, -(2**127), 2**128 - 1
F32_MAX = 3.4028234663852886e38
F64_MAX = sys.float_info.max

T = ChineseVariant.TRADITIONAL
UP = ChineseCase.UPPER
LO = ChineseCase.LOWER
LOW = ChineseCountMethod.LOW
TT = ChineseCountMethod.TEN_THOUSAND
MID = ChineseCountMethod.MIDDLE
HIGH = ChineseCountMethod.HIGH

COMMON_UPPER = [
    ("壹佰貳拾柒", I8_MAX),
    ("負壹佰貳拾捌", I8_MIN),
    ("貳佰伍拾伍", U8_MAX),
    ("參萬貳仟柒佰陸拾柒", I16_MAX),
    ("負參萬貳仟柒佰陸拾捌", I16_MIN),
    ("陸萬伍仟伍佰參拾伍", U16_MAX),
    ("壹佰貳拾參肆角陸分", 123.456),
    ("負壹佰貳拾參肆角陸分", -123.456),
]


@pytest.mark.parametrize(
    "expected,value",
    COMMON_UPPER
    + [
        ("貳秭壹垓肆京柒兆肆億捌萬參仟陸佰肆拾柒", I32_MAX),
        ("負貳秭壹垓肆京柒兆肆億捌萬參仟陸佰肆拾捌", I32_MIN),
        ("肆秭貳垓玖京肆兆玖億陸萬柒仟貳佰玖拾伍", U32_MAX),
        ("玖極玖載玖正玖澗玖溝玖穰玖秭玖垓玖京玖兆玖億玖萬玖仟玖佰玖拾玖", 9999999999999999),
        ("負玖極玖載玖正玖澗玖溝玖穰玖秭玖垓玖京玖兆玖億玖萬玖仟玖佰玖拾玖", -9999999999999999),
    ],
)
def test_upper_low(expected, value):
    assert to_chinese(value, T, UP, LOW) == expected


@pytest.mark.parametrize(
    "value,kind",
    [
        (I128_MAX, NumberToChineseError.OVERFLOW),
        (I128_MIN, NumberToChineseError.UNDERFLOW),
        (U128_MAX, NumberToChineseError.OVERFLOW),
        (F32_MAX, NumberToChineseError.OVERFLOW),
        (-F32_MAX, NumberToChineseError.UNDERFLOW),
        (F64_MAX, NumberToChineseError.OVERFLOW),
        (-F64_MAX, NumberToChineseError.UNDERFLOW),
    ],
)
def test_low_errors(value, kind):
    for case in (UP, LO):
        with pytest.raises(NumberToChineseError) as info:
            to_chinese(value, T, case, LOW)
        assert info.value.kind == kind


@pytest.mark.parametrize(
    "expected,value",
    COMMON_UPPER
    + [
        ("貳拾壹億肆仟柒佰肆拾捌萬參仟陸佰肆拾柒", I32_MAX),
        ("負貳拾壹億肆仟柒佰肆拾捌萬參仟陸佰肆拾捌", I32_MIN),
        ("肆拾貳億玖仟肆佰玖拾陸萬柒仟貳佰玖拾伍", U32_MAX),
        ("玖佰貳拾貳京參仟參佰柒拾貳兆零參佰陸拾捌億伍仟肆佰柒拾柒萬伍仟捌佰零柒", I64_MAX),
        ("負玖佰貳拾貳京參仟參佰柒拾貳兆零參佰陸拾捌億伍仟肆佰柒拾柒萬伍仟捌佰零捌", I64_MIN),
        ("壹仟捌佰肆拾肆京陸仟柒佰肆拾肆兆零柒佰參拾柒億零玖佰伍拾伍萬壹仟陸佰壹拾伍", U64_MAX),
        ("壹佰柒拾澗壹仟肆佰壹拾壹溝捌仟參佰肆拾陸穰零肆佰陸拾玖秭貳仟參佰壹拾柒垓參仟壹佰陸拾捌京柒仟參佰零參兆柒仟壹佰伍拾捌億捌仟肆佰壹拾萬伍仟柒佰貳拾柒", I128_MAX),
        ("參佰肆拾澗貳仟捌佰貳拾參溝陸仟陸佰玖拾貳穰零玖佰參拾捌秭肆仟陸佰參拾肆垓陸仟參佰參拾柒京肆仟陸佰零柒兆肆仟參佰壹拾柒億陸仟捌佰貳拾壹萬壹仟肆佰伍拾伍", U128_MAX),
        ("參佰肆拾澗貳仟捌佰貳拾參溝肆仟陸佰陸拾參穰捌仟伍佰貳拾捌秭捌仟伍佰玖拾捌垓壹仟壹佰柒拾京肆仟壹佰捌拾參兆肆仟捌佰肆拾伍億壹仟陸佰玖拾貳萬伍仟肆佰肆拾", F32_MAX),
        ("負參佰肆拾澗貳仟捌佰貳拾參溝肆仟陸佰陸拾參穰捌仟伍佰貳拾捌秭捌仟伍佰玖拾捌垓壹仟壹佰柒拾京肆仟壹佰捌拾參兆肆仟捌佰肆拾伍億壹仟陸佰玖拾貳萬伍仟肆佰肆拾", -F32_MAX),
        ("玖仟玖佰玖拾玖極玖仟玖佰玖拾玖載玖仟玖佰玖拾玖正玖仟玖佰捌拾玖澗貳仟玖佰捌拾參溝捌仟伍佰伍拾貳穰零肆佰陸拾肆秭貳仟捌佰玖拾貳垓玖仟陸佰伍拾參京肆仟壹佰陸拾兆陸仟零貳拾壹億柒仟陸佰陸拾捌萬肆仟零參拾貳", 1e52 - 1e37),
    ],
)
def test_upper_ten_thousand(expected, value):
    assert to_chinese(value, T, UP, TT) == expected


@pytest.mark.parametrize("method", [TT, MID])
def test_f64_max_overflows(method):
    with pytest.raises(NumberToChineseError) as info:
        to_chinese(F64_MAX, T, UP, method)
    assert info.value == NumberToChineseError(NumberToChineseError.OVERFLOW)
    with pytest.raises(NumberToChineseError) as info:
        to_chinese(-F64_MAX, T, LO, method)
    assert info.value == NumberToChineseError(NumberToChineseError.UNDERFLOW)


@pytest.mark.parametrize(
    "expected,value",
    COMMON_UPPER
    + [
        ("貳拾壹億肆仟柒佰肆拾捌萬參仟陸佰肆拾柒", I32_MAX),
        ("玖佰貳拾貳兆參仟參佰柒拾貳萬零參佰陸拾捌億伍仟肆佰柒拾柒萬伍仟捌佰零柒", I64_MAX),
        ("負玖佰貳拾貳兆參仟參佰柒拾貳萬零參佰陸拾捌億伍仟肆佰柒拾柒萬伍仟捌佰零捌", I64_MIN),
        ("壹仟捌佰肆拾肆兆陸仟柒佰肆拾肆萬零柒佰參拾柒億零玖佰伍拾伍萬壹仟陸佰壹拾伍", U64_MAX),
        ("壹佰柒拾萬壹仟肆佰壹拾壹垓捌仟參佰肆拾陸萬零肆佰陸拾玖京貳仟參佰壹拾柒萬參仟壹佰陸拾捌兆柒仟參佰零參萬柒仟壹佰伍拾捌億捌仟肆佰壹拾萬伍仟柒佰貳拾柒", I128_MAX),
        ("參佰肆拾萬貳仟捌佰貳拾參垓陸仟陸佰玖拾貳萬零玖佰參拾捌京肆仟陸佰參拾肆萬陸仟參佰參拾柒兆肆仟陸佰零柒萬肆仟參佰壹拾柒億陸仟捌佰貳拾壹萬壹仟肆佰伍拾伍", U128_MAX),
        ("參佰肆拾萬貳仟捌佰貳拾參垓肆仟陸佰陸拾參萬捌仟伍佰貳拾捌京捌仟伍佰玖拾捌萬壹仟壹佰柒拾兆肆仟壹佰捌拾參萬肆仟捌佰肆拾伍億壹仟陸佰玖拾貳萬伍仟肆佰肆拾", F32_MAX),
        ("玖仟玖佰玖拾玖萬玖仟玖佰玖拾玖極玖仟玖佰玖拾玖萬玖仟玖佰玖拾壹載零壹佰貳拾玖萬貳仟捌佰伍拾捌正玖仟參佰玖拾捌萬壹仟肆佰陸拾貳澗零壹佰零柒萬壹仟壹佰陸拾柒溝伍仟玖佰貳拾玖萬肆仟貳佰陸拾柒穰壹仟貳佰壹拾萬壹仟柒佰伍拾捌秭柒仟壹佰柒拾捌萬伍仟肆佰玖拾陸垓捌仟肆佰肆拾捌萬柒仟柒佰捌拾柒京捌仟陸佰貳拾柒萬柒仟柒佰陸拾貳兆貳仟伍佰陸拾萬壹仟零壹拾億零伍佰萬零柒佰零肆", 1e96 - 1e81),
    ],
)
def test_upper_middle(expected, value):
    assert to_chinese(value, T, UP, MID) == expected


@pytest.mark.parametrize(
    "expected,value",
    COMMON_UPPER
    + [
        ("玖佰貳拾貳兆參仟參佰柒拾貳萬零參佰陸拾捌億伍仟肆佰柒拾柒萬伍仟捌佰零柒", I64_MAX),
        ("壹佰柒拾萬壹仟肆佰壹拾壹京捌仟參佰肆拾陸萬零肆佰陸拾玖億貳仟參佰壹拾柒萬參仟壹佰陸拾捌兆柒仟參佰零參萬柒仟壹佰伍拾捌億捌仟肆佰壹拾萬伍仟柒佰貳拾柒", I128_MAX),
        ("負壹佰柒拾萬壹仟肆佰壹拾壹京捌仟參佰肆拾陸萬零肆佰陸拾玖億貳仟參佰壹拾柒萬參仟壹佰陸拾捌兆柒仟參佰零參萬柒仟壹佰伍拾捌億捌仟肆佰壹拾萬伍仟柒佰貳拾捌", I128_MIN),
        ("參佰肆拾萬貳仟捌佰貳拾參京陸仟陸佰玖拾貳萬零玖佰參拾捌億肆仟陸佰參拾肆萬陸仟參佰參拾柒兆肆仟陸佰零柒萬肆仟參佰壹拾柒億陸仟捌佰貳拾壹萬壹仟肆佰伍拾伍", U128_MAX),
        ("參佰肆拾萬貳仟捌佰貳拾參京肆仟陸佰陸拾參萬捌仟伍佰貳拾捌億捌仟伍佰玖拾捌萬壹仟壹佰柒拾兆肆仟壹佰捌拾參萬肆仟捌佰肆拾伍億壹仟陸佰玖拾貳萬伍仟肆佰肆拾", F32_MAX),
    ],
)
def test_upper_high(expected, value):
    assert to_chinese(value, T, UP, HIGH) == expected


@pytest.mark.parametrize(
    "expected,value,method",
    [
        ("一百二十七", I8_MAX, LOW),
        ("負一百二十八", I8_MIN, LOW),
        ("二秭一垓四京七兆四億八萬三千六百四十七", I32_MAX, LOW),
        ("一百二十三四角六分", 123.456, LOW),
        ("負一百二十三四角六分", -123.456, LOW),
        ("九百二十二京三千三百七十二兆零三百六十八億五千四百七十七萬五千八百零七", I64_MAX, TT),
        ("一千八百四十四京六千七百四十四兆零七百三十七億零九百五十五萬一千六百一十五", U64_MAX, TT),
        ("三百四十澗二千八百二十三溝四千六百六十三穰八千五百二十八秭八千五百九十八垓一千一百七十京四千一百八十三兆四千八百四十五億一千六百九十二萬五千四百四十", F32_MAX, TT),
        ("一千八百四十四兆六千七百四十四萬零七百三十七億零九百五十五萬一千六百一十五", U64_MAX, MID),
        ("負一百七十萬一千四百一十一垓八千三百四十六萬零四百六十九京二千三百一十七萬三千一百六十八兆七千三百零三萬七千一百五十八億八千四百一十萬五千七百二十八", I128_MIN, MID),
        ("三百四十萬二千八百二十三京六千六百九十二萬零九百三十八億四千六百三十四萬六千三百三十七兆四千六百零七萬四千三百一十七億六千八百二十一萬一千四百五十五", U128_MAX, HIGH),
        ("四十二億九千四百九十六萬七千二百九十五", U32_MAX, HIGH),
    ],
)
def test_lowercase(expected, value, method):
    assert to_chinese(value, T, LO, method) == expected


@pytest.mark.parametrize(
    "expected,value",
    [
        ("壹貳柒", I8_MAX),
        ("負壹貳捌", I8_MIN),
        ("貳伍伍", U8_MAX),
        ("參貳柒陸柒", I16_MAX),
        ("肆貳玖肆玖陸柒貳玖伍", U32_MAX),
        ("負玖貳貳參參柒貳零參陸捌伍肆柒柒伍捌零捌", I64_MIN),
        ("壹捌肆肆陸柒肆肆零柒參柒零玖伍伍壹陸壹伍", U64_MAX),
        ("參肆零貳捌貳參陸陸玖貳零玖參捌肆陸參肆陸參參柒肆陸零柒肆參壹柒陸捌貳壹壹肆伍伍", U128_MAX),
        ("壹貳參點肆陸", 123.456),
        ("負壹貳參點肆陸", -123.456),
        ("參肆零貳捌貳參肆陸陸參捌伍貳捌捌伍玖捌壹壹柒零肆壹捌參肆捌肆伍壹陸玖貳伍肆肆零", F32_MAX),
    ],
)
def test_upper_naive(expected, value):
    assert to_chinese_naive(value, T, UP) == expected


def test_simple_variant_uses_simplified_characters():
    assert to_chinese(10005, ChineseVariant.SIMPLE, LO, TT) == "一万零五"
    assert to_chinese_naive(-3.5, ChineseVariant.SIMPLE, UP) == "负叁点伍"