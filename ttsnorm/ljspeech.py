"""English text cleaning and symbol encoding for LJSpeech-style models."""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "ABBREVIATIONS",
    "CURLY_RE",
    "NUMBER_RE",
    "DEFAULT_MAPPER_PATH",
    "EOS_TOKEN",
    "LJSpeechProcessor",
    "expand_abbreviations",
    "number_to_words",
    "expand_numbers",
    "clean_text",
]

DEFAULT_MAPPER_PATH = Path("assets/ljspeech_mapper.json")
EOS_TOKEN = "eos"

ABBREVIATIONS = [
    (re.compile(pattern), replacement)
    for pattern, replacement in (
        (r"\b(mrs)\.", "misess"),
        (r"\b(mr)\.", "mister"),
        (r"\b(dr)\.", "doctor"),
        (r"\b(st)\.", "saint"),
        (r"\b(co)\.", "company"),
        (r"\b(jr)\.", "junior"),
        (r"\b(maj)\.", "major"),
        (r"\b(gen)\.", "general"),
        (r"\b(drs)\.", "doctors"),
        (r"\b(rev)\.", "reverend"),
        (r"\b(lt)\.", "lieutenant"),
        (r"\b(hon)\.", "honorable"),
        (r"\b(sgt)\.", "sergeant"),
        (r"\b(capt)\.", "captain"),
        (r"\b(esq)\.", "esquire"),
        (r"\b(ltd)\.", "limited"),
        (r"\b(col)\.", "colonel"),
        (r"\b(ft)\.", "fort"),
    )
]

CURLY_RE = re.compile(r"(.*?)\{(.+?)\}(.*)")
NUMBER_RE = re.compile(r"\b\d+\.\d+\b|\b\d+\b")

_ONES = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")
_TEENS = (
    "", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = (
    "", "ten", "twenty", "thirty", "forty",
    "fifty", "sixty", "seventy", "eighty", "ninety",
)
_GROUPS = ("", "thousand", "million", "billion", "trillion", "quadrillion", "quintillion")

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def expand_abbreviations(text: str) -> str:
    """Replace lower-case title abbreviations such as ``dr.`` with full words."""
    for pattern, replacement in ABBREVIATIONS:
        text = pattern.sub(replacement, text)
    return text


def _trunc_to_int(n: float) -> int:
    """Truncate towards zero, saturating at the signed 64-bit range."""
    if math.isnan(n):
        return 0
    if math.isinf(n):
        return _I64_MAX if n > 0 else _I64_MIN
    return max(_I64_MIN, min(_I64_MAX, math.trunc(n)))


def _fract(n: float) -> float:
    if math.isinf(n):
        return math.nan
    return n - math.trunc(n)


def _round_half_away(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _chunk_to_words(chunk: int) -> str:
    hundreds, tens, ones = chunk // 100, (chunk // 10) % 10, chunk % 10
    result = ""
    if hundreds > 0:
        result += f"{_ONES[hundreds]} hundred"
        if tens > 0 or ones > 0:
            result += " and "
    if tens == 1 and ones > 0:
        result += _TEENS[ones]
    else:
        if tens > 0:
            result += _TENS[tens]
            if ones > 0:
                result += "-"
        if ones > 0:
            result += _ONES[ones]
    return result


def _integer_to_words(n: int) -> str:
    result = ""
    remaining = abs(n)
    group = 0
    while remaining > 0:
        remaining, chunk = divmod(remaining, 1000)
        if chunk > 0:
            if result:
                result = f"{_chunk_to_words(chunk)} {_GROUPS[group]}" + result
            else:
                result = _chunk_to_words(chunk)
        group += 1
    if n < 0:
        result = f"negative {result}"
    return result


def _decimal_to_words(n: float, precision: int = 2) -> str:
    multiplier = 10.0 ** precision
    n = _round_half_away(n * multiplier) / multiplier
    words = []
    while n > 0.0 and precision > 0:
        n *= 10.0
        digit = math.floor(n)
        if digit >= len(_ONES):
            raise ValueError(f"decimal part rounds up to a whole unit: {n / 10.0!r}")
        words.append(_ONES[digit])
        n -= digit
        precision -= 1
    return "".join(words)


def number_to_words(n: float) -> str:
    """Spell ``n`` in English words, with up to two decimal digits."""
    n = float(n)
    if n == 0.0:
        return "zero"
    result = ""
    integer = _trunc_to_int(n)
    if integer != 0:
        result += _integer_to_words(integer)
    decimal = _fract(n)
    if decimal != 0.0:
        result += " point " + _decimal_to_words(decimal, 2)
    return result


def expand_numbers(text: str) -> str:
    """Replace every number in ``text`` with its spelling."""
    return NUMBER_RE.sub(lambda m: number_to_words(float(m.group(0))), text)


def clean_text(text: str) -> str:
    """Lower-case, expand abbreviations and spell out numbers."""
    return expand_numbers(expand_abbreviations(text.lower()))


@dataclass
class LJSpeechProcessor:
    """Turns English text into the symbol ids of a mapper file."""

    symbol_to_id: dict[str, int] = field(default_factory=dict)
    id_to_symbol: dict[int, str] = field(default_factory=dict)
    speakers_map: dict[str, int] = field(default_factory=dict)
    processor_name: str | None = None
    symbols: list[str] = field(default_factory=list)
    eos_id: int = 0

    def __post_init__(self) -> None:
        self._add_symbol(EOS_TOKEN)
        self.eos_id = self.symbol_to_id[EOS_TOKEN]

    @classmethod
    def from_file(cls, path=DEFAULT_MAPPER_PATH) -> LJSpeechProcessor:
        """Load a JSON mapper; missing sections are left empty."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("mapper file must hold a JSON object")
        processor_name = data.get("processor_name")
        if processor_name is not None and not isinstance(processor_name, str):
            raise ValueError("processor_name must be a string")
        return cls(
            symbol_to_id={str(k): int(v) for k, v in data.get("symbol_to_id", {}).items()},
            id_to_symbol={int(k): str(v) for k, v in data.get("id_to_symbol", {}).items()},
            speakers_map={str(k): int(v) for k, v in data.get("speakers_map", {}).items()},
            processor_name=processor_name,
        )

    def _add_symbol(self, symbol: str) -> None:
        if symbol not in self.symbol_to_id:
            self.symbols.append(symbol)
            symbol_id = len(self.symbols)
            self.symbol_to_id[symbol] = symbol_id
            self.id_to_symbol[symbol_id] = symbol

    def _should_keep(self, symbol: str) -> bool:
        return symbol not in ("_", "~") and symbol in self.symbol_to_id

    def _symbols_to_sequence(self, symbols: str) -> list[int]:
        return [self.symbol_to_id[s] for s in symbols if self._should_keep(s)]

    def _arpabet_to_sequence(self, text: str) -> list[int]:
        return self._symbols_to_sequence("".join(f"@{text}".split()))

    def text_to_sequence(self, text: str) -> list[int]:
        """Encode ``text``; ``{...}`` spans are read as ARPAbet. Ends with EOS."""
        sequence: list[int] = []
        while text:
            match = CURLY_RE.search(text)
            if match is None:
                sequence.extend(self._symbols_to_sequence(clean_text(text)))
                break
            sequence.extend(self._symbols_to_sequence(clean_text(match.group(1))))
            sequence.extend(self._arpabet_to_sequence(match.group(2)))
            text = match.group(3)
        sequence.append(self.eos_id)
        return sequence