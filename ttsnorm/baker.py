"""Mandarin text to phoneme ids for Baker-style acoustic models."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from ttsnorm.cn_tn import normalize

__all__ = [
    "ZH_PATTERN",
    "DEFAULT_MAPPER_PATH",
    "EOS_TOKEN",
    "SILENCE",
    "WORD_BOUNDARY",
    "BakerProcessor",
    "is_zh",
]

ZH_PATTERN = re.compile("[\u4e00-\u9fa5]")
DEFAULT_MAPPER_PATH = Path("assets/baker_mapper.json")
EOS_TOKEN = "eos"
SILENCE = "sil"
WORD_BOUNDARY = "#0"
_ERHUA = "er5"
_NEUTRAL_TONE = "5"

PinyinFunc = Callable[[str], Sequence[str]]


def is_zh(word: str) -> bool:
    """Return True if ``word`` contains a Chinese character."""
    return ZH_PATTERN.search(word) is not None


def _strip_tone(syllable: str) -> str:
    """Drop trailing numeric characters (the tone marks)."""
    end = len(syllable)
    while end and syllable[end - 1].isnumeric():
        end -= 1
    return syllable[:end]


def _is_ascii_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


def _normalize_syllable(syllable: str) -> str:
    syllable = syllable.replace("ü", "v")
    if syllable and not _is_ascii_digit(syllable[-1]):
        syllable += _NEUTRAL_TONE
    if _strip_tone(syllable) == "n":
        syllable = "en" + syllable[-1]
    return syllable


@dataclass
class BakerProcessor:
    """Turns Mandarin text and its pinyin into the symbol ids of a mapper file."""

    pinyin_dict: dict[str, tuple[str, str]] = field(default_factory=dict)
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
    def from_file(cls, path=DEFAULT_MAPPER_PATH) -> BakerProcessor:
        """Load a JSON mapper; missing sections are left empty."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("mapper file must hold a JSON object")
        processor_name = data.get("processor_name")
        if processor_name is not None and not isinstance(processor_name, str):
            raise ValueError("processor_name must be a string")
        pinyin_dict: dict[str, tuple[str, str]] = {}
        for key, value in data.get("pinyin_dict", {}).items():
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise ValueError(f"pinyin_dict entry {key!r} must be a pair")
            pinyin_dict[str(key)] = (str(value[0]), str(value[1]))
        return cls(
            pinyin_dict=pinyin_dict,
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

    def _syllable_phonemes(self, syllable: str) -> list[str]:
        if not syllable:
            return []
        tone = syllable[-1]
        if _strip_tone(syllable) in self.pinyin_dict:
            parts = self.pinyin_dict.get(syllable[:-1])
            return [parts[0], parts[1] + tone] if parts else []
        parts = self.pinyin_dict.get(syllable[:-2])
        return [parts[0], parts[1] + tone, _ERHUA] if parts else []

    def phonemes_from_pinyin(self, text: str, pinyin: Sequence[str]) -> list[str]:
        """Expand each Chinese character of ``text`` into initial and final.

        ``pinyin`` holds one syllable per Chinese character. Prosody marks
        ``#`` are kept, ``#4`` is dropped, other characters are skipped.
        """
        text = text.replace("#4", "")
        result = [SILENCE]
        ignored = 0
        for i, char in enumerate(text):
            position = i - ignored
            if position >= len(pinyin):
                break
            if is_zh(char):
                if position > 0:
                    result.append(WORD_BOUNDARY)
                syllable = _normalize_syllable(pinyin[position])
                result.extend(self._syllable_phonemes(syllable))
            else:
                if char == "#":
                    result.append(char)
                ignored += 1
        if result[-1] == WORD_BOUNDARY:
            result.pop()
        if result[-1] != SILENCE:
            result.append(SILENCE)
        return result

    def text_to_phone(self, text: str, pinyin_of: PinyinFunc) -> tuple[str, str]:
        """Normalize ``text`` and return it with its space-separated phonemes."""
        normalized = normalize(text)
        phonemes = self.phonemes_from_pinyin(normalized, list(pinyin_of(normalized)))
        return normalized, " ".join(phonemes)

    def text_to_sequence(self, text: str, pinyin_of: PinyinFunc) -> list[int]:
        """Encode ``text`` as symbol ids ending with EOS.

        Raises KeyError for a phoneme the mapper does not know.
        """
        _, phones = self.text_to_phone(text, pinyin_of)
        sequence = [self.symbol_to_id[symbol] for symbol in phones.split()]
        sequence.append(self.eos_id)
        return sequence