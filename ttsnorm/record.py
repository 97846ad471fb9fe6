"""Query statistics kept by the speech server and persisted as JSON."""

from __future__ import annotations

import json
import re
import unicodedata
from collections import deque
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

__all__ = ["QueryRecord", "QueryTracker", "count_words", "QUERY_FILE_NAME"]

QUERY_FILE_NAME = Path("./records/query.json")
_KEEP = 10

_CHINESE_RE = re.compile("[\u4e00-\u9fa5]")
_ENGLISH_RE = re.compile(r"\b[a-zA-Z]+\b")
_NUMBER_RE = re.compile(r"\d+")


def count_words(text: str) -> int:
    """Count Chinese characters, English words and digit runs in ``text``."""
    return sum(len(p.findall(text)) for p in (_CHINESE_RE, _ENGLISH_RE, _NUMBER_RE))


@dataclass
class QueryRecord:
    """One synthesis request."""

    text: str
    query_time: str
    duration: timedelta

    def to_dict(self) -> dict:
        micros = self.duration // timedelta(microseconds=1)
        secs, rem = divmod(micros, 1_000_000)
        return {
            "text": self.text,
            "query_time": self.query_time,
            "duration": {"secs": secs, "nanos": rem * 1000},
        }

    @classmethod
    def from_dict(cls, data: dict) -> QueryRecord:
        dur = data["duration"]
        return cls(
            text=data["text"],
            query_time=data["query_time"],
            duration=timedelta(seconds=dur["secs"], microseconds=dur["nanos"] // 1000),
        )


def _seconds_text(duration: timedelta) -> str:
    value = (duration // timedelta(milliseconds=1)) / 1000.0
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _width(text: str) -> int:
    return sum(2 if unicodedata.east_asian_width(c) in "WF" else 1 for c in text)


def _table(records) -> str:
    header = ["Index", "Time", "Duration (s)", "Text"]
    rows = [
        [str(i), r.query_time, _seconds_text(r.duration), r.text]
        for i, r in enumerate(records)
    ]
    widths = [max(_width(row[c]) for row in [header, *rows]) for c in range(len(header))]
    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def line(row):
        cells = (f" {v}{' ' * (w - _width(v))} " for v, w in zip(row, widths))
        return "|" + "|".join(cells) + "|"

    lines = [border, line(header), border, *(line(r) for r in rows), border]
    return "\n".join(lines) + "\n"


@dataclass
class QueryTracker:
    """Totals, the latest queries and the slowest queries."""

    total_cnts: int = 0
    total_words: int = 0
    first_launch_time: str = ""
    last_launch_time: str = ""
    records: deque = field(default_factory=deque)
    cost_records: deque = field(default_factory=deque)
    path: Path = QUERY_FILE_NAME

    @classmethod
    def create(cls, start_time: str, path=QUERY_FILE_NAME) -> QueryTracker:
        """Load saved statistics, or start fresh if they cannot be read."""
        try:
            tracker = cls.load(path)
        except (OSError, ValueError, KeyError, TypeError):
            return cls(first_launch_time=start_time, last_launch_time=start_time, path=Path(path))
        tracker.last_launch_time = start_time
        return tracker

    @classmethod
    def load(cls, path=QUERY_FILE_NAME) -> QueryTracker:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(
            total_cnts=data["total_cnts"],
            total_words=data["total_words"],
            first_launch_time=data["first_launch_time"],
            last_launch_time=data["last_launch_time"],
            records=deque(QueryRecord.from_dict(r) for r in data["records"]),
            cost_records=deque(QueryRecord.from_dict(r) for r in data["cost_records"]),
            path=Path(path),
        )

    def save(self, path=None) -> None:
        target = Path(path) if path is not None else Path(self.path)
        data = {
            "total_cnts": self.total_cnts,
            "total_words": self.total_words,
            "first_launch_time": self.first_launch_time,
            "last_launch_time": self.last_launch_time,
            "records": [r.to_dict() for r in self.records],
            "cost_records": [r.to_dict() for r in self.cost_records],
        }
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def record_query(self, text: str, query_time: str, duration: timedelta) -> None:
        """Account for one query and persist; a failed save is ignored."""
        record = QueryRecord(text, query_time, duration)
        if len(self.records) >= _KEEP:
            self.records.pop()
        if len(self.cost_records) >= _KEEP and duration > self.cost_records[-1].duration:
            self.cost_records.pop()
        if len(self.cost_records) < _KEEP:
            self.cost_records.append(record)
            self.cost_records = deque(
                sorted(self.cost_records, key=lambda r: r.duration, reverse=True)
            )
        self.records.appendleft(record)
        self.total_cnts += 1
        self.total_words += count_words(text)
        try:
            self.save()
        except OSError:
            pass

    def get_records(self) -> list[QueryRecord]:
        return list(self.records)

    def to_table_string(self) -> str:
        return (
            f"First launch at: {self.first_launch_time}\n"
            f"Last launch at: {self.last_launch_time}\n"
            f"Total Query Times:{self.total_cnts}\n"
            f"Total Query Words:{self.total_words}\n\n"
            f"Last 10 Queries:\n{_table(self.records)}\n\n"
            f"Cost 10 Queries:\n{_table(self.cost_records)}"
        )