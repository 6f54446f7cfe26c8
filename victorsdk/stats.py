"""Timing statistics reported by an index."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Mapping, Optional


@dataclass
class TimeStat:
    """Count and durations (in seconds) of one kind of operation."""

    count: int = 0
    total: float = 0.0
    last: float = 0.0
    min: float = 0.0
    max: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TimeStat":
        data = data or {}
        return cls(
            int(data.get("count") or 0),
            *(float(data.get(k) or 0.0) for k in ("total", "last", "min", "max")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class IndexStats:
    """Statistics of every operation an index performs."""

    insert: TimeStat = field(default_factory=TimeStat)
    delete: TimeStat = field(default_factory=TimeStat)
    dump: TimeStat = field(default_factory=TimeStat)
    search: TimeStat = field(default_factory=TimeStat)
    search_n: TimeStat = field(default_factory=TimeStat)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "IndexStats":
        data = data or {}
        return cls(**{f.name: TimeStat.from_dict(data.get(f.name)) for f in fields(cls)})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)