"""Request and response records exchanged with the vector server."""

from __future__ import annotations

import struct
from dataclasses import asdict, dataclass, field
from typing import Any, Mapping, Optional


def _check_range(name: str, value: int, upper: int) -> None:
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}, got {value}")


def _f32(value: Any) -> float:
    """Round a number to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


def _get(data: Optional[Mapping[str, Any]], key: str, default: Any) -> Any:
    value = data.get(key) if data else None
    return default if value is None else value


def _header(data: Optional[Mapping[str, Any]]) -> dict[str, str]:
    return {
        "status": str(_get(data, "status", "")),
        "message": str(_get(data, "message", "")),
    }


@dataclass
class MatchResult:
    """A search hit: the vector id and its distance to the query."""

    id: int = 0
    distance: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "MatchResult":
        return cls(int(_get(data, "id", 0)), _f32(_get(data, "distance", 0.0)))


@dataclass
class ClientOptions:
    """Where the client connects to."""

    host: str = "localhost"
    port: str = "7007"
    auto_start_daemon: bool = True


@dataclass
class CreateIndexInput:
    index_type: int
    method: int
    dims: int
    index_name: str

    def __post_init__(self) -> None:
        _check_range("dims", self.dims, 0xFFFF)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class CreateIndexResults:
    index_name: str = ""
    id: str = ""
    dims: int = 0
    index_type: int = 0
    method: int = 0


@dataclass
class CreateIndexOutput:
    status: str = ""
    message: str = ""
    results: CreateIndexResults = field(default_factory=CreateIndexResults)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "CreateIndexOutput":
        raw = _get(data, "results", {})
        results = CreateIndexResults(
            index_name=str(_get(raw, "index_name", "")),
            id=str(_get(raw, "id", "")),
            dims=int(_get(raw, "dims", 0)),
            index_type=int(_get(raw, "index_type", 0)),
            method=int(_get(raw, "method", 0)),
        )
        return cls(**_header(data), results=results)


@dataclass
class InsertVectorInput:
    index_name: str
    id: int
    vector: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_range("id", self.id, 0xFFFFFFFFFFFFFFFF)
        self.vector = [_f32(v) for v in self.vector]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class InsertVectorResults:
    id: int = 0
    vector: list[float] = field(default_factory=list)


@dataclass
class InsertVectorOutput:
    status: str = ""
    message: str = ""
    results: InsertVectorResults = field(default_factory=InsertVectorResults)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "InsertVectorOutput":
        raw = _get(data, "results", {})
        results = InsertVectorResults(
            int(_get(raw, "id", 0)), [_f32(v) for v in _get(raw, "vector", [])]
        )
        return cls(**_header(data), results=results)


@dataclass
class DeleteVectorInput:
    index_name: str
    vector_id: int

    def __post_init__(self) -> None:
        _check_range("vector_id", self.vector_id, 0xFFFFFFFFFFFFFFFF)


@dataclass
class DeleteVectorResults:
    id: int = 0


@dataclass
class DeleteVectorOutput:
    status: str = ""
    message: str = ""
    results: DeleteVectorResults = field(default_factory=DeleteVectorResults)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "DeleteVectorOutput":
        raw = _get(data, "results", {})
        return cls(**_header(data), results=DeleteVectorResults(int(_get(raw, "id", 0))))


@dataclass
class SearchVectorInput:
    index_name: str
    top_k: int
    vector: list[float] = field(default_factory=list)

    def query_params(self) -> dict[str, str]:
        """The vector as comma-separated decimals, and k."""
        vector = ",".join(f"{_f32(v):f}" for v in self.vector)
        return {"vector": vector, "k": str(self.top_k)}


@dataclass
class SearchOutput:
    status: str = ""
    message: str = ""
    results: MatchResult = field(default_factory=MatchResult)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SearchOutput":
        return cls(**_header(data), results=MatchResult.from_dict(_get(data, "results", {})))