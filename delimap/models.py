from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple
from pydantic import BaseModel, Field


# Ordered text lines of one document, line terminators included.
RawDocument = Tuple[str, ...]

Record = Dict[str, str]


class StatusReport(BaseModel):
    failed: bool = False
    message: str = ""


class SeparatorResult(BaseModel):
    separator: Optional[str] = None
    status: StatusReport = Field(default_factory=StatusReport)

    @property
    def resolved(self) -> bool:
        return self.separator is not None


class ParseResult(BaseModel):
    separator: Optional[str] = None
    header: List[str] = Field(default_factory=list)
    records: List[Dict[str, str]] = Field(default_factory=list)
    status: StatusReport = Field(default_factory=StatusReport)


class ParseResponse(BaseModel):
    filename: Optional[str] = None
    separator: Optional[str] = Field(default=None, examples=[";"])
    header: List[str] = Field(default_factory=list)
    records: List[Dict[str, str]] = Field(default_factory=list)
    status: StatusReport


class HealthResponse(BaseModel):
    ok: bool = True


class RecordView:
    """
    Attribute-style view over a record.

    Wraps the record mapping without copying it. Field names that are not
    valid identifiers remain reachable with ``view["field name"]``.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, str]):
        object.__setattr__(self, "_data", data)

    def __getattr__(self, name: str) -> str:
        # _data is unset on bare instances built by copy and pickle
        try:
            data = object.__getattribute__(self, "_data")
            return data[name]
        except (AttributeError, KeyError):
            raise AttributeError(name) from None

    def __reduce__(self):
        return (RecordView, (dict(self._data),))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RecordView is read-only")

    def __getitem__(self, name: str) -> str:
        return self._data[name]

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RecordView):
            return dict(self._data) == dict(other._data)
        if isinstance(other, Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._data.items())
        return f"RecordView({fields})"

    def to_dict(self) -> Record:
        return dict(self._data)
