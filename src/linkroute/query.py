"""Immutable deep link query parameters.

Implements ``Mapping[str, str]``. Duplicate keys collapse to the last value.
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Self
from urllib.parse import parse_qsl


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters.

    Compares equal to any mapping with the same items, so
    ``link.query_params == {"tab": "logs"}`` holds.
    """

    _data: dict[str, str]

    __slots__ = ("_data",)

    def __init__(self, items: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        object.__setattr__(self, "_data", dict(items))

    @classmethod
    def parse(cls, query: str) -> Self:
        """Decode a raw query string, keeping blank values."""
        return cls(parse_qsl(query, keep_blank_values=True))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"QueryParams({{{items}}})"


def freeze_query(params: Mapping[str, str] | None) -> QueryParams:
    """Return *params* as ``QueryParams``, copying anything mutable."""
    if isinstance(params, QueryParams):
        return params
    return QueryParams(params or {})
