"""A list of records kept in a text file with one header line."""

from __future__ import annotations

import logging
import os
from typing import Generic, Protocol, TypeVar

_log = logging.getLogger(__name__)


class _Storable(Protocol):
    @classmethod
    def header(cls) -> str: ...

    @classmethod
    def from_line(cls, line: str) -> _Storable: ...

    def to_line(self) -> str: ...


T = TypeVar("T", bound=_Storable)


class Database(Generic[T]):
    """Records of ``item_type`` stored one per line under a header line.

    ``item_type`` provides ``header()`` and ``from_line(line)`` class methods,
    and its items a ``to_line()`` method.
    """

    def __init__(self, filename: str | os.PathLike[str], item_type: type[T]) -> None:
        self.filename = filename
        self.item_type = item_type
        self._items: list[T] = []

    def add(self, item: T) -> None:
        self._items.append(item)

    def items(self) -> list[T]:
        return list(self._items)

    def save(self) -> None:
        with open(self.filename, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(self.item_type.header() + "\n")
            for item in self._items:
                handle.write(item.to_line() + "\n")

    def load(self) -> None:
        """Replace the items with those in the file, skipping unreadable lines."""
        with open(self.filename, encoding="utf-8") as handle:
            self._items.clear()
            handle.readline()
            for line in handle:
                try:
                    self._items.append(self.item_type.from_line(line.rstrip("\n")))
                except Exception as exc:  # a bad line must not stop the load
                    _log.warning("error loading record: %s", exc)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)