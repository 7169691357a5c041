"""
Multi-key ordering for TeamData.

A Sorter holds an ordered list of SortKeys. Comparing two records walks the
keys in order and the first key that tells them apart decides. Records equal
under every key keep their input order, because `sort` relies on Python's
stable sort.

Natural ordering per value type:
- numbers compare numerically
- strings compare case-insensitively (str.casefold)
- a number sorts before a string under the same key (ascending)

A record missing a key's field always sorts after the records that have it,
in both directions.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .filter import is_number
from .team_data import FieldValue, TeamData


@dataclass(frozen=True)
class SortKey:
    field: str
    descending: bool = False

    @property
    def direction(self) -> str:
        return "desc" if self.descending else "asc"

    def __str__(self) -> str:
        return f"{self.field} {self.direction}"


def _natural_key(value: FieldValue) -> Tuple[int, FieldValue]:
    if is_number(value):
        return (0, value)
    return (1, str(value).casefold())


def _sign(left, right) -> int:
    return (left > right) - (left < right)


def compare_values(left: Optional[FieldValue], right: Optional[FieldValue], descending: bool = False) -> int:
    """Three-way comparison of two field values under one key; None means missing."""
    if left is None or right is None:
        # missing sorts last regardless of direction
        return _sign(left is None, right is None)

    result = _sign(_natural_key(left), _natural_key(right))
    return -result if descending else result


class Sorter:
    """
    Ordered sequence of SortKeys defining a total order over TeamData.

    `version` increases on every mutation so owners can tell when a cached
    ordering is out of date.
    """

    def __init__(self, keys: Iterable[SortKey] = ()) -> None:
        self._keys: List[SortKey] = []
        self.version = 0
        for key in keys:
            self.add_key(key.field, key.descending)

    @property
    def keys(self) -> Tuple[SortKey, ...]:
        return tuple(self._keys)

    def compare(self, a: TeamData, b: TeamData) -> int:
        for key in self._keys:
            result = compare_values(a.get(key.field), b.get(key.field), key.descending)
            if result:
                return result
        return 0

    def sort(self, records: Iterable[TeamData]) -> List[TeamData]:
        ordered = list(records)
        if self._keys:
            ordered.sort(key=functools.cmp_to_key(self.compare))
        return ordered

    def add_key(self, field: str, descending: bool = False) -> None:
        """Append a key; a field that is already a key keeps its position and takes the new direction."""
        new_key = SortKey(field=field, descending=descending)
        for i, key in enumerate(self._keys):
            if key.field == field:
                self._keys[i] = new_key
                break
        else:
            self._keys.append(new_key)
        self.version += 1

    def remove_key(self, field: str) -> bool:
        remaining = [key for key in self._keys if key.field != field]
        if len(remaining) == len(self._keys):
            return False
        self._keys = remaining
        self.version += 1
        return True

    def reset(self) -> None:
        self._keys.clear()
        self.version += 1

    def __len__(self) -> int:
        return len(self._keys)
