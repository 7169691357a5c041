from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import numpy as np
import pandas as pd

FieldValue = Union[int, float, str]


def _normalise_value(value: Any) -> Optional[FieldValue]:
    """
    Turn a raw cell value (often a numpy scalar coming out of pandas) into a
    plain Python int/float/str. Missing values (None, NaN, blank strings) map to None.
    """
    if value is None:
        return None

    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, (int, float)):
        if pd.isna(value):
            return None
        return value

    text = str(value).strip()
    return text or None


class TeamData:
    """
    A single scouting entry: one team and the values scouted for it.

    Identity is the team number. Two TeamData objects with the same
    team_number are equal (and hash the same) even if their fields differ,
    so a pool can never hold two entries for one team.

    Fields are exposed through a read-only mapping; missing values are simply
    absent rather than stored as None/NaN.
    """

    __slots__ = ("_team_number", "_fields")

    def __init__(self, team_number: Any, fields: Optional[Mapping[str, Any]] = None) -> None:
        key = str(team_number).strip()
        if not key:
            raise ValueError("TeamData requires a non-empty team number")

        cleaned: Dict[str, FieldValue] = {}
        for name, raw in (fields or {}).items():
            value = _normalise_value(raw)
            if value is not None:
                cleaned[str(name)] = value

        self._team_number = key
        self._fields = MappingProxyType(cleaned)

    @property
    def team_number(self) -> str:
        return self._team_number

    @property
    def fields(self) -> Mapping[str, FieldValue]:
        return self._fields

    def get(self, field: str, default: Any = None) -> Any:
        return self._fields.get(field, default)

    def has(self, field: str) -> bool:
        return field in self._fields

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TeamData):
            return NotImplemented
        return self._team_number == other._team_number

    def __hash__(self) -> int:
        return hash(self._team_number)

    def __repr__(self) -> str:
        return f"TeamData({self._team_number!r}, {dict(self._fields)!r})"
