from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .team_data import FieldValue, TeamData

_COMPARATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "contains": lambda left, right: right in left,
}

OPERATORS: Tuple[str, ...] = tuple(_COMPARATORS)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_number(value: Any) -> Optional[float]:
    """Return value as a number if it is one (or a numeric string), else None."""
    if is_number(value):
        return value
    try:
        text = str(value).strip()
        if text.lstrip("+-").isdigit():
            return int(text)
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_value(text: str) -> FieldValue:
    """Typed value for user input: numbers become int/float, everything else stays str."""
    number = coerce_number(text)
    return text if number is None else number


@dataclass(frozen=True)
class Condition:
    """
    One test applied to a single field of a TeamData.

    - field: name of the field to read
    - op: one of OPERATORS
    - value: value to compare the field against

    Numeric fields compare numerically (a numeric string value is coerced).
    String fields compare case-insensitively. 'contains' is a case-insensitive
    substring test on the field's text.
    """
    field: str
    op: str
    value: FieldValue

    def __post_init__(self) -> None:
        if self.op not in _COMPARATORS:
            raise ValueError(f"Unknown operator '{self.op}'. Expected one of: {', '.join(OPERATORS)}")

    @classmethod
    def parse(cls, tokens: Sequence[str]) -> Condition:
        """Build a Condition from ["<field>", "<op>", "<value>", ...]; extra tokens are joined into the value."""
        if len(tokens) < 3:
            raise ValueError("Condition needs a field, an operator and a value")
        field, op, *rest = tokens
        return cls(field=field, op=op.lower(), value=parse_value(" ".join(rest)))

    def accepts(self, record: TeamData) -> bool:
        """
        True if the record passes this condition.

        Fail-closed: a record missing the field, or whose value cannot be
        compared with the condition value, is rejected.
        """
        if not record.has(self.field):
            return False
        left = record.get(self.field)
        compare = _COMPARATORS[self.op]

        if self.op == "contains":
            return compare(str(left).casefold(), str(self.value).casefold())

        if is_number(left):
            right = coerce_number(self.value)
            if right is None:
                return False
            return compare(left, right)

        if is_number(self.value):
            number = coerce_number(left)
            if number is None:
                return False
            return compare(number, self.value)

        return compare(str(left).casefold(), str(self.value).casefold())

    def __str__(self) -> str:
        return f"{self.field} {self.op} {self.value}"


class Filter:
    """
    Predicate over TeamData made of zero or more Conditions joined with AND.

    With no conditions every record passes. `version` increases on every
    mutation so owners can tell when a cached result is out of date.
    """

    def __init__(self, conditions: Sequence[Condition] = ()) -> None:
        self._conditions: List[Condition] = list(conditions)
        self.version = 0

    @property
    def conditions(self) -> Tuple[Condition, ...]:
        return tuple(self._conditions)

    def check(self, record: TeamData) -> bool:
        return all(cond.accepts(record) for cond in self._conditions)

    def add_condition(self, condition: Condition) -> None:
        self._conditions.append(condition)
        self.version += 1

    def remove_condition(self, condition: Condition) -> bool:
        if condition not in self._conditions:
            return False
        self._conditions.remove(condition)
        self.version += 1
        return True

    def reset(self) -> None:
        self._conditions.clear()
        self.version += 1

    def __len__(self) -> int:
        return len(self._conditions)
