from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import pandas as pd

from scout_browser.core.group import Group
from scout_browser.core.team_data import TeamData

KEY_LABEL = "team"


def format_value(value, decimal_places: int) -> str:
    if isinstance(value, float):
        return f"{value:.{decimal_places}f}"
    return str(value)


def teams_frame(teams: Iterable[TeamData], columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    One row per team, team number first, then every field seen (first-seen order)
    unless `columns` narrows it down. Teams missing a field get NaN in that cell.
    """
    rows = [{KEY_LABEL: td.team_number, **td.fields} for td in teams]
    if columns is None:
        seen: List[str] = []
        for row in rows:
            seen.extend(c for c in row if c != KEY_LABEL and c not in seen)
        columns = seen
    return pd.DataFrame(rows, columns=[KEY_LABEL, *columns])


def format_team_table(
    teams: Sequence[TeamData],
    decimal_places: int,
    columns: Optional[Sequence[str]] = None,
) -> str:
    if not teams:
        return "(no teams)"
    df = teams_frame(teams, columns)
    return df.to_string(
        index=False,
        na_rep="-",
        float_format=lambda v: f"{v:.{decimal_places}f}",
    )


def format_team(td: TeamData, decimal_places: int) -> str:
    lines = [f"Team {td.team_number}"]
    for field, value in td.fields.items():
        lines.append(f"  {field}: {format_value(value, decimal_places)}")
    return "\n".join(lines)


def describe_view(group: Group) -> str:
    """Header line for a group: pool size, active size, filter and sort configuration."""
    conditions = " AND ".join(str(c) for c in group.filter.conditions) or "none"
    keys = ", ".join(str(k) for k in group.sorter.keys) or "none"
    flag = " (immutable)" if group.immutable else ""
    return (
        f"Group '{group.name}'{flag}: {len(group.get_team_list())} of {len(group)} teams | "
        f"filter: {conditions} | sort: {keys}"
    )
