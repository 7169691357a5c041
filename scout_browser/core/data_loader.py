from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from scout_browser.core.exceptions import DataFileError
from scout_browser.core.team_data import TeamData

logger = logging.getLogger(__name__)

MATCHES_FIELD = "matches"


def _read_csv(path: Path) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, skipinitialspace=True)
    except pd.errors.EmptyDataError as e:
        raise DataFileError(f"Data file {path} is empty") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DataFileError(f"Data file {path} could not be parsed: {e}") from e
    except OSError as e:
        raise DataFileError(f"Data file {path} could not be read: {e}") from e

    df.columns = [str(c).strip() for c in df.columns]
    return df


def _validate_keys(df: pd.DataFrame, key_column: str, path: Path) -> pd.DataFrame:
    """
    Make sure every row has a usable team number and normalise the key column to str.
    """
    if key_column not in df.columns:
        msg = f"Data file {path}: key column '{key_column}' not found (columns: {list(df.columns)})"
        logger.error(msg, extra={"path": str(path), "key_column": key_column})
        raise DataFileError(msg)

    if df.empty:
        raise DataFileError(f"Data file {path} has a header but no rows")

    keys = df[key_column]
    if keys.isna().any():
        rows = [int(i) + 2 for i in keys[keys.isna()].index]  # +2: header line and 1-based
        raise DataFileError(f"Data file {path}: missing team number on line(s) {rows}")

    df = df.copy()
    df[key_column] = keys.astype(str).str.strip()
    if (df[key_column] == "").any():
        raise DataFileError(f"Data file {path}: blank team number in column '{key_column}'")
    return df


def load_team_data(path: str | Path, key_column: str = "team") -> List[TeamData]:
    """
    Materialise the team pool from a scouting CSV.

    Each row is one scouted match for one team. Rows are grouped per team
    (first-appearance order) and turned into one TeamData each:
    - numeric columns hold the mean over the team's rows
    - other columns hold the first non-missing value
    - 'matches' holds the number of rows scouted for the team

    :raises DataFileError: if the file is missing, empty, unparsable or has no usable key column
    """
    path = Path(path)
    if not path.is_file():
        raise DataFileError(f"Data file not found at {path}.")

    df = _validate_keys(_read_csv(path), key_column, path)

    value_columns = [c for c in df.columns if c != key_column]
    numeric_columns = [c for c in value_columns if pd.api.types.is_numeric_dtype(df[c])]
    other_columns = [c for c in value_columns if c not in numeric_columns]

    grouped = df.groupby(key_column, sort=False)
    counts = grouped.size()
    means = grouped[numeric_columns].mean() if numeric_columns else None
    firsts = grouped[other_columns].first() if other_columns else None

    teams: List[TeamData] = []
    for team_number in counts.index:
        fields: Dict[str, Any] = {}
        for column in value_columns:
            source = means if column in numeric_columns else firsts
            fields[column] = source.at[team_number, column]
        fields.setdefault(MATCHES_FIELD, int(counts.at[team_number]))
        teams.append(TeamData(team_number, fields))

    logger.info(
        "Loaded data file",
        extra={"path": str(path), "n_rows": len(df), "n_teams": len(teams)},
    )
    return teams
