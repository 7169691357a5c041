from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Configuration:
    """
    Session-wide settings.

    Fields:

    - team: team number shown in the prompt (SCI@<team>:)
    - motd: message printed when the shell starts
    - data_file: scouting CSV used to seed the 'all' group
    - key_column: CSV column holding the team number
    - decimal_places: rounding used when numbers are printed
    """
    team: str = "0000"
    motd: str = "Scouting Computer Interface"
    data_file: Path = Path("data/data.csv")
    key_column: str = "team"
    decimal_places: int = 2
