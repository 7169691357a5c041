from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from scout_browser.commands.command_registry import CommandRegistry, create_default_registry
from scout_browser.config.model import Configuration
from scout_browser.core.data_loader import load_team_data
from scout_browser.core.group_registry import GroupRegistry
from scout_browser.core.team_data import TeamData

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Holds shared state for the shell: configuration, loaded teams, the group
    registry and the command registry. This is passed into every command
    instead of using module-level globals.
    """
    config: Configuration
    teams: List[TeamData]
    team_by_number: Dict[str, TeamData]
    groups: GroupRegistry
    commands: CommandRegistry

    def find_team(self, team_number: str) -> Optional[TeamData]:
        """Case-insensitive lookup of a loaded team."""
        return self.team_by_number.get(str(team_number).strip().lower())


def build_context(
    config: Configuration,
    commands: Optional[CommandRegistry] = None,
) -> AppContext:
    """
    Load the data file and assemble the AppContext.

    :raises DataFileError: if the data file cannot be loaded; nothing is built in that case
    """
    teams = load_team_data(config.data_file, key_column=config.key_column)

    context = AppContext(
        config=config,
        teams=teams,
        team_by_number={td.team_number.lower(): td for td in teams},
        groups=GroupRegistry(teams),
        commands=commands or create_default_registry(),
    )
    logger.info(
        "Context ready",
        extra={"data_file": str(config.data_file), "n_teams": len(teams)},
    )
    return context
