from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import pandas as pd

from scout_browser.core.exceptions import CommandError
from .base_command import Command
from .formatting import format_team, format_team_table

if TYPE_CHECKING:
    from scout_browser.context import AppContext


class HelpCommand(Command):
    name = "help"
    invokers = ("help", "?")
    help_text = "List commands, or show usage for one command."
    usage = "help [command]"

    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        if tokens:
            command = context.commands.resolve(tokens[0])
            if command is None:
                raise CommandError(f'No command named "{tokens[0]}".')
            return f"{command.name}: {command.help_text}\nUsage: {command.usage or command.name}"

        lines = ["Commands:"]
        for command in context.commands.commands():
            lines.append(f"  {'/'.join(command.invokers):<14} {command.help_text}")
        return "\n".join(lines)


class ExitCommand(Command):
    name = "exit"
    invokers = ("exit", "quit")
    help_text = "End the session."

    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        return None


class TeamCommand(Command):
    name = "team"
    invokers = ("team", "teams")
    help_text = "Show one team's scouted values, or list every loaded team."
    usage = "team [number]"

    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        places = context.config.decimal_places
        if not tokens:
            return format_team_table(context.teams, places, columns=[])

        td = context.find_team(tokens[0])
        if td is None:
            raise CommandError(f'Team "{tokens[0]}" is not in the data file.')
        return format_team(td, places)


class GroupsCommand(Command):
    name = "groups"
    invokers = ("groups",)
    help_text = "List groups with their pool and active list sizes."

    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        rows = [
            {
                "group": name,
                "pool": len(group),
                "active": len(group.get_team_list()),
                "immutable": "yes" if group.immutable else "no",
            }
            for name, group in context.groups.items()
        ]
        return pd.DataFrame(rows).to_string(index=False)


class ScriptCommand(Command):
    """
    Run the command lines stored in a text file, one per line.

    Blank lines and lines starting with '#' are skipped. The script cannot
    invoke 'script' itself, and an exit/quit line stops the script (not the session).
    """

    name = "script"
    invokers = ("script",)
    help_text = "Run commands from a text file, one per line."
    usage = "script <path>"

    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        if len(tokens) != 1:
            raise CommandError(f"Usage: {self.usage}")

        path = Path(tokens[0]).expanduser()
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise CommandError(f'Could not read script "{path}": {e}') from e

        responses: List[str] = []
        for entry in lines:
            entry = entry.strip()
            if not entry or entry.startswith("#"):
                continue
            response = context.commands.dispatch(entry, context, exclude=[self])
            if response is None:
                break
            responses.append(f"> {entry}\n{response}")
        return "\n".join(responses)
