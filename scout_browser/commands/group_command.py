from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from scout_browser.core.exceptions import CommandError
from scout_browser.core.filter import Condition
from scout_browser.core.group import Group
from scout_browser.core.team_data import TeamData
from .base_command import Command
from .formatting import describe_view, format_team_table

if TYPE_CHECKING:
    from scout_browser.context import AppContext

_DIRECTIONS = {"asc": False, "ascending": False, "desc": True, "descending": True}


class GroupCommand(Command):
    """
    Manage groups and their views.

    Sub-commands:
        create <name> [from <source>]   new group, optionally seeded with <source>'s active list
        delete <name>
        show <name>
        add <name> <team...>
        remove <name> <team...>
        clear <name>
        filter <name> <field> <op> <value>
        sort <name> <field> [asc|desc]
        reset <name>
    """

    name = "group"
    invokers = ("group",)
    help_text = "Create, inspect, filter and sort groups of teams."
    usage = (
        "group create <name> [from <source>] | delete <name> | show <name> | "
        "add <name> <team...> | remove <name> <team...> | clear <name> | "
        "filter <name> <field> <op> <value> | sort <name> <field> [asc|desc] | reset <name>"
    )

    def __init__(self) -> None:
        self._handlers: Dict[str, Callable[[List[str], AppContext], str]] = {
            "create": self._create,
            "delete": self._delete,
            "show": self._show,
            "add": self._add,
            "remove": self._remove,
            "clear": self._clear,
            "filter": self._filter,
            "sort": self._sort,
            "reset": self._reset,
        }

    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        if not tokens:
            raise CommandError(f"Usage: {self.usage}")

        handler = self._handlers.get(tokens[0].lower())
        if handler is None:
            raise CommandError(f'Unknown group action "{tokens[0]}". Usage: {self.usage}')
        return handler(tokens[1:], context)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _group(args: List[str], context: AppContext) -> Group:
        if not args:
            raise CommandError("A group name is required.")
        group = context.groups.get(args[0])
        if group is None:
            raise CommandError(f'Group "{args[0]}" does not exist.')
        return group

    @staticmethod
    def _teams(numbers: List[str], context: AppContext) -> Tuple[List[TeamData], List[str]]:
        if not numbers:
            raise CommandError("At least one team number is required.")
        found: List[TeamData] = []
        unknown: List[str] = []
        for number in numbers:
            td = context.find_team(number)
            if td is None:
                unknown.append(number)
            else:
                found.append(td)
        return found, unknown

    @staticmethod
    def _immutable(group: Group) -> CommandError:
        return CommandError(f'Group "{group.name}" is immutable; its teams cannot be changed.')

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def _create(self, args: List[str], context: AppContext) -> str:
        if len(args) not in (1, 3) or (len(args) == 3 and args[1].lower() != "from"):
            raise CommandError("Usage: group create <name> [from <source>]")

        try:
            if len(args) == 3:
                source = self._group(args[2:], context)
                group = context.groups.register(source.copy(args[0], active=True))
            else:
                group = context.groups.create(args[0])
        except ValueError as e:
            raise CommandError(str(e)) from e
        return f'Created group "{group.name}" with {len(group)} teams.'

    def _delete(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        if not context.groups.remove(group.name):
            raise CommandError(f'Group "{group.name}" cannot be deleted.')
        return f'Deleted group "{group.name}".'

    def _show(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        table = format_team_table(group.get_team_list(), context.config.decimal_places)
        return f"{describe_view(group)}\n{table}"

    def _add(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        teams, unknown = self._teams(args[1:], context)
        if group.immutable:
            raise self._immutable(group)

        results = [(td.team_number, group.add(td)) for td in teams]
        added = [number for number, ok in results if ok]
        skipped = [number for number, ok in results if not ok]
        return self._summary(group, "Added", added, skipped, "already in group", unknown)

    def _remove(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        teams, unknown = self._teams(args[1:], context)
        if group.immutable:
            raise self._immutable(group)

        results = [(td.team_number, group.remove(td)) for td in teams]
        removed = [number for number, ok in results if ok]
        skipped = [number for number, ok in results if not ok]
        return self._summary(group, "Removed", removed, skipped, "not in group", unknown)

    def _clear(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        if not group.clear():
            raise self._immutable(group)
        return f'Cleared group "{group.name}".'

    def _filter(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        try:
            condition = Condition.parse(args[1:])
        except ValueError as e:
            raise CommandError(f"{e}. Usage: group filter <name> <field> <op> <value>") from e
        group.filter.add_condition(condition)
        return describe_view(group)

    def _sort(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        if len(args) not in (2, 3):
            raise CommandError("Usage: group sort <name> <field> [asc|desc]")

        direction = args[2].lower() if len(args) == 3 else "asc"
        if direction not in _DIRECTIONS:
            raise CommandError(f'Unknown sort direction "{args[2]}"; use asc or desc.')
        group.sorter.add_key(args[1], descending=_DIRECTIONS[direction])
        return describe_view(group)

    def _reset(self, args: List[str], context: AppContext) -> str:
        group = self._group(args, context)
        group.reset()
        return describe_view(group)

    @staticmethod
    def _summary(
        group: Group,
        verb: str,
        done: List[str],
        skipped: List[str],
        skipped_reason: str,
        unknown: List[str],
    ) -> str:
        parts = [f'{verb} {len(done)} team(s) in "{group.name}"' + (f": {', '.join(done)}" if done else "")]
        if skipped:
            parts.append(f"Skipped ({skipped_reason}): {', '.join(skipped)}")
        if unknown:
            parts.append(f"Unknown team(s): {', '.join(unknown)}")
        return "\n".join(parts)
