from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Collection, Dict, List, Optional

from scout_browser.core.exceptions import CommandError
from .base_command import Command
from .builtin_commands import ExitCommand, GroupsCommand, HelpCommand, ScriptCommand, TeamCommand
from .group_command import GroupCommand
from .tokenizer import tokenize

if TYPE_CHECKING:
    from scout_browser.context import AppContext

logger = logging.getLogger(__name__)

UNRECOGNIZED_MESSAGE = 'Unrecognized command: "{}". Type "help" to see a list of commands.'


class CommandRegistry:
    """
    Registry mapping invoker words to {@link Command} instances

    Design Notes:
    - Commands are registered explicitly (see default_command_registry), no discovery by reflection
    - Invokers are stored lower-cased so lookup is case-insensitive
    - Each invoker is unique across the registry
    """

    def __init__(self):
        self._by_invoker: Dict[str, Command] = {}
        self._commands: List[Command] = []

    def register(self, command: Command) -> None:
        """
        Register a {@link Command} under each of its invokers

        Raises:
            TypeError: if command is not a {@link Command}
            ValueError: if it has no invokers or an invoker is already taken
        """
        if not isinstance(command, Command):
            raise TypeError(f"Command '{command!r}' must be an instance of Command")

        if not command.invokers:
            raise ValueError(f"Command '{command.name}' declares no invokers")

        keys = [invoker.lower() for invoker in command.invokers]
        for key in keys:
            if key in self._by_invoker:
                raise ValueError(f"Invoker '{key}' already registered by '{self._by_invoker[key].name}'")

        for key in keys:
            self._by_invoker[key] = command
        self._commands.append(command)

    def resolve(self, invoker: str) -> Optional[Command]:
        return self._by_invoker.get(invoker.lower())

    def commands(self) -> List[Command]:
        """Registered commands in registration order, used by 'help'."""
        return list(self._commands)

    def dispatch(
        self,
        line: str,
        context: AppContext,
        exclude: Collection[Command] = (),
    ) -> Optional[str]:
        """
        Resolve the first word of `line` to a command and run it.

        `exclude` lets a command re-enter the dispatcher without being able to invoke itself.

        :return: the command's response, the unrecognized-command message, or None to end the session
        """
        tokens = tokenize(line)
        if not tokens:
            return ""

        invoker, args = tokens[0], tokens[1:]
        rest = line.strip()
        rest = rest[len(invoker):].strip() if rest.startswith(invoker) else " ".join(args)

        command = self.resolve(invoker)
        if command is None or command in exclude:
            return UNRECOGNIZED_MESSAGE.format(invoker)

        try:
            return command.process(rest, args, context)
        except CommandError as e:
            logger.info("Command rejected", extra={"command": command.name, "error": str(e)})
            return str(e)


def create_default_registry() -> CommandRegistry:
    """
    Builds a registry with all built-in commands.
    Registration order is the order 'help' lists them in.
    """
    registry = CommandRegistry()
    builtins = (
        HelpCommand(),
        TeamCommand(),
        GroupsCommand(),
        GroupCommand(),
        ScriptCommand(),
        ExitCommand(),
    )
    for command in builtins:
        registry.register(command)
    return registry
