from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from scout_browser.context import AppContext


class Command(ABC):
    """
    Abstract base class for all shell commands.

    Defines the contract that every command must follow
    - expose a 'name' - used in help output
    - expose 'invokers' - the words that trigger it (matched case-insensitively)
    - expose 'help_text' - one line shown by 'help'
    - implement 'process' - produce a response for the rest of the input line
    """

    name: str = None
    invokers: Tuple[str, ...] = ()
    help_text: str = ""
    usage: str = ""

    @abstractmethod
    def process(self, line: str, tokens: List[str], context: AppContext) -> Optional[str]:
        """
        Handle one invocation
        :param line: the input line with the invoker word removed
        :param tokens: the tokenized words after the invoker
        :param context: the {@link AppContext} holding groups, teams and config
        :return: the response text, or None to end the session
        Raises:
            CommandError: if the arguments are unusable; the message is shown to the user
        """
        raise NotImplementedError()
