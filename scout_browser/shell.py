from __future__ import annotations

import sys
from typing import TextIO

from scout_browser.context import AppContext

BANNER = "-------------------------------------------"


def prompt(context: AppContext) -> str:
    return f"SCI@{context.config.team}: "


def run_shell(context: AppContext, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    """
    Interactive loop: read a line, dispatch it, print the response.

    Stops when a command returns None (exit/quit) or stdin reaches EOF.
    """
    print(context.config.motd, file=stdout)

    while True:
        stdout.write(prompt(context))
        stdout.flush()

        line = stdin.readline()
        if not line:
            print(file=stdout)
            break

        response = context.commands.dispatch(line.rstrip("\r\n"), context)
        if response is None:
            break
        print(response, file=stdout)
        print(file=stdout)

    print(BANNER, file=stdout)
    print("Terminating Scouting Computer Interface...", file=stdout)
    print("Program terminated.", file=stdout)
    print(BANNER, file=stdout)
