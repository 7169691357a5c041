"""
Top-level package for the scouting browser.

This package exposes the core view engine, configuration and the command shell.
Most code should import from submodules such as:
    scout_browser.core
    scout_browser.config
    scout_browser.commands
"""

__all__: list[str] = []
