"""
Command layer: tokenizer, Command base class, the command registry and the
built-in commands
"""

from .base_command import Command
from .command_registry import CommandRegistry, create_default_registry
from .tokenizer import tokenize

__all__ = ["Command", "CommandRegistry", "create_default_registry", "tokenize"]
