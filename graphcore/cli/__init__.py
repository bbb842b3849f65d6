"""
CLI package — command registry, built-in commands and the hosting loop.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with
                  ``execute(args, context)`` returning a ``CommandResult``.
• Registry      – ``CommandRegistry`` owns the commands, keyed by name.
• Interpreter   – ``CommandProcessor`` turns a command line into a
                  command invocation.
"""
from .command_processor import CommandProcessor, ParsedLine
from .commands import (
    BUILTIN_COMMANDS,
    Command,
    CommandContext,
    CommandResult,
    HelpCommand,
    QuitCommand,
    ReadArcsCommand,
    ReadNodesCommand,
    ReturnType,
)
from .exceptions import DuplicateCommandError, RegistryClosedError, RegistryError
from .registry import CommandRegistry, create_default_registry
from .shell import main, run_shell

__all__ = [
    'CommandProcessor',
    'ParsedLine',
    'BUILTIN_COMMANDS',
    'Command',
    'CommandContext',
    'CommandResult',
    'HelpCommand',
    'QuitCommand',
    'ReadArcsCommand',
    'ReadNodesCommand',
    'ReturnType',
    'DuplicateCommandError',
    'RegistryClosedError',
    'RegistryError',
    'CommandRegistry',
    'create_default_registry',
    'main',
    'run_shell',
]
