"""
    CommandRegistry — the owning collection of available commands.

    Design Pattern: Registry
    ────────────────────────
    Commands are registered once at startup, looked up by exact name
    while the interpreter runs, and released together when the registry
    is closed.  The registry also carries the one-way quit latch the
    hosting loop polls after every command.
"""
import logging
from typing import Dict, Iterator, List, Optional

from .commands import BUILTIN_COMMANDS, Command
from .exceptions import DuplicateCommandError, RegistryClosedError

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Insertion-ordered, name-unique collection of ``Command`` objects.

    Usage:
        with CommandRegistry() as registry:
            registry.register(HelpCommand())
            cmd = registry.find("help")
    """

    def __init__(self):
        self._commands: Dict[str, Command] = {}
        self._quit_requested = False
        self._closed = False

    # ── Registration ─────────────────────────────────────────────

    def register(self, command: Command) -> Command:
        """
        Take ownership of ``command``.

        Raises:
            DuplicateCommandError: A command with the same name exists.
            RegistryClosedError:   The registry has been closed.
        """
        if self._closed:
            raise RegistryClosedError(
                f"Cannot register '{command.name}': registry is closed.")
        if command.name in self._commands:
            logger.warning("Rejected duplicate command '%s'.", command.name)
            raise DuplicateCommandError(f"Duplicate command registered: '{command.name}'.")
        self._commands[command.name] = command
        logger.debug("Registered command '%s' (%s).", command.name, type(command).__name__)
        return command

    # ── Lookup ───────────────────────────────────────────────────

    def find(self, name: str) -> Optional[Command]:
        """Exact, case-sensitive lookup.  No abbreviations."""
        return self._commands.get(name)

    def enumerate(self) -> List[Command]:
        """All commands in registration order."""
        return list(self._commands.values())

    def __iter__(self) -> Iterator[Command]:
        return iter(self.enumerate())

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    # ── Quit latch ───────────────────────────────────────────────

    def request_quit(self) -> None:
        """Ask the hosting loop to stop.  Cannot be undone."""
        if not self._quit_requested:
            logger.info("Quit requested.")
        self._quit_requested = True

    def is_quit_requested(self) -> bool:
        return self._quit_requested

    # ── Lifecycle ────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release every command and empty the registry.  Safe to call twice."""
        if self._closed:
            return
        for command in self._commands.values():
            command.release()
        logger.info("Registry closed, %d command(s) released.", len(self._commands))
        self._commands.clear()
        self._closed = True

    def __enter__(self) -> "CommandRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_default_registry() -> CommandRegistry:
    """Build a registry holding one instance of every built-in command."""
    registry = CommandRegistry()
    for command_cls in BUILTIN_COMMANDS:
        registry.register(command_cls())
    return registry
