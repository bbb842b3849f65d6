"""
    CLI Commands — the command abstraction and the built-in commands.

    Design Pattern: Command
    ───────────────────────
    Each command is an object with a name, a one-line synopsis, a help
    text, a declared result shape and an ``execute(args, context)``
    method returning a ``CommandResult``.

    Every execution leaves exactly one current status on the command
    (``status_message``); the next status overwrites it.  The same
    status travels back to the caller inside the ``CommandResult``, so
    the invoker never has to read the field after the call.

    Result shapes (``ReturnType``):
        NONE       – nothing besides the status line
        NODE_LIST  – ``data`` is a list of node IDs
        ARC_LIST   – ``data`` is a list of (tail, head) pairs
        OTHER      – unstructured; anything beyond the status line was
                     written to the output channel by the command itself

    Built-in commands:
    ──────────────────
        help [COMMAND]
        quit
        read-nodes
        read-arcs
"""
from __future__ import annotations

import gettext
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional, TextIO

from ..config import CliConfig, DEFAULT_CONFIG
from ..services.dataset_reader import DatasetReader
from .. import status
from ..status import CommandStatus, StatusMessage

if TYPE_CHECKING:
    from .registry import CommandRegistry

_ = gettext.gettext


class ReturnType(Enum):
    NONE = "none"
    ARC_LIST = "arc_list"
    NODE_LIST = "node_list"
    OTHER = "other"

    @property
    def is_list(self) -> bool:
        return self in (ReturnType.ARC_LIST, ReturnType.NODE_LIST)


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        message:      The status the command finished with.
        return_type:  Shape of ``data``.
        data:         Structured payload for list results, else None.
        echoed:       The status line was already written to the output
                      channel by the command; the invoker must not
                      render it a second time.
    """
    message: StatusMessage
    return_type: ReturnType = ReturnType.NONE
    data: Any = None
    echoed: bool = False

    @property
    def status(self) -> CommandStatus:
        return self.message.status

    @property
    def success(self) -> bool:
        return self.message.ok


@dataclass
class CommandContext:
    """
    Everything a command may touch while it runs.

    Attributes:
        registry: The registry the command was resolved from.
        input:    Data stream for data set commands (borrowed).
        output:   Primary output channel.
        config:   Interpreter configuration.
    """
    registry: Optional[CommandRegistry] = None
    input: Optional[TextIO] = None
    output: Optional[TextIO] = None
    config: CliConfig = field(default_factory=lambda: DEFAULT_CONFIG)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Subclasses set the ``name`` class attribute (and usually
    ``synopsis`` and ``help_text``) and implement ``return_type`` and
    ``execute``.
    """

    name: str = "command"
    synopsis: Optional[str] = None
    help_text: Optional[str] = None

    def __init__(self):
        self._status_message: Optional[StatusMessage] = None
        self._echoed = False

    def get_synopsis(self) -> str:
        """One line describing the command and its parameters."""
        return self.synopsis or self.name

    def get_help_text(self) -> str:
        """Text describing what the command does."""
        return self.help_text or _("Help text for %s.") % self.name

    @property
    @abstractmethod
    def return_type(self) -> ReturnType:
        ...

    @abstractmethod
    def execute(self, args: List[str], context: CommandContext) -> CommandResult:
        """Run the command with the given arguments."""
        ...

    def release(self) -> None:
        """Free resources held by the command.  Called once by the registry on close."""
        pass

    # ── Status ──────────────────────────────────────────────────

    @property
    def status_message(self) -> Optional[StatusMessage]:
        """The status of the most recent execution, or None before the first."""
        return self._status_message

    def set_status(self, message: StatusMessage) -> StatusMessage:
        """Make ``message`` the current status, replacing the previous one."""
        self._status_message = message
        self._echoed = False
        return message

    def success(self, template: str = "", *args) -> StatusMessage:
        return self.set_status(status.success(template, *args))

    def failure(self, template: str = "", *args) -> StatusMessage:
        return self.set_status(status.failure(template, *args))

    def error(self, template: str = "", *args) -> StatusMessage:
        return self.set_status(status.error(template, *args))

    def none(self, template: str = "", *args) -> StatusMessage:
        return self.set_status(status.none(template, *args))

    def syntax_error(self, output: Optional[TextIO] = None) -> StatusMessage:
        """
        Report a usage error naming the command synopsis.

        Unstructured (OTHER) commands also write the message straight to
        ``output`` (stdout by default); list commands leave output to the
        invoker.
        """
        message = self.error("%s%s", _("Syntax: "), self.get_synopsis())
        if self.return_type is ReturnType.OTHER:
            out = output if output is not None else sys.stdout
            out.write(message.render() + "\n")
            self._echoed = True
        return message

    def result(self, data: Any = None) -> CommandResult:
        """Wrap the current status into a ``CommandResult``."""
        message = self._status_message or StatusMessage(CommandStatus.NONE)
        return CommandResult(message, self.return_type, data, self._echoed)

    # ── Data set input ──────────────────────────────────────────

    def read_nodeset(self, stream: TextIO, dataset: List[List[int]],
                     expected_size: int, config: Optional[CliConfig] = None) -> bool:
        """
        Read a data set of node IDs from ``stream`` into ``dataset``.

        Args:
            stream:        Data stream, read up to the first blank line.
            dataset:       Receives the records; left untouched on error.
            expected_size: Values per line (1 for nodes, 2 for arcs).
            config:        Delimiters and line bound.

        Returns:
            True on success.  The current status is updated either way.
        """
        outcome = DatasetReader(expected_size, node_ids=True, config=config).read(stream)
        self.set_status(outcome.status)
        if outcome.ok:
            dataset.extend(outcome.records)
        return outcome.ok


# ═════════════════════════════════════════════════════════════════
#  BUILT-IN COMMANDS
# ═════════════════════════════════════════════════════════════════

class HelpCommand(Command):
    """
    List all commands, or describe one.

    Syntax:
        help
        help <command>
    """

    name = "help"
    synopsis = "help [COMMAND]"
    help_text = _("Without argument, list all commands.\n"
                  "With a command name, show the help text of that command.")

    @property
    def return_type(self) -> ReturnType:
        return ReturnType.OTHER

    def execute(self, args: List[str], context: CommandContext) -> CommandResult:
        if len(args) > 1:
            self.syntax_error(context.output)
            return self.result()

        registry = context.registry
        if registry is None:
            self.none(_("no commands available"))
            return self.result()

        if args:
            command = registry.find(args[0])
            if command is None:
                self.failure(_("unknown command: %s"), args[0])
            else:
                self.success("%s\n%s", command.get_synopsis(), command.get_help_text())
            return self.result()

        synopses = [command.get_synopsis() for command in registry.enumerate()]
        self.success(_("available commands:\n%s"), "\n".join(synopses))
        return self.result()


class QuitCommand(Command):
    """
    Ask the hosting loop to stop.

    Syntax:
        quit
    """

    name = "quit"
    help_text = _("Stop reading commands and shut down.")

    @property
    def return_type(self) -> ReturnType:
        return ReturnType.NONE

    def execute(self, args: List[str], context: CommandContext) -> CommandResult:
        if args:
            self.syntax_error(context.output)
            return self.result()
        if context.registry is not None:
            context.registry.request_quit()
        self.success(_("shutting down"))
        return self.result()


class _DatasetCommand(Command):
    """Shared body of the data set commands: read, validate, hand back the records."""

    expected_size = 1

    def execute(self, args: List[str], context: CommandContext) -> CommandResult:
        if args:
            self.syntax_error(context.output)
            return self.result([])
        if context.input is None:
            self.failure(_("no input stream"))
            return self.result([])

        dataset: List[List[int]] = []
        if not self.read_nodeset(context.input, dataset, self.expected_size, context.config):
            return self.result([])
        return self.result(self._to_data(dataset))

    @staticmethod
    def _to_data(dataset: List[List[int]]) -> List[Any]:
        return dataset


class ReadNodesCommand(_DatasetCommand):
    """
    Read and validate a node data set (one node ID per line).

    Syntax:
        read-nodes
        read-nodes < file
        read-nodes:            (data set follows)
    """

    name = "read-nodes"
    synopsis = "read-nodes {:|<}"
    help_text = _("Read a data set of node IDs, one per line, terminated by a\n"
                  "blank line, and echo the validated list.")
    expected_size = 1

    @property
    def return_type(self) -> ReturnType:
        return ReturnType.NODE_LIST

    @staticmethod
    def _to_data(dataset: List[List[int]]) -> List[int]:
        return [record[0] for record in dataset]


class ReadArcsCommand(_DatasetCommand):
    """
    Read and validate an arc data set (tail and head node ID per line).

    Syntax:
        read-arcs
        read-arcs < file
        read-arcs:             (data set follows)
    """

    name = "read-arcs"
    synopsis = "read-arcs {:|<}"
    help_text = _("Read a data set of arcs, two node IDs (tail, head) per line,\n"
                  "terminated by a blank line, and echo the validated list.")
    expected_size = 2

    @property
    def return_type(self) -> ReturnType:
        return ReturnType.ARC_LIST

    @staticmethod
    def _to_data(dataset: List[List[int]]) -> List[tuple]:
        return [(record[0], record[1]) for record in dataset]


BUILTIN_COMMANDS = (
    HelpCommand,
    QuitCommand,
    ReadNodesCommand,
    ReadArcsCommand,
)
