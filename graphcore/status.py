"""
    Status protocol — the outcome every command reports.

    Every command invocation produces exactly one ``StatusMessage``: a
    category (``CommandStatus``) plus a formatted detail text.  Rendered,
    a message is a single fixed prefix followed by the detail:

        OK.      <detail>     SUCCESS – the operation fully completed
        FAILED!  <detail>     FAILURE – well-formed request, could not be done
        ERROR!   <detail>     ERROR   – malformed input or data
        NONE.    <detail>     NONE    – nothing applicable was produced

    Messages are plain values; the "current" status of a command is just
    the last one it stored (see ``Command.set_status``).
"""
from dataclasses import dataclass
from enum import Enum

from .config import DEFAULT_CONFIG

MAX_STATUS_LENGTH = DEFAULT_CONFIG.max_status_length


class CommandStatus(Enum):
    SUCCESS = 0
    FAILURE = 1
    ERROR = 2
    NONE = 3


STATUS_PREFIXES = {
    CommandStatus.SUCCESS: "OK.",
    CommandStatus.FAILURE: "FAILED!",
    CommandStatus.ERROR: "ERROR!",
    CommandStatus.NONE: "NONE.",
}


@dataclass(frozen=True)
class StatusMessage:
    """
    Value object carrying one command outcome.

    Attributes:
        status: Outcome category.
        text:   Detail text, possibly multi-line, without the prefix.
    """
    status: CommandStatus
    text: str = ""

    @property
    def prefix(self) -> str:
        return STATUS_PREFIXES[self.status]

    @property
    def ok(self) -> bool:
        return self.status is CommandStatus.SUCCESS

    def render(self, max_length: int = MAX_STATUS_LENGTH) -> str:
        """Return ``"<PREFIX> <detail>"``, cut to at most ``max_length`` characters."""
        return f"{self.prefix} {self.text}"[:max_length]

    def __str__(self) -> str:
        return self.render()


def format_status(status: CommandStatus, template: str = "", *args) -> StatusMessage:
    """
    Build a ``StatusMessage`` from a %-style template.

    The template is only interpolated when arguments are given, so a
    literal ``%`` in an argument-less message is kept as is.

    Example:
        >>> str(format_status(CommandStatus.ERROR, "bad line %u", 3))
        'ERROR! bad line 3'
    """
    text = template % args if args else template
    return StatusMessage(status, text)


def success(template: str = "", *args) -> StatusMessage:
    return format_status(CommandStatus.SUCCESS, template, *args)


def failure(template: str = "", *args) -> StatusMessage:
    return format_status(CommandStatus.FAILURE, template, *args)


def error(template: str = "", *args) -> StatusMessage:
    return format_status(CommandStatus.ERROR, template, *args)


def none(template: str = "", *args) -> StatusMessage:
    return format_status(CommandStatus.NONE, template, *args)
