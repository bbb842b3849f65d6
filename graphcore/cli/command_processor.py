"""
    CommandProcessor — parses raw command lines and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – splits the line into command word, arguments and
                      redirections.
    • Invoker       – resolves the command in the registry and runs it
                      with a ``CommandContext``.
    • Facade        – single ``process(line, input, output)`` entry-point
                      hides parsing, redirection and rendering.

    Line syntax:
        <command> [args...] [< infile] [> outfile]   # comment
        <command>: [args...]                         data set follows

    Without ``< infile`` a data set command reads from the primary input,
    i.e. the lines following the command line up to the first blank line.
"""
from __future__ import annotations

import gettext
import logging
import shlex
from contextlib import ExitStack
from dataclasses import dataclass
from typing import List, Optional, TextIO

from ..config import CliConfig, DEFAULT_CONFIG
from ..status import CommandStatus, StatusMessage, format_status
from .commands import CommandContext, CommandResult
from .registry import CommandRegistry

_ = gettext.gettext

logger = logging.getLogger(__name__)


@dataclass
class ParsedLine:
    """A command line split into its parts."""
    name: str
    args: List[str]
    input_file: Optional[str] = None
    output_file: Optional[str] = None
    data_follows: bool = False


class CommandProcessor:
    """
    Parses a command line, runs the named command and renders its result.

    Usage from the hosting loop:
        processor = CommandProcessor(registry)
        result = processor.process("read-arcs < arcs.txt", sys.stdin, sys.stdout)
    """

    def __init__(self, registry: CommandRegistry, config: Optional[CliConfig] = None):
        self._registry = registry
        self._config = config or DEFAULT_CONFIG

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    # ── Public API ───────────────────────────────────────────────

    def process(self, line: str, input: TextIO, output: TextIO) -> CommandResult:
        """
        Parse and execute a single command line.

        Args:
            line:   Raw command line.
            input:  Primary input; data set lines are read from here
                    unless the line redirects input.
            output: Primary output; the status line always goes here.

        Returns:
            The ``CommandResult``, already rendered to ``output``.
        """
        text = self._strip_comments(line).strip()
        if not text:
            return CommandResult(StatusMessage(CommandStatus.NONE, _("empty command")), echoed=True)

        try:
            parsed = self._parse(text)
        except ValueError as e:
            result = CommandResult(format_status(CommandStatus.ERROR, "%s", e))
            self.render(result, output)
            return result

        command = self._registry.find(parsed.name)
        if command is None:
            logger.warning("Unknown command '%s'.", parsed.name)
            result = CommandResult(
                format_status(CommandStatus.FAILURE, _("unknown command: %s"), parsed.name))
            self.render(result, output)
            return result

        with ExitStack() as stack:
            try:
                data_input = input
                if parsed.input_file is not None:
                    data_input = stack.enter_context(open(parsed.input_file, encoding="utf-8"))
                data_output = output
                if parsed.output_file is not None:
                    data_output = stack.enter_context(
                        open(parsed.output_file, "w", encoding="utf-8"))
            except OSError as e:
                result = CommandResult(
                    format_status(CommandStatus.FAILURE, _("cannot open %s: %s"),
                                  e.filename, e.strerror),
                    command.return_type,
                )
                self.render(result, output)
                return result

            context = CommandContext(self._registry, data_input, data_output, self._config)
            result = self._execute(command, parsed, context)
            self.render(result, output, data_output)
        return result

    def render(self, result: CommandResult, output: TextIO,
               data_output: Optional[TextIO] = None) -> None:
        """
        Write the status line to ``output`` and, for successful list
        results, the records to ``data_output`` (one per line, then a
        blank line).
        """
        if not result.echoed:
            output.write(result.message.render(self._config.max_status_length) + "\n")
        if result.return_type.is_list and result.success:
            out = data_output if data_output is not None else output
            separator = self._config.list_separator
            for record in result.data or []:
                if isinstance(record, (tuple, list)):
                    out.write(separator.join(str(value) for value in record) + "\n")
                else:
                    out.write(f"{record}\n")
            out.write("\n")
        output.flush()

    # ── Execution engine ─────────────────────────────────────────

    def _execute(self, command, parsed: ParsedLine, context: CommandContext) -> CommandResult:
        """Run a resolved command; a crash becomes an ERROR result."""
        logger.debug("Executing '%s' with %r.", parsed.name, parsed.args)
        try:
            return command.execute(parsed.args, context)
        except Exception as e:
            logger.exception("Command '%s' failed.", parsed.name)
            message = command.error(_("internal error in %s: %s"), parsed.name, e)
            return CommandResult(message, command.return_type)

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.

        Example:
            >>> CommandProcessor._strip_comments("read-arcs < 'a#1.txt'  # arcs")
            "read-arcs < 'a#1.txt'"
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> ParsedLine:
        """
        Split a command line into name, arguments and redirections.

        Raises:
            ValueError: Missing redirection target, repeated redirection,
                        or no command word.
        """
        try:
            tokens = shlex.split(text)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            tokens = text.split()

        input_file, tokens = self._extract_redirect(tokens, "<")
        output_file, tokens = self._extract_redirect(tokens, ">")

        if not tokens:
            raise ValueError(_("missing command name"))

        name = tokens[0]
        # "cmd:" and "cmd" both read from the primary input; the colon only
        # excludes "<" and marks the data set in transcripts.
        data_follows = False
        if name.endswith(":") and len(name) > 1:
            name = name[:-1]
            data_follows = True
        if data_follows and input_file is not None:
            raise ValueError(_("cannot combine ':' with input redirection"))

        return ParsedLine(name, tokens[1:], input_file, output_file, data_follows)

    @staticmethod
    def _extract_redirect(tokens: List[str], marker: str):
        """
        Remove ``<marker> file`` or ``<marker>file`` from the token list.
        Returns (filename or None, remaining_tokens).
        """
        remaining: List[str] = []
        found: Optional[str] = None
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.startswith(marker):
                if found is not None:
                    raise ValueError(_("more than one '%s' redirection") % marker)
                target = token[len(marker):]
                if not target:
                    if i + 1 >= len(tokens):
                        raise ValueError(_("missing file name after '%s'") % marker)
                    target = tokens[i + 1]
                    i += 1
                found = target
            else:
                remaining.append(token)
            i += 1
        return found, remaining
