"""
    Dataset reader — collects fixed-arity records until a blank line.

    Design Pattern: Template Method
    ─────────────────────────────────
    ``DatasetReader.read`` owns the loop (number the line → read a record
    → classify → append or record the error); the record decoding step is
    chosen at construction time (node IDs or plain unsigned integers).

    Error policy:
        • the first bad line turns the whole read into an error and fixes
          the status message to that line number; later bad lines are
          only logged
        • after an error nothing more is collected and no records are
          returned
        • the loop still runs on to the terminating blank line so the
          stream is left at a known position
        • an over-long line is skipped whole and counts as a bad line
        • a stream failure ends the read at once
"""
import gettext
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TextIO

from ..config import CliConfig, DEFAULT_CONFIG
from ..status import CommandStatus, StatusMessage, format_status
from .exceptions import (
    LineTooLongError,
    RecordParseError,
    StreamReadError,
)
from .record_reader import read_node_id_record, read_uint_record

_ = gettext.gettext

logger = logging.getLogger(__name__)

Record = List[int]
RecordFunc = Callable[[TextIO, Optional[CliConfig]], Record]


@dataclass
class DatasetReadResult:
    """
    Outcome of one data set read.

    Attributes:
        ok:          True if no line was rejected.
        records:     Collected records; always empty when ``ok`` is False.
        error_line:  1-based number of the first rejected line, if any.
        lines_read:  Number of lines consumed, terminator included.
        status:      SUCCESS status, or the ERROR status naming ``error_line``.
    """
    ok: bool
    records: List[Record] = field(default_factory=list)
    error_line: Optional[int] = None
    lines_read: int = 0
    status: StatusMessage = field(
        default_factory=lambda: StatusMessage(CommandStatus.SUCCESS))


class DatasetReader:
    """
    Reads a data set of records of one fixed arity.

    Usage:
        reader = DatasetReader(expected_size=2)        # arcs
        result = reader.read(stream)
        if result.ok:
            arcs = result.records
    """

    def __init__(self, expected_size: int, node_ids: bool = True,
                 config: Optional[CliConfig] = None):
        """
        Args:
            expected_size: Required number of values per line
                           (1 for nodes, 2 for arcs).
            node_ids:      Reject the value 0 on every line.
            config:        Delimiters and line bound.
        """
        if expected_size < 1:
            raise ValueError(f"expected_size must be positive, got {expected_size}.")
        self._expected_size = expected_size
        self._config = config or DEFAULT_CONFIG
        self._read_record: RecordFunc = read_node_id_record if node_ids else read_uint_record

    @property
    def expected_size(self) -> int:
        return self._expected_size

    def read(self, stream: TextIO) -> DatasetReadResult:
        """
        Read records from ``stream`` up to the first blank line or end of stream.

        Never raises for bad data; every problem ends up in the result.
        """
        records: List[Record] = []
        result = DatasetReadResult(ok=True)
        lineno = 0

        while True:
            lineno += 1
            try:
                record = self._read_record(stream, self._config)
            except StreamReadError as exc:
                logger.debug("Data set line %d: %s", lineno, exc)
                self._fail(result, lineno)
                break
            except (RecordParseError, LineTooLongError) as exc:
                logger.debug("Data set line %d: %s", lineno, exc)
                self._fail(result, lineno)
                continue

            if not record:
                break
            if len(record) != self._expected_size:
                logger.debug("Data set line %d: expected %d value(s), got %d.",
                             lineno, self._expected_size, len(record))
                self._fail(result, lineno)
                continue
            if result.ok:
                records.append(record)

        result.lines_read = lineno
        if result.ok:
            result.records = records
            result.status = format_status(
                CommandStatus.SUCCESS, _("%u record(s) read"), len(records))
        return result

    @staticmethod
    def _fail(result: DatasetReadResult, lineno: int) -> None:
        """Record a rejected line; only the first one sets the status."""
        if not result.ok:
            return
        result.ok = False
        result.error_line = lineno
        result.status = format_status(
            CommandStatus.ERROR, _("error reading data set (line %u)"), lineno)


def read_dataset(stream: TextIO, expected_size: int, node_ids: bool = True,
                 config: Optional[CliConfig] = None) -> DatasetReadResult:
    """Convenience wrapper: ``DatasetReader(expected_size, ...).read(stream)``."""
    return DatasetReader(expected_size, node_ids, config).read(stream)
