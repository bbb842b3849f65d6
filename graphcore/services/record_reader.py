"""
    Record reader — one text line in, one validated integer record out.

    A record is the list of unsigned 32-bit integers found on a single
    line of a data set stream.  Two outcomes are possible:

        • a list of integers – possibly empty; ``[]`` means "no more
          records" (blank line or clean end of stream)
        • a ``RecordReadError`` – the line is unusable; nothing partial
          is ever returned

    Every token is checked with the strict digit-only validator before
    the permissive converter sees it.
"""
import re
from typing import List, Optional, TextIO, Tuple

from ..config import CliConfig, DEFAULT_CONFIG
from .exceptions import LineTooLongError, RecordParseError, StreamReadError
from .tokenizer import split_string

UINT32_MAX = 0xFFFFFFFF

_DIGITS_PATTERN = re.compile(r'[0-9]+')
_LEADING_UINT_PATTERN = re.compile(r'\s*\+?([0-9]*)')


def parse_uint(s: str) -> int:
    """
    Convert the leading decimal number of ``s`` to an integer.

    Permissive: leading whitespace and a ``+`` sign are skipped and
    conversion stops at the first non-digit, so ``"12a"`` gives 12 and
    ``"abc"`` gives 0.  Use ``is_valid_uint`` to reject such input.
    """
    digits = _LEADING_UINT_PATTERN.match(s).group(1)
    return int(digits) if digits else 0


def is_valid_uint(s: str) -> bool:
    """True if ``s`` is non-empty and made only of ASCII decimal digits."""
    return _DIGITS_PATTERN.fullmatch(s) is not None


def is_valid_node_id(s: str) -> bool:
    """True if ``s`` is a valid unsigned integer other than zero."""
    return is_valid_uint(s) and parse_uint(s) != 0


def _readline(stream: TextIO, limit: int) -> str:
    try:
        return stream.readline(limit)
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise StreamReadError(f"Stream read failed: {exc}") from exc


def _read_line(stream: TextIO, config: CliConfig) -> Optional[str]:
    """
    Read one raw line.  Returns None at a clean end of stream.

    A trailing ``"\\n"`` and then a trailing ``"\\r"`` are dropped, so
    ``"1 2\\r"`` at the end of a stream reads like ``"1 2\\r\\n"``.

    Raises:
        StreamReadError:  The stream failed.
        LineTooLongError: The line exceeds ``config.max_line_length``.
                          The rest of the line has been consumed.
    """
    # One character of slack for the newline, one for the carriage return.
    limit = config.max_line_length + 2
    raw = _readline(stream, limit)
    if raw == "":
        return None

    line = raw[:-1] if raw.endswith("\n") else raw
    if line.endswith("\r"):
        line = line[:-1]
    if len(line) > config.max_line_length:
        chunk = raw
        while chunk and not chunk.endswith("\n"):
            chunk = _readline(stream, limit)
        raise LineTooLongError(
            f"Line exceeds {config.max_line_length} characters.", line[:40]
        )
    return line


def _read_record(stream: TextIO, config: CliConfig) -> Tuple[str, List[int]]:
    """Read and decode one line; returns the line text with the record."""
    line = _read_line(stream, config)
    if line is None:
        return "", []

    tokens = split_string(line, config.delimiters)
    if line and not tokens:
        raise RecordParseError("Line consists only of delimiters.", line)

    record: List[int] = []
    for token in tokens:
        if not is_valid_uint(token):
            raise RecordParseError(f"Invalid unsigned integer: '{token}'.", line)
        value = parse_uint(token)
        if value > UINT32_MAX:
            raise RecordParseError(f"Value out of range: '{token}'.", line)
        record.append(value)
    return line, record


def read_uint_record(stream: TextIO, config: Optional[CliConfig] = None) -> List[int]:
    """
    Read one line from ``stream`` and decode it as a record of unsigned integers.

    Args:
        stream: Readable text stream; borrowed, never closed here.
        config: Delimiters and line bound; ``DEFAULT_CONFIG`` if omitted.

    Returns:
        The decoded values in line order.  ``[]`` for a blank line or a
        clean end of stream.

    Raises:
        RecordParseError: Delimiter-only line, non-digit token, or a value
                          that does not fit in 32 bits.
        StreamReadError:  The stream failed.
        LineTooLongError: The line is longer than the configured maximum.
    """
    _, record = _read_record(stream, config or DEFAULT_CONFIG)
    return record


def read_node_id_record(stream: TextIO, config: Optional[CliConfig] = None) -> List[int]:
    """
    Like ``read_uint_record``, and additionally reject the value 0.

    Raises:
        RecordParseError: Also when any value of the record is 0.
    """
    line, record = _read_record(stream, config or DEFAULT_CONFIG)
    if 0 in record:
        raise RecordParseError("Node ID 0 is not valid.", line)
    return record
