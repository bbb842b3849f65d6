"""
    Tokenizer — splits a raw text line into delimiter-separated words.
"""
from typing import List

from ..config import DEFAULT_DELIMITERS


def split_string(line: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """
    Split ``line`` into the maximal runs of non-delimiter characters.

    Leading, trailing and repeated delimiters never produce empty tokens.

    Example:
        >>> split_string("1, 2\\t3  4")
        ['1', '2', '3', '4']
    """
    tokens: List[str] = []
    start = None
    for i, ch in enumerate(line):
        if ch in delimiters:
            if start is not None:
                tokens.append(line[start:i])
                start = None
        elif start is None:
            start = i
    if start is not None:
        tokens.append(line[start:])
    return tokens
