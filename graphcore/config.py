"""
    Interpreter configuration — delimiters, buffer bounds, shell settings.

    Provides a typed configuration object that controls how data set
    lines are tokenized and bounded, how long a rendered status message
    may grow, and how the interactive shell presents itself.
"""
from dataclasses import dataclass


DEFAULT_DELIMITERS = " \n\t,"


@dataclass
class CliConfig:
    """
    Top-level configuration for the command interpreter.

    Attributes:
        delimiters:         Characters separating tokens on a data set line.
        max_line_length:    Longest accepted data set line, newline excluded.
                            Longer lines are a hard read failure.
        max_status_length:  Hard cap for a rendered status message.
        prompt:             Prompt written before each command line
                            (empty string writes nothing).
        list_separator:     Separator used when rendering one record of a
                            structured list result.
    """
    delimiters: str = DEFAULT_DELIMITERS
    max_line_length: int = 1023
    max_status_length: int = 2047
    prompt: str = ""
    list_separator: str = ","

    def __post_init__(self):
        if not self.delimiters:
            raise ValueError("At least one delimiter character is required.")
        if self.max_line_length < 1:
            raise ValueError(f"max_line_length must be positive, got {self.max_line_length}.")
        if self.max_status_length < 1:
            raise ValueError(f"max_status_length must be positive, got {self.max_status_length}.")


DEFAULT_CONFIG = CliConfig()
