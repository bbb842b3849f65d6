# tests/conftest.py
"""
Shared test fixtures.
In-memory streams, a configurable stub command and registries.
"""
import io
from typing import List

import pytest

from graphcore.cli.commands import Command, CommandContext, CommandResult, ReturnType
from graphcore.cli.registry import CommandRegistry, create_default_registry
from graphcore.config import CliConfig


class StubCommand(Command):
    """Concrete Command for testing purposes; records its invocations."""

    def __init__(self, name: str = "stub", return_type: ReturnType = ReturnType.OTHER,
                 synopsis: str = None):
        super().__init__()
        self.name = name
        self.synopsis = synopsis
        self._return_type = return_type
        self.calls: List[List[str]] = []
        self.released = 0

    @property
    def return_type(self) -> ReturnType:
        return self._return_type

    def execute(self, args: List[str], context: CommandContext) -> CommandResult:
        self.calls.append(list(args))
        self.success("ran %s", self.name)
        return self.result()

    def release(self) -> None:
        self.released += 1


class FailingStream(io.StringIO):
    """Text stream whose reads fail after ``good_lines`` lines."""

    def __init__(self, text: str = "", good_lines: int = 0):
        super().__init__(text)
        self._good_lines = good_lines

    def readline(self, *args):
        if self._good_lines <= 0:
            raise OSError("device not ready")
        self._good_lines -= 1
        return super().readline(*args)


def stream(text: str) -> io.StringIO:
    return io.StringIO(text)


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def registry() -> CommandRegistry:
    """Empty registry."""
    return CommandRegistry()


@pytest.fixture
def default_registry() -> CommandRegistry:
    """Registry holding the built-in commands."""
    return create_default_registry()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def small_config() -> CliConfig:
    """Configuration with a tiny line bound for overflow tests."""
    return CliConfig(max_line_length=5)
