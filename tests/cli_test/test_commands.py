# tests/cli_test/test_commands.py
"""
Command abstraction and built-in command tests.
"""
import io

import pytest

from graphcore.cli.commands import (
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
from graphcore.status import CommandStatus, StatusMessage
from tests.conftest import StubCommand, stream


def _context(registry=None, text=None, output=None):
    return CommandContext(
        registry=registry,
        input=stream(text) if text is not None else None,
        output=output if output is not None else io.StringIO(),
    )


# ═════════════════════════════════════════════════════════════════
#  CommandResult / ReturnType
# ═════════════════════════════════════════════════════════════════

class TestCommandResult:

    def test_default_fields(self):
        r = CommandResult(StatusMessage(CommandStatus.SUCCESS, "ok"))
        assert r.success is True
        assert r.status is CommandStatus.SUCCESS
        assert r.return_type is ReturnType.NONE
        assert r.data is None
        assert r.echoed is False

    def test_failure_is_not_success(self):
        r = CommandResult(StatusMessage(CommandStatus.FAILURE, "no"))
        assert r.success is False

    def test_list_shapes(self):
        assert ReturnType.ARC_LIST.is_list
        assert ReturnType.NODE_LIST.is_list
        assert not ReturnType.OTHER.is_list
        assert not ReturnType.NONE.is_list


# ═════════════════════════════════════════════════════════════════
#  Command base
# ═════════════════════════════════════════════════════════════════

class TestCommandBase:

    def test_is_abstract(self):
        with pytest.raises(TypeError):
            Command()

    def test_default_synopsis_is_name(self):
        assert StubCommand("list").get_synopsis() == "list"

    def test_default_help_text(self):
        assert StubCommand("list").get_help_text() == "Help text for list."

    def test_no_status_before_first_execution(self):
        cmd = StubCommand()
        assert cmd.status_message is None
        assert cmd.result().status is CommandStatus.NONE

    def test_status_is_overwritten_not_appended(self):
        cmd = StubCommand()
        cmd.success("loaded %d", 3)
        cmd.failure("node %d not found", 7)
        assert cmd.status_message == StatusMessage(CommandStatus.FAILURE, "node 7 not found")
        assert str(cmd.status_message) == "FAILED! node 7 not found"

    def test_each_category_setter(self):
        cmd = StubCommand()
        assert cmd.success().status is CommandStatus.SUCCESS
        assert cmd.failure().status is CommandStatus.FAILURE
        assert cmd.error().status is CommandStatus.ERROR
        assert cmd.none().status is CommandStatus.NONE
        assert cmd.status_message.status is CommandStatus.NONE

    def test_result_carries_current_status_and_shape(self):
        cmd = StubCommand(return_type=ReturnType.NODE_LIST)
        cmd.success("done")
        r = cmd.result([1, 2])
        assert r.message == cmd.status_message
        assert r.return_type is ReturnType.NODE_LIST
        assert r.data == [1, 2]

    def test_release_default_is_noop(self):
        HelpCommand().release()


class TestSyntaxError:

    def test_other_command_echoes_to_output(self):
        cmd = StubCommand("draw", ReturnType.OTHER, synopsis="draw NODE")
        out = io.StringIO()
        msg = cmd.syntax_error(out)
        assert msg.status is CommandStatus.ERROR
        assert out.getvalue() == "ERROR! Syntax: draw NODE\n"
        assert cmd.result().echoed is True

    def test_other_command_defaults_to_stdout(self, capsys):
        StubCommand("draw", ReturnType.OTHER).syntax_error()
        assert capsys.readouterr().out == "ERROR! Syntax: draw\n"

    @pytest.mark.parametrize("shape", [ReturnType.ARC_LIST, ReturnType.NODE_LIST, ReturnType.NONE])
    def test_non_other_commands_do_not_echo(self, shape):
        cmd = StubCommand("x", shape)
        out = io.StringIO()
        msg = cmd.syntax_error(out)
        assert out.getvalue() == ""
        assert str(msg) == "ERROR! Syntax: x"
        assert cmd.result().echoed is False

    def test_next_status_clears_echo_flag(self):
        cmd = StubCommand()
        cmd.syntax_error(io.StringIO())
        cmd.success()
        assert cmd.result().echoed is False


class TestReadNodeset:

    def test_success_extends_dataset(self):
        cmd = StubCommand()
        dataset = []
        assert cmd.read_nodeset(stream("1 2\n3 4\n\n"), dataset, 2) is True
        assert dataset == [[1, 2], [3, 4]]
        assert cmd.status_message.status is CommandStatus.SUCCESS

    def test_error_leaves_dataset_untouched(self):
        cmd = StubCommand()
        dataset = [[9]]
        assert cmd.read_nodeset(stream("1\nx\n2\n\n"), dataset, 1) is False
        assert dataset == [[9]]
        assert str(cmd.status_message) == "ERROR! error reading data set (line 2)"

    def test_zero_node_id_rejected(self):
        cmd = StubCommand()
        assert cmd.read_nodeset(stream("0\n\n"), [], 1) is False


# ═════════════════════════════════════════════════════════════════
#  BUILT-INS
# ═════════════════════════════════════════════════════════════════

class TestHelpCommand:

    def test_lists_synopses_in_registration_order(self, default_registry):
        r = HelpCommand().execute([], _context(default_registry))
        assert r.success is True
        assert r.message.text == (
            "available commands:\n"
            "help [COMMAND]\n"
            "quit\n"
            "read-nodes {:|<}\n"
            "read-arcs {:|<}"
        )

    def test_help_for_one_command(self, default_registry):
        r = HelpCommand().execute(["read-arcs"], _context(default_registry))
        assert r.success is True
        assert r.message.text.startswith("read-arcs {:|<}\n")
        assert "two node IDs" in r.message.text

    def test_help_for_unknown_command(self, default_registry):
        r = HelpCommand().execute(["nope"], _context(default_registry))
        assert r.status is CommandStatus.FAILURE
        assert r.message.text == "unknown command: nope"

    def test_too_many_arguments(self, default_registry):
        out = io.StringIO()
        r = HelpCommand().execute(["a", "b"], _context(default_registry, output=out))
        assert r.status is CommandStatus.ERROR
        assert r.echoed is True
        assert out.getvalue() == "ERROR! Syntax: help [COMMAND]\n"

    def test_without_registry(self):
        r = HelpCommand().execute([], _context())
        assert r.status is CommandStatus.NONE

    def test_return_type(self):
        assert HelpCommand().return_type is ReturnType.OTHER


class TestQuitCommand:

    def test_sets_quit_latch(self, registry):
        r = QuitCommand().execute([], _context(registry))
        assert r.success is True
        assert registry.is_quit_requested() is True

    def test_arguments_are_a_syntax_error(self, registry):
        r = QuitCommand().execute(["now"], _context(registry))
        assert r.status is CommandStatus.ERROR
        assert registry.is_quit_requested() is False

    def test_return_type(self):
        assert QuitCommand().return_type is ReturnType.NONE


class TestReadNodesCommand:

    def test_reads_node_list(self):
        r = ReadNodesCommand().execute([], _context(text="5\n6\n\n"))
        assert r.success is True
        assert r.return_type is ReturnType.NODE_LIST
        assert r.data == [5, 6]
        assert r.message.text == "2 record(s) read"

    def test_zero_node_id(self):
        r = ReadNodesCommand().execute([], _context(text="5\n0\n\n"))
        assert r.status is CommandStatus.ERROR
        assert r.data == []

    def test_arc_line_in_node_set(self):
        r = ReadNodesCommand().execute([], _context(text="5 6\n\n"))
        assert r.message.text == "error reading data set (line 1)"


class TestReadArcsCommand:

    def test_reads_arc_list(self):
        r = ReadArcsCommand().execute([], _context(text="1 2\n3,4\n\n"))
        assert r.success is True
        assert r.return_type is ReturnType.ARC_LIST
        assert r.data == [(1, 2), (3, 4)]

    def test_bad_arity(self):
        r = ReadArcsCommand().execute([], _context(text="1 2\n3\n\n"))
        assert r.status is CommandStatus.ERROR
        assert r.data == []
        assert r.message.text == "error reading data set (line 2)"

    def test_arguments_are_a_syntax_error_without_echo(self):
        out = io.StringIO()
        r = ReadArcsCommand().execute(["x"], _context(text="1 2\n\n", output=out))
        assert r.status is CommandStatus.ERROR
        assert r.message.text == "Syntax: read-arcs {:|<}"
        assert r.echoed is False
        assert out.getvalue() == ""

    def test_no_input_stream(self):
        r = ReadArcsCommand().execute([], _context())
        assert r.status is CommandStatus.FAILURE


def test_builtin_names_are_unique():
    names = [cls.name for cls in BUILTIN_COMMANDS]
    assert len(names) == len(set(names))
