"""
    Shell — the read-eval loop hosting the command registry.

    Reads one command line at a time from the primary input, hands it to
    the ``CommandProcessor`` and stops at end of input or once a command
    has pulled the registry's quit latch.
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from ..config import CliConfig, DEFAULT_CONFIG
from .command_processor import CommandProcessor
from .registry import CommandRegistry, create_default_registry

logger = logging.getLogger(__name__)


def run_shell(registry: CommandRegistry, input: TextIO, output: TextIO,
              config: Optional[CliConfig] = None) -> int:
    """
    Process command lines from ``input`` until end of input or quit.

    Returns:
        Number of commands executed.
    """
    config = config or DEFAULT_CONFIG
    processor = CommandProcessor(registry, config)
    executed = 0

    while not registry.is_quit_requested():
        if config.prompt:
            output.write(config.prompt)
            output.flush()
        line = input.readline()
        if not line:
            logger.info("End of input.")
            break
        if not line.strip():
            continue
        processor.process(line, input, output)
        executed += 1

    return executed


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graphcore",
        description="Line-oriented command interpreter for node and arc data sets.",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log more (-v: info, -vv: debug); logs go to stderr",
    )
    parser.add_argument(
        "--prompt", default=DEFAULT_CONFIG.prompt,
        help="prompt written before each command line",
    )
    parser.add_argument(
        "--max-line-length", type=int, default=DEFAULT_CONFIG.max_line_length,
        help="longest accepted data set line (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point.  Returns the process exit code."""
    args = build_arg_parser().parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = CliConfig(prompt=args.prompt, max_line_length=args.max_line_length)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    with create_default_registry() as registry:
        try:
            run_shell(registry, sys.stdin, sys.stdout, config)
        except KeyboardInterrupt:
            logger.info("Interrupted.")
            return 130
    return 0
