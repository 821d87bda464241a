"""CLI entrypoint: render a dataflow specification as Graphviz DOT.

    dataflow-dot -i samples/sample.json | dot -Tsvg > sample.svg
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from dataflow_dot.compiler import write_dot
from dataflow_dot.config import LOG_LEVEL
from dataflow_dot.ir.errors import DataflowError, OutputWriteFailed
from dataflow_dot.loader import load_graph
from dataflow_dot.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _silence_stdout() -> None:
    # The reader has gone away; point stdout at devnull so the
    # interpreter's final flush does not raise again.
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass
    finally:
        os.close(devnull)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dataflow-dot",
        description="Render a dataflow specification (JSON or YAML) as Graphviz DOT",
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        type=Path,
        help="Path to file containing dataflow specification",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else LOG_LEVEL.upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"error: unknown log level in DATAFLOW_LOG_LEVEL: {LOG_LEVEL!r}", file=sys.stderr)
        return 1
    configure_logging(level=level)

    try:
        graph = load_graph(args.input)
        write_dot(graph, sys.stdout)
    except OutputWriteFailed as exc:
        _silence_stdout()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except DataflowError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
