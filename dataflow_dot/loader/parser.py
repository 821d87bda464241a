import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dataflow_dot.config import INPUT_ENCODING
from dataflow_dot.ir.dataflow import DataflowGraph
from dataflow_dot.ir.errors import InputNotFound, InputUnreadable, MalformedInput

logger = logging.getLogger(__name__)

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


# ============================================================
# DECODERS
# ============================================================

def load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInput(f"parse failure: {exc}") from exc


def load_yaml(text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedInput(f"parse failure: {exc}") from exc


def detect_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        return "json"
    if suffix in YAML_SUFFIXES:
        return "yaml"

    # YAML accepts JSON documents as well
    logger.debug("Unrecognised suffix %r for %s, decoding as YAML", suffix, path)
    return "yaml"


# ============================================================
# GRAPH PARSER
# ============================================================

def _describe_errors(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<document>"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


def parse_graph(raw: Any) -> DataflowGraph:
    """Build a DataflowGraph from decoded JSON/YAML data."""
    try:
        return DataflowGraph.model_validate(raw)
    except ValidationError as exc:
        raise MalformedInput(f"parse failure: {_describe_errors(exc)}") from exc


def parse_text(text: str, fmt: str = "json") -> DataflowGraph:
    if fmt == "json":
        raw = load_json(text)
    elif fmt == "yaml":
        raw = load_yaml(text)
    else:
        raise ValueError(f"unknown input format: {fmt}")

    return parse_graph(raw)


def load_graph(path: Path) -> DataflowGraph:
    """Read and decode a dataflow specification file."""
    path = Path(path)
    if not path.exists():
        raise InputNotFound(path)

    try:
        text = path.read_text(encoding=INPUT_ENCODING)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise InputUnreadable(path, str(exc)) from exc

    fmt = detect_format(path)
    graph = parse_text(text, fmt)

    logger.info(
        "Loaded %s (%s): %d data, %d functions",
        path,
        fmt,
        len(graph.data),
        len(graph.functions),
    )
    return graph
