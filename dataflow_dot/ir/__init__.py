from dataflow_dot.ir.dataflow import DataArtifact, Function, DataflowGraph
from dataflow_dot.ir.errors import (
    DataflowError,
    InputNotFound,
    InputUnreadable,
    MalformedInput,
    OutputWriteFailed,
)

__all__ = [
    "DataArtifact",
    "Function",
    "DataflowGraph",
    "DataflowError",
    "InputNotFound",
    "InputUnreadable",
    "MalformedInput",
    "OutputWriteFailed",
]
