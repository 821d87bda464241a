from typing import TextIO

from dataflow_dot.compiler.render_dot import render_dot, dot_id, legend_id, DotDiagram
from dataflow_dot.ir.dataflow import DataflowGraph
from dataflow_dot.ir.errors import OutputWriteFailed


def compile_to_dot(graph: DataflowGraph) -> str:
    return "\n".join(render_dot(graph)) + "\n"


def write_dot(graph: DataflowGraph, sink: TextIO) -> None:
    """
    Stream the rendered graph to sink line by line.
    Lines already written stay written if the sink fails part way.
    """
    try:
        for line in render_dot(graph):
            sink.write(line + "\n")
        sink.flush()
    except (OSError, ValueError) as exc:
        # ValueError covers unencodable characters and closed streams
        raise OutputWriteFailed(str(exc) or type(exc).__name__) from exc


__all__ = [
    "compile_to_dot",
    "write_dot",
    "render_dot",
    "dot_id",
    "legend_id",
    "DotDiagram",
]
