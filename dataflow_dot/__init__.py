from dataflow_dot.compiler import compile_to_dot, write_dot, render_dot
from dataflow_dot.ir import DataArtifact, Function, DataflowGraph
from dataflow_dot.loader import load_graph

__all__ = [
    "compile_to_dot",
    "write_dot",
    "render_dot",
    "DataArtifact",
    "Function",
    "DataflowGraph",
    "load_graph",
]

__version__ = "0.1.0"
