# dataflow_dot/compiler/render_dot.py
"""
Graphviz DOT renderer for dataflow graphs.

Data artifacts become boxes and functions become filled ellipses coloured
by owner. A legend cluster lists every owner with its colour.

Docs: https://graphviz.org/doc/info/lang.html
"""

import logging
import re
from typing import Dict, Iterator, List, Tuple

from dataflow_dot.ir.dataflow import DataflowGraph, Function
from dataflow_dot.visual.palette import PaletteColour, owner_roster, assign_colours
from dataflow_dot.visual.visual_style import (
    ColourScheme,
    DEFAULT_SCHEME,
    FillStyle,
    NODE_STYLE,
    LEGEND_LABEL,
    LEGEND_NODE_PREFIX,
    LEGEND_RANKDIR,
)

logger = logging.getLogger(__name__)


# ============================================================
# DOT ID helper
# ============================================================

_BARE_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMERAL = re.compile(r"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)")
_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}


def dot_id(text: str) -> str:
    """
    Return text as a DOT ID.
    Plain identifiers and numerals pass through unchanged, anything
    else is emitted as an escaped double-quoted string.
    """
    if text.lower() not in _KEYWORDS and (
        _BARE_ID.fullmatch(text) or _NUMERAL.fullmatch(text)
    ):
        return text

    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def legend_id(owner: str, prefix: str = LEGEND_NODE_PREFIX) -> str:
    return dot_id(f"{prefix}{owner}")


def legend_prefix(graph: DataflowGraph, roster: List[str]) -> str:
    """
    Prefix for legend node IDs that no data or function name uses,
    so legend entries never merge with nodes of the graph itself.
    """
    names = {artifact.name for artifact in graph.data}
    for function in graph.functions:
        names.add(function.name)
        names.update(function.inputs)
        names.update(function.outputs)

    prefix = LEGEND_NODE_PREFIX
    while any(f"{prefix}{owner}" in names for owner in roster):
        prefix += "_"
    return prefix


def _attrs(pairs: List[Tuple[str, str]]) -> str:
    return "[" + ",".join(f"{key}={value}" for key, value in pairs) + "]"


def _style_attrs(kind: str) -> List[Tuple[str, str]]:
    return [(key, value.to_dot()) for key, value in NODE_STYLE[kind].items()]


# ============================================================
# DOT Diagram Builder
# ============================================================

class DotDiagram:
    """
    Deterministic DOT builder for a single render.
    Lines are produced lazily; the owner colours are fixed on construction.
    """

    def __init__(self, graph: DataflowGraph, scheme: ColourScheme = DEFAULT_SCHEME):
        self.graph = graph
        self.roster: List[str] = owner_roster(graph.owners())
        self.colours: Dict[str, PaletteColour] = assign_colours(self.roster, scheme)
        self.legend_prefix = legend_prefix(graph, self.roster)

    # ---------- data ----------

    def data_nodes(self) -> Iterator[str]:
        for artifact in self.graph.data:
            yield f"{dot_id(artifact.name)} {_attrs(_style_attrs('data'))}"

    # ---------- functions ----------

    def function_node(self, function: Function) -> str:
        attrs = _style_attrs("function")
        attrs.append(("fillcolor", self.colours[function.owner].to_dot()))
        return f"{dot_id(function.name)} {_attrs(attrs)}"

    def function_edges(self, function: Function) -> Iterator[str]:
        # Endpoints are not checked against declared nodes; Graphviz
        # creates a default node for any name it has not seen.
        name = dot_id(function.name)
        for source in function.inputs:
            yield f"{dot_id(source)} -> {name}"
        for target in function.outputs:
            yield f"{name} -> {dot_id(target)}"

    def functions(self) -> Iterator[str]:
        for function in self.graph.functions:
            yield self.function_node(function)
            yield from self.function_edges(function)

    # ---------- legend ----------

    def legend(self) -> Iterator[str]:
        yield "subgraph cluster_legend {"
        yield f'label="{LEGEND_LABEL}"'
        yield f"rankdir={LEGEND_RANKDIR}"

        for owner in self.roster:
            attrs = [("label", dot_id(owner))]
            attrs.extend(_style_attrs("legend"))
            attrs.append(("fillcolor", self.colours[owner].to_dot()))
            yield f"{legend_id(owner, self.legend_prefix)} {_attrs(attrs)}"

        # Invisible chain that stacks the legend entries vertically.
        if len(self.roster) > 1:
            chain = "->".join(legend_id(owner, self.legend_prefix) for owner in self.roster)
            yield f"{chain}{_attrs([('style', FillStyle.INVISIBLE.to_dot())])}"

        yield "}"

    # ---------- output ----------

    def lines(self) -> Iterator[str]:
        yield "digraph G {"
        yield from self.data_nodes()
        yield from self.functions()
        yield from self.legend()
        yield "}"


def render_dot(graph: DataflowGraph, scheme: ColourScheme = DEFAULT_SCHEME) -> Iterator[str]:
    """Render a DataflowGraph as DOT, one line at a time."""
    diagram = DotDiagram(graph, scheme)
    logger.debug(
        "Rendering %d data nodes, %d functions, %d owners",
        len(graph.data),
        len(graph.functions),
        len(diagram.roster),
    )
    return diagram.lines()
