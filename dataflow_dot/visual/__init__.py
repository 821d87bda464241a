# Styling vocabulary and owner palette for rendered dataflow graphs

from dataflow_dot.visual.visual_style import (
    Shape,
    FillStyle,
    ColourScheme,
    DEFAULT_SCHEME,
    NODE_STYLE,
)
from dataflow_dot.visual.palette import PaletteColour, owner_roster, assign_colours

__all__ = [
    "Shape",
    "FillStyle",
    "ColourScheme",
    "DEFAULT_SCHEME",
    "NODE_STYLE",
    "PaletteColour",
    "owner_roster",
    "assign_colours",
]
