from enum import Enum


class Shape(str, Enum):
    BOX = "box"
    ELLIPSE = "ellipse"

    def to_dot(self) -> str:
        return self.value


class FillStyle(str, Enum):
    FILLED = "filled"
    INVISIBLE = "invis"

    def to_dot(self) -> str:
        return self.value


class ColourScheme(str, Enum):
    """
    Graphviz qualitative colour schemes, see
    https://www.graphviz.org/doc/info/colors.html
    """

    DARK2_8 = "dark28"

    @property
    def size(self) -> int:
        return _SCHEME_SIZES[self]

    def to_dot(self) -> str:
        return self.value


_SCHEME_SIZES = {
    ColourScheme.DARK2_8: 8,
}

DEFAULT_SCHEME = ColourScheme.DARK2_8


# Attributes per node kind. Functions and legend entries additionally
# receive a fillcolor from the owner palette.
NODE_STYLE = {
    "data": {
        "shape": Shape.BOX,
    },
    "function": {
        "shape": Shape.ELLIPSE,
        "style": FillStyle.FILLED,
    },
    "legend": {
        "style": FillStyle.FILLED,
    },
}

LEGEND_LABEL = "Legend"
LEGEND_RANKDIR = "TB"
LEGEND_NODE_PREFIX = "legend_"
