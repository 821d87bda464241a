import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List

from dataflow_dot.visual.visual_style import ColourScheme, DEFAULT_SCHEME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteColour:
    scheme: ColourScheme
    index: int  # 1-based, as Graphviz numbers scheme colours

    def to_dot(self) -> str:
        return f'"/{self.scheme.to_dot()}/{self.index}"'


def owner_roster(owners: Iterable[str]) -> List[str]:
    """Sorted, deduplicated owner names."""
    return sorted(set(owners))


def assign_colours(
    roster: List[str],
    scheme: ColourScheme = DEFAULT_SCHEME,
) -> Dict[str, PaletteColour]:
    """
    Map each owner to a palette colour by roster position.
    Wraps around when there are more owners than colours, so two
    owners can end up sharing a colour.
    """
    colours = {
        owner: PaletteColour(scheme, position % scheme.size + 1)
        for position, owner in enumerate(roster)
    }

    if len(roster) > scheme.size:
        logger.debug(
            "%d owners exceed the %d colours of %s; colours repeat",
            len(roster),
            scheme.size,
            scheme.value,
        )

    return colours
