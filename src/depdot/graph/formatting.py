"""Visual attributes for DOT node declarations."""

import re
from dataclasses import dataclass
from enum import Enum

MAX_COLOR_VALUE = 255

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class Shape(str, Enum):
    """Graphviz node shapes."""
    BOX = "box"
    POLYGON = "polygon"
    ELLIPSE = "ellipse"
    OVAL = "oval"
    CIRCLE = "circle"
    POINT = "point"
    EGG = "egg"
    TRIANGLE = "triangle"
    PLAINTEXT = "plaintext"
    PLAIN = "plain"
    DIAMOND = "diamond"
    TRAPEZIUM = "trapezium"
    PARALLELOGRAM = "parallelogram"
    HOUSE = "house"
    PENTAGON = "pentagon"
    HEXAGON = "hexagon"
    SEPTAGON = "septagon"
    OCTAGON = "octagon"
    DOUBLECIRCLE = "doublecircle"
    DOUBLEOCTAGON = "doubleoctagon"
    TRIPLEOCTAGON = "tripleoctagon"
    INVTRIANGLE = "invtriangle"
    INVTRAPEZIUM = "invtrapezium"
    INVHOUSE = "invhouse"
    MDIAMOND = "Mdiamond"
    MSQUARE = "Msquare"
    MCIRCLE = "Mcircle"
    RECT = "rect"
    RECTANGLE = "rectangle"
    SQUARE = "square"
    STAR = "star"
    NONE = "none"
    UNDERLINE = "underline"
    CYLINDER = "cylinder"
    NOTE = "note"
    TAB = "tab"
    FOLDER = "folder"
    BOX3D = "box3d"
    COMPONENT = "component"


class Style(str, Enum):
    """Graphviz node styles."""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    ROUNDED = "rounded"
    DIAGONALS = "diagonals"
    FILLED = "filled"
    STRIPED = "striped"
    WEDGED = "wedged"


@dataclass(frozen=True)
class Color:
    """A ``#rrggbb`` colour."""
    value: str

    def __post_init__(self):
        if not _HEX_COLOR.match(self.value):
            raise ValueError(f"Color must be of the form #rrggbb, got: {self.value!r}")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        return cls(value.lower())

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> "Color":
        """Build a colour from three channel values in ``0..MAX_COLOR_VALUE``."""
        for channel_name, channel in (("red", red), ("green", green), ("blue", blue)):
            if not 0 <= channel <= MAX_COLOR_VALUE:
                raise ValueError(f"{channel_name} must be between 0-{MAX_COLOR_VALUE}, got: {channel}")
        return cls(f"#{red:02x}{green:02x}{blue:02x}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GraphFormattingOptions:
    """Optional shape, style and colour of a node. Unset fields are omitted."""
    shape: Shape | None = None
    style: Style | None = None
    color: Color | None = None

    def merge(self, fallback: "GraphFormattingOptions") -> "GraphFormattingOptions":
        """Return options where fields unset here are taken from ``fallback``."""
        return GraphFormattingOptions(
            shape=self.shape if self.shape is not None else fallback.shape,
            style=self.style if self.style is not None else fallback.style,
            color=self.color if self.color is not None else fallback.color,
        )


EMPTY_FORMATTING = GraphFormattingOptions()


@dataclass(frozen=True)
class Header:
    """Graph-level label rendered above the graph."""
    text: str
    font_size: int = 24
    height: int = 5
    label_location: str = "t"
    label_justification: str = "c"

    def __post_init__(self):
        if self.font_size < 1:
            raise ValueError(f"font_size must be >= 1, got: {self.font_size}")
        if self.height < 0:
            raise ValueError(f"height must be >= 0, got: {self.height}")
        if self.label_location not in ("t", "b", "c"):
            raise ValueError(f"label_location must be one of t, b, c, got: {self.label_location}")
        if self.label_justification not in ("l", "r", "c"):
            raise ValueError(f"label_justification must be one of l, r, c, got: {self.label_justification}")


def resolve_formatting(
    default: GraphFormattingOptions,
    override: GraphFormattingOptions | None,
) -> GraphFormattingOptions:
    """Resolve the attributes of a node occurrence.

    Fields set by the per-node ``override`` win; the remaining fields fall
    back to the class ``default``. Fields absent from both stay unset.
    """
    if override is None:
        return default
    return override.merge(default)
