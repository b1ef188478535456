import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, Optional, Tuple, Union

from shapely.geometry import Polygon, box
from shapely.geometry.base import BaseGeometry

from maplayout.scale import CANVAS_UNITS_PER_INCH, SQ_CANVAS_UNITS_PER_SQ_INCH

Lon = float
Lat = float
LatLon = Tuple[Lat, Lon]
PageCounts = Tuple[int, int]

UNKNOWN_PAGE_COUNTS: PageCounts = (-1, -1)


def _check_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite non-negative number, got {value}")


class Orientation(Enum):
    """Physical orientation of the printed page"""

    PORTRAIT = auto()
    LANDSCAPE = auto()

    @classmethod
    def parse(cls, value: Union[str, "Orientation"]) -> "Orientation":
        if isinstance(value, Orientation):
            return value
        key = (value or "").strip().lower()
        # "vertical" is how saved settings name the rotated page
        if key in ("landscape", "vertical"):
            return cls.LANDSCAPE
        if key == "portrait":
            return cls.PORTRAIT
        raise ValueError(f"Unknown orientation: {value!r}")


class LayoutFailure(Enum):
    UNRESOLVABLE_GEOMETRY = auto()
    INVALID_SCALE = auto()
    OVERSIZE_LAYOUT = auto()
    NO_TEMPLATE = auto()


@dataclass(frozen=True)
class GeoSize:
    """Ground-plane size of a map extent, in meters"""

    width: float
    height: float

    def __post_init__(self):
        _check_non_negative("width", self.width)
        _check_non_negative("height", self.height)

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class CanvasSize:
    """Layout canvas size in canvas units (1/100 inch)"""

    width: float
    height: float

    def __post_init__(self):
        _check_non_negative("width", self.width)
        _check_non_negative("height", self.height)

    @property
    def width_inches(self) -> float:
        return self.width / CANVAS_UNITS_PER_INCH

    @property
    def height_inches(self) -> float:
        return self.height / CANVAS_UNITS_PER_INCH

    @property
    def area_sq_inches(self) -> float:
        return self.width * self.height / SQ_CANVAS_UNITS_PER_SQ_INCH

    def transposed(self) -> "CanvasSize":
        return CanvasSize(self.height, self.width)


@dataclass(frozen=True)
class PaperSize:
    """Physical paper size in canvas units, as printed in portrait"""

    name: str
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Paper size {self.name!r} must be positive, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class MapExtent:
    """Bounding box of the map view, corners given as (latitude, longitude)"""

    bottom_left: LatLon
    top_right: LatLon

    @property
    def min_lat(self) -> Lat:
        return self.bottom_left[0]

    @property
    def min_lon(self) -> Lon:
        return self.bottom_left[1]

    @property
    def max_lat(self) -> Lat:
        return self.top_right[0]

    @property
    def max_lon(self) -> Lon:
        return self.top_right[1]

    @classmethod
    def from_geometry(cls, geometry: BaseGeometry) -> "MapExtent":
        """Extent covering the bounds of a lon/lat shapely geometry"""
        if geometry.is_empty:
            raise ValueError("Cannot take the extent of an empty geometry")
        min_lon, min_lat, max_lon, max_lat = geometry.bounds
        return cls(bottom_left=(min_lat, min_lon), top_right=(max_lat, max_lon))

    def to_polygon(self) -> Polygon:
        return box(self.min_lon, self.min_lat, self.max_lon, self.max_lat)


@dataclass(frozen=True)
class LayoutTemplate:
    """A saved layout the user can pick instead of building a new one"""

    name: str
    filename: str


@dataclass(frozen=True)
class PrinterContext:
    """Printer the layout is prepared for, with any formats only it supports"""

    name: str = ""
    paper_sizes: Dict[str, PaperSize] = field(default_factory=dict)


class LayoutConfig:
    def __init__(
        self,
        extent: MapExtent | None,
        scale: float,
        paper_format: str,
        orientation: Union[str, Orientation] = Orientation.PORTRAIT,
        is_new_layout: bool = True,
        template: LayoutTemplate | None = None,
        printer: PrinterContext | None = None,
    ):
        if not paper_format:
            raise ValueError("paper_format is required")
        if template is not None and not isinstance(template, LayoutTemplate):
            raise ValueError("template must be a LayoutTemplate or None")

        # scale is user input and is checked during validation
        self.extent = extent
        self.scale = scale
        self.paper_format = paper_format
        self.orientation = Orientation.parse(orientation)
        self.is_new_layout = is_new_layout
        self.template = template
        self.printer = printer

    def __repr__(self) -> str:
        return (
            f"LayoutConfig(extent={self.extent!r}, scale={self.scale!r}, "
            f"paper_format={self.paper_format!r}, orientation={self.orientation.name}, "
            f"is_new_layout={self.is_new_layout}, template={self.template!r})"
        )


@dataclass(frozen=True)
class LayoutResult:
    """
    Outcome of validating a layout.

    Page counts are None when they were not computed and (-1, -1) when the
    paper format is unknown. An oversized new layout still carries its page
    counts so they can be shown next to the error.
    """

    is_valid: bool
    is_new_layout: bool
    page_count_x: Optional[int] = None
    page_count_y: Optional[int] = None
    canvas_size: Optional[CanvasSize] = None
    failure: Optional[LayoutFailure] = None

    @property
    def page_counts(self) -> Optional[PageCounts]:
        if self.page_count_x is None or self.page_count_y is None:
            return None
        return (self.page_count_x, self.page_count_y)

    @property
    def paper_format_known(self) -> bool:
        return self.page_counts not in (None, UNKNOWN_PAGE_COUNTS)

    @property
    def message(self) -> Optional[str]:
        if self.is_valid:
            return None
        if self.is_new_layout:
            return "Invalid layout size."
        return "No template is selected."


@dataclass(frozen=True)
class FitResult:
    scale: Optional[int] = None
    exact_scale: Optional[float] = None
    failure: Optional[LayoutFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.scale is not None


@dataclass(frozen=True)
class LayoutSelection:
    """Settings produced by accepting a valid layout, for the caller to store"""

    paper_format: str
    orientation: Orientation
    template_filename: str
    extent: MapExtent | None
    scale: float
    page_count_x: Optional[int]
    page_count_y: Optional[int]
