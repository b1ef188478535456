import math
from typing import List

from maplayout.errors import InvalidScaleError
from maplayout.logger import logger
from maplayout.project_types import CanvasSize, GeoSize
from maplayout.scale import CANVAS_UNITS_PER_INCH, REFERENCE_CANVAS_INCHES

# TODO: choose the reference canvas depending on the selected paper format
REFERENCE_CANVAS = CanvasSize(
    REFERENCE_CANVAS_INCHES * CANVAS_UNITS_PER_INCH,
    REFERENCE_CANVAS_INCHES * CANVAS_UNITS_PER_INCH,
)

# Scales offered to the user alongside a computed one
STANDARD_SCALES: List[int] = [
    1,
    2,
    5,
    10,
    25,
    50,
    100,
    250,
    500,
    1000,
    2500,
    5000,
    10000,
]


def calc_map_scale(geo_size: GeoSize, canvas_size: CanvasSize) -> float:
    """
    Scale (meters per canvas unit) at which the whole ground extent fits the
    canvas on both axes. Returns 0.0, meaning it can't be computed, for a
    zero-area ground size or a canvas without area.
    """
    if canvas_size.width <= 0 or canvas_size.height <= 0 or geo_size.area == 0:
        return 0.0

    scale = max(
        geo_size.width / canvas_size.width, geo_size.height / canvas_size.height
    )
    logger.debug(
        f"Scale for {geo_size.width:.2f}m x {geo_size.height:.2f}m on "
        f"{canvas_size.width:.0f} x {canvas_size.height:.0f}: {scale:.4f}"
    )
    return scale


def calc_map_size(scale: float, geo_size: GeoSize) -> CanvasSize:
    """Canvas size of the ground extent drawn at the given scale"""
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidScaleError(f"Scale must be a positive number, got {scale}")

    width = geo_size.width / scale
    height = geo_size.height / scale
    if not (math.isfinite(width) and math.isfinite(height)):
        raise InvalidScaleError(f"Scale {scale} is too small to size the map")
    return CanvasSize(width, height)


def scale_choices(scale: float) -> List[int]:
    choices = set(STANDARD_SCALES)
    if math.isfinite(scale) and scale > 0:
        choices.add(max(1, round(scale)))
    return sorted(choices)
