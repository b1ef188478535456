import math
from typing import Optional

from maplayout.logger import logger
from maplayout.project_types import (
    UNKNOWN_PAGE_COUNTS,
    CanvasSize,
    Orientation,
    PageCounts,
    PaperSize,
)

# Ratios this close to a whole number are treated as exact
RATIO_TOLERANCE = 1e-9


def _pages_needed(length: float, page_length: float) -> int:
    if length <= 0:
        return 0
    ratio = length / page_length
    nearest = round(ratio)
    if nearest >= 1 and abs(ratio - nearest) <= RATIO_TOLERANCE:
        return int(nearest)
    return max(1, math.ceil(ratio))


def calc_page_count(
    canvas_size: CanvasSize,
    paper_size: Optional[PaperSize],
    orientation: Orientation,
) -> PageCounts:
    """
    Number of sheets needed along each axis to cover the canvas.

    Returns (-1, -1) when the paper size is unknown. Margins are not
    subtracted, so the counts assume the whole sheet is printable.
    """
    if paper_size is None or paper_size.width <= 0 or paper_size.height <= 0:
        return UNKNOWN_PAGE_COUNTS

    # A landscape sheet is the portrait sheet rotated
    if orientation == Orientation.LANDSCAPE:
        width, height = paper_size.height, paper_size.width
    else:
        width, height = paper_size.width, paper_size.height

    page_count_x = _pages_needed(canvas_size.width, width)
    page_count_y = _pages_needed(canvas_size.height, height)

    logger.debug(
        f"{canvas_size.width:.0f} x {canvas_size.height:.0f} on {paper_size.name} "
        f"({orientation.name.lower()}): {page_count_x} x {page_count_y} pages"
    )
    return page_count_x, page_count_y
