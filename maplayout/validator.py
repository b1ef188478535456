import math
from typing import Optional, Tuple

from maplayout.errors import InvalidScaleError
from maplayout.layout_scale import REFERENCE_CANVAS, calc_map_scale, calc_map_size
from maplayout.logger import logger
from maplayout.map_dimensions import GeodesicSizeProvider
from maplayout.page_tiler import calc_page_count
from maplayout.paper import PaperSizeLookup
from maplayout.project_types import (
    CanvasSize,
    FitResult,
    LayoutConfig,
    LayoutFailure,
    LayoutResult,
    LayoutSelection,
    MapExtent,
    PageCounts,
)
from maplayout.scale import MAX_SIZE_INCHES


class LayoutValidator:
    """
    Checks that a print layout can be produced and works out its tiling.

    Holds no state between calls; everything it needs comes in through the
    LayoutConfig and the two lookups given at construction.
    """

    def __init__(
        self,
        size_provider: GeodesicSizeProvider,
        paper_lookup: PaperSizeLookup,
        max_size_inches: float = MAX_SIZE_INCHES,
    ):
        self.size_provider = size_provider
        self.paper_lookup = paper_lookup
        self.max_size_inches = max_size_inches

    @property
    def max_area_sq_inches(self) -> float:
        return self.max_size_inches**2

    def calculate_canvas_size(self, config: LayoutConfig) -> Optional[CanvasSize]:
        """Canvas size of the configured extent at the configured scale"""
        geo_size = self.size_provider.try_get_geodesic_size(config.extent)
        if geo_size is None:
            return None
        return calc_map_size(config.scale, geo_size)

    def calculate_page_count(
        self, config: LayoutConfig, canvas_size: CanvasSize
    ) -> PageCounts:
        paper_size = self.paper_lookup.try_get_paper_size(
            config.paper_format, config.printer
        )
        return calc_page_count(canvas_size, paper_size, config.orientation)

    def validate(self, config: LayoutConfig) -> LayoutResult:
        if not config.is_new_layout:
            return self._validate_template(config)

        if not _is_positive(config.scale):
            logger.warning(f"Invalid map scale: {config.scale}")
            return _invalid_scale()

        try:
            canvas_size = self.calculate_canvas_size(config)
        except InvalidScaleError as e:
            logger.warning(f"Invalid map scale: {e}")
            return _invalid_scale()

        if canvas_size is None:
            return LayoutResult(
                is_valid=False,
                is_new_layout=True,
                failure=LayoutFailure.UNRESOLVABLE_GEOMETRY,
            )

        area = canvas_size.area_sq_inches
        is_valid = area <= self.max_area_sq_inches

        # Page counts are reported for oversized layouts too
        page_count_x, page_count_y = self.calculate_page_count(config, canvas_size)

        logger.info(
            f"Layout size: {canvas_size.width_inches:.2f}in x "
            f"{canvas_size.height_inches:.2f}in ({area:.2f} sq in), "
            f"pages: {page_count_x} x {page_count_y}"
        )
        if not is_valid:
            logger.warning(
                f"Layout area {area:.2f} sq in exceeds {self.max_area_sq_inches:.2f} sq in"
            )

        return LayoutResult(
            is_valid=is_valid,
            is_new_layout=True,
            page_count_x=page_count_x,
            page_count_y=page_count_y,
            canvas_size=canvas_size,
            failure=None if is_valid else LayoutFailure.OVERSIZE_LAYOUT,
        )

    def _validate_template(self, config: LayoutConfig) -> LayoutResult:
        if config.template is None:
            return LayoutResult(
                is_valid=False,
                is_new_layout=False,
                failure=LayoutFailure.NO_TEMPLATE,
            )
        return LayoutResult(is_valid=True, is_new_layout=False)

    def fit_to_page(self, extent: MapExtent | None) -> FitResult:
        """Scale at which the extent fits the reference canvas"""
        geo_size = self.size_provider.try_get_geodesic_size(extent)
        if geo_size is None or geo_size.area == 0:
            return FitResult(failure=LayoutFailure.UNRESOLVABLE_GEOMETRY)

        exact_scale = calc_map_scale(geo_size, REFERENCE_CANVAS)
        scale = max(1, round(exact_scale))
        logger.info(f"Fit to page scale: {scale}")
        return FitResult(scale=scale, exact_scale=exact_scale)

    def accept(
        self, config: LayoutConfig
    ) -> Tuple[LayoutResult, Optional[LayoutSelection]]:
        """
        Validates the layout and, if it is valid, returns the settings to keep.

        An invalid layout gives no selection; the result's message says why.
        """
        result = self.validate(config)
        if not result.is_valid:
            logger.info(result.message)
            return result, None

        template_filename = ""
        if not config.is_new_layout and config.template is not None:
            template_filename = config.template.filename

        selection = LayoutSelection(
            paper_format=config.paper_format,
            orientation=config.orientation,
            template_filename=template_filename,
            extent=config.extent,
            scale=config.scale,
            page_count_x=result.page_count_x,
            page_count_y=result.page_count_y,
        )
        return result, selection


def _invalid_scale() -> LayoutResult:
    return LayoutResult(
        is_valid=False,
        is_new_layout=True,
        failure=LayoutFailure.INVALID_SCALE,
    )


def _is_positive(value: float) -> bool:
    try:
        return math.isfinite(value) and value > 0
    except TypeError:
        return False
