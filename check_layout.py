from config import CONFIG
from maplayout.layout_scale import scale_choices
from maplayout.logger import logger
from maplayout.map_dimensions import SphericalSizeProvider
from maplayout.paper import StandardPaperSizes
from maplayout.project_types import LayoutConfig
from maplayout.validator import LayoutValidator


def main(config: LayoutConfig = CONFIG) -> int:
    validator = LayoutValidator(SphericalSizeProvider(), StandardPaperSizes())

    fit = validator.fit_to_page(config.extent)
    if fit.ok:
        logger.info(f"Scale to fit the map on a page: {fit.scale}m per canvas unit")
        logger.info(f"Scale choices: {scale_choices(fit.exact_scale)}")
    else:
        logger.warning("Could not compute a scale to fit the map on a page")

    result, selection = validator.accept(config)
    if selection is None:
        logger.error(result.message)
        return 1

    if result.page_counts is not None and not result.paper_format_known:
        logger.warning(f"Paper format {config.paper_format!r} is unknown, cannot tile")
    elif result.page_counts is not None:
        logger.info(
            f"Layout fits on {selection.page_count_x} x {selection.page_count_y} "
            f"{selection.paper_format} pages ({selection.orientation.name.lower()})"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
