from typing import Callable, Dict, List, Optional

import pytest

from maplayout.logger import logger
from maplayout.project_types import GeoSize, MapExtent, PaperSize, PrinterContext

LETTER = PaperSize("Letter", 850, 1100)


class FakeSizeProvider:
    def __init__(self, geo_size: Optional[GeoSize]):
        self.geo_size = geo_size
        self.calls: List[Optional[MapExtent]] = []

    def try_get_geodesic_size(self, extent):
        self.calls.append(extent)
        return self.geo_size


class FakePaperLookup:
    def __init__(self, paper_sizes: Dict[str, PaperSize]):
        self.paper_sizes = paper_sizes

    def try_get_paper_size(self, format_name, printer: PrinterContext | None = None):
        return self.paper_sizes.get(format_name)


@pytest.fixture
def size_provider() -> Callable[[Optional[GeoSize]], FakeSizeProvider]:
    """Builds a size provider that always answers with the given ground size"""
    return FakeSizeProvider


@pytest.fixture
def extent() -> MapExtent:
    return MapExtent(bottom_left=(40.68, -74.03), top_right=(40.88, -73.90))


@pytest.fixture
def paper_lookup() -> FakePaperLookup:
    return FakePaperLookup({"Letter": LETTER})


@pytest.fixture
def log_records(caplog):
    # The package logger does not propagate, so caplog has to listen on it
    logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
