import math
from typing import Optional, Protocol

from maplayout.logger import logger
from maplayout.project_types import GeoSize, MapExtent
from maplayout.scale import EARTH_RADIUS, METERS_PER_DEGREE_LAT


class GeodesicSizeProvider(Protocol):
    def try_get_geodesic_size(self, extent: MapExtent | None) -> Optional[GeoSize]:
        """Ground size of the extent in meters, or None if it can't be computed"""
        ...


def meters_per_degree_lon(lat: float) -> float:
    """Calculate meters per degree of longitude at a given latitude"""
    return EARTH_RADIUS * math.cos(math.radians(lat)) * (math.pi / 180)


class SphericalSizeProvider:
    """
    Measures lon/lat extents on a spherical earth.

    Width is taken at the mean latitude of the extent, which is accurate
    enough for extents that fit on a printed layout.
    """

    def try_get_geodesic_size(self, extent: MapExtent | None) -> Optional[GeoSize]:
        if extent is None:
            logger.warning("No map extent to measure")
            return None

        problem = self._check_extent(extent)
        if problem:
            logger.warning(f"Cannot measure extent {extent}: {problem}")
            return None

        avg_lat = (extent.min_lat + extent.max_lat) / 2
        width_meters = (extent.max_lon - extent.min_lon) * meters_per_degree_lon(
            avg_lat
        )
        height_meters = (extent.max_lat - extent.min_lat) * METERS_PER_DEGREE_LAT

        logger.info(f"Map dimensions: {width_meters:.2f}m x {height_meters:.2f}m")
        return GeoSize(width_meters, height_meters)

    @staticmethod
    def _check_extent(extent: MapExtent) -> str | None:
        coords = (extent.min_lat, extent.min_lon, extent.max_lat, extent.max_lon)
        if not all(math.isfinite(c) for c in coords):
            return "coordinates must be finite"
        if not (-90 <= extent.min_lat <= 90 and -90 <= extent.max_lat <= 90):
            return "latitude must be between -90 and 90"
        if not (-180 <= extent.min_lon <= 180 and -180 <= extent.max_lon <= 180):
            return "longitude must be between -180 and 180"
        if extent.min_lat > extent.max_lat or extent.min_lon > extent.max_lon:
            return "bottom left corner must be below and left of top right corner"
        if extent.to_polygon().area == 0:
            return "extent has no area"
        return None
