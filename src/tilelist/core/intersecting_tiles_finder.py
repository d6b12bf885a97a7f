import logging
from typing import Iterator, Optional

from shapely.geometry.base import BaseGeometry

from .tile_list import TileList
from ..geometry.geometry_processor import ShapelyGeometryProcessor
from ..interfaces.geometry_processor import IGeometryProcessor
from ..interfaces.vector_source import IVectorSource
from ..models.geometry import WorkingGeometry
from ..models.tile import Tile
from ..utils import projection
from ..utils.tile_calculator import TileCalculator, ZoomRange

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 10


class IntersectingTilesFinder:
    """
    Collects the tiles at maxzoom touched by (buffered) geometries.

    Every geometry must already be in Web Mercator. Candidate tiles come from
    the bounding box of the geometry; unless the box covers a single tile,
    each candidate is checked against the geometry itself.
    """

    def __init__(self, minzoom: int, maxzoom: int,
                 geometry_processor: Optional[IGeometryProcessor] = None,
                 verbose: bool = False):
        self.minzoom = minzoom
        self.maxzoom = maxzoom
        self.verbose = verbose
        self.geometry_processor = geometry_processor or ShapelyGeometryProcessor()
        self.tile_list = TileList(maxzoom)
        self._features = 0

    def buffer_radius(self, miny: float, maxy: float, buffer_size: float) -> float:
        """Convert a buffer in metres to Mercator units at the middle of a bbox"""
        avg_y = (maxy - miny) / 2 + miny
        return buffer_size * projection.mercator_scale(projection.y_to_lat(avg_y))

    def handle_geometry(self, geometry: BaseGeometry, buffer_size: float = 0.0) -> None:
        """Add all tiles intersecting the (buffered) geometry to the tile list"""
        working = WorkingGeometry.from_shape(geometry)
        if working.is_empty():
            logger.debug("Skipping empty %s", working.kind.value)
            return

        shape = working.shape
        minx, miny, maxx, maxy = self.geometry_processor.bbox(shape)
        if buffer_size > 0:
            radius = self.buffer_radius(miny, maxy, buffer_size)
            shape = self.geometry_processor.buffer(shape, radius)
            minx, miny, maxx, maxy = self.geometry_processor.bbox(shape)

        tile_range = ZoomRange.from_bbox_webmerc(minx, miny, maxx, maxy, self.maxzoom).clamp(self.maxzoom)
        if tile_range is None:
            logger.debug("Skipping %s outside of the Mercator world", working.kind.value)
            return
        if tile_range.width == 0 and tile_range.height == 0:
            self.tile_list.add_tile(tile_range.xmin, tile_range.ymin)
            return

        prepared = self.geometry_processor.prepare(shape)
        for x, y in tile_range.tiles():
            bounds = TileCalculator.tile_bounds_webmerc(x, y, self.maxzoom)
            if self.geometry_processor.intersects(prepared, bounds):
                self.tile_list.add_tile(x, y)

    def find_intersections(self, source: IVectorSource, buffer_size: float = 0.0) -> None:
        """Process all geometries of a vector source"""
        self._reset_progress()
        for geometry in source.iter_geometries():
            self.handle_geometry(geometry, buffer_size)
            self._progress()
        self._end_progress(source)

    def iter_tiles(self) -> Iterator[Tile]:
        """Dirty tiles of all zoom levels between maxzoom and minzoom"""
        if self.verbose:
            logger.info("Dumping tiles on medium zoom levels")
        return self.tile_list.iter_tiles(self.minzoom)

    def _reset_progress(self) -> None:
        self._features = 0

    def _progress(self) -> None:
        self._features += 1
        if self.verbose and self._features % PROGRESS_INTERVAL == 0:
            logger.debug(f"{self._features} features processed")

    def _end_progress(self, source: IVectorSource) -> None:
        logger.info(f"Finished {source.get_name()}: {self._features} features, "
                    f"{len(self.tile_list)} tiles at zoom {self.maxzoom}")
