import math
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..exceptions.tile_list_exceptions import BoundingBoxParseError
from ..models.tile import Tile
from . import projection


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box in degrees"""
    min_lon: float = -180.0
    min_lat: float = -83.0
    max_lon: float = 180.0
    max_lat: float = 83.0

    @classmethod
    def from_str(cls, bbox_str: str) -> 'BoundingBox':
        """Parse 'min_lon,min_lat,max_lon,max_lat'. Extra elements are ignored."""
        parts = bbox_str.split(',')
        if len(parts) < 4:
            raise BoundingBoxParseError("Bounding box contains less than four elements.")
        try:
            coords = [float(p) for p in parts[:4]]
        except ValueError as e:
            raise BoundingBoxParseError(f"Invalid bounding box '{bbox_str}': {e}")
        return cls(*coords)

    def as_list(self) -> List[float]:
        """Return [min_lon, min_lat, max_lon, max_lat]"""
        return [self.min_lon, self.min_lat, self.max_lon, self.max_lat]


def _to_index(value: float, zoom: int) -> int:
    # the far edge of the world belongs to the last tile
    n = 1 << zoom
    if value == n:
        return n - 1
    # keep infinite projections (poles) out of range but finite
    if math.isinf(value):
        return -1 if value < 0 else n
    return math.floor(value)


@dataclass
class ZoomRange:
    """Inclusive rectangle of tile indices at one zoom level"""
    xmin: int
    ymin: int
    xmax: int
    ymax: int

    @property
    def width(self) -> int:
        """Index difference, i.e. number of columns minus one"""
        return self.xmax - self.xmin

    @property
    def height(self) -> int:
        """Index difference, i.e. number of rows minus one"""
        return self.ymax - self.ymin

    @staticmethod
    def get_max_xy_index(zoom: int) -> int:
        return (1 << zoom) - 1

    @classmethod
    def whole_world(cls, zoom: int) -> 'ZoomRange':
        max_index = cls.get_max_xy_index(zoom)
        return cls(0, 0, max_index, max_index)

    def clamp(self, zoom: int) -> Optional['ZoomRange']:
        """Cut the range to the tiles of the world, None if nothing is left"""
        max_index = self.get_max_xy_index(zoom)
        clamped = ZoomRange(
            xmin=max(self.xmin, 0),
            ymin=max(self.ymin, 0),
            xmax=min(self.xmax, max_index),
            ymax=min(self.ymax, max_index),
        )
        if clamped.xmin > clamped.xmax or clamped.ymin > clamped.ymax:
            return None
        return clamped

    @classmethod
    def from_bbox_geographic(cls, bbox: BoundingBox, zoom: int) -> 'ZoomRange':
        """Build a zoom range from a bounding box in geographic coordinates"""
        return cls(
            xmin=_to_index(projection.merc_x_to_tile(projection.lon_to_x(bbox.min_lon), zoom), zoom),
            ymin=_to_index(projection.merc_y_to_tile(projection.lat_to_y(bbox.max_lat), zoom), zoom),
            xmax=_to_index(projection.merc_x_to_tile(projection.lon_to_x(bbox.max_lon), zoom), zoom),
            ymax=_to_index(projection.merc_y_to_tile(projection.lat_to_y(bbox.min_lat), zoom), zoom),
        )

    @classmethod
    def from_bbox_webmerc(cls, x1: float, y1: float, x2: float, y2: float, zoom: int) -> 'ZoomRange':
        """Build a zoom range from a bounding box in Web Mercator coordinates"""
        return cls(
            xmin=_to_index(projection.merc_x_to_tile(x1, zoom), zoom),
            ymin=_to_index(projection.merc_y_to_tile(y2, zoom), zoom),
            xmax=_to_index(projection.merc_x_to_tile(x2, zoom), zoom),
            ymax=_to_index(projection.merc_y_to_tile(y1, zoom), zoom),
        )

    def tiles(self) -> Iterator[Tuple[int, int]]:
        """Iterate (x, y) over the range, x outer, y inner"""
        for x in range(self.xmin, self.xmax + 1):
            for y in range(self.ymin, self.ymax + 1):
                yield x, y

    def tile_count(self) -> int:
        return (self.width + 1) * (self.height + 1)


class TileCalculator:
    """Utility class for tile coordinate calculations"""

    @staticmethod
    def get_tiles_for_bbox(bbox: BoundingBox, min_zoom: int, max_zoom: int) -> Iterator[Tile]:
        """Yield all tiles of a bbox for every zoom level in the range, zoom ascending"""
        for zoom in range(min_zoom, max_zoom + 1):
            tile_range = ZoomRange.from_bbox_geographic(bbox, zoom).clamp(zoom)
            if tile_range is None:
                continue
            for x, y in tile_range.tiles():
                yield Tile(zoom, x, y)

    @staticmethod
    def tile_bounds_webmerc(x: int, y: int, zoom: int) -> Tuple[float, float, float, float]:
        """Return Web Mercator bounds (minx, miny, maxx, maxy) of an XYZ tile."""
        return (
            projection.tile_x_to_merc(x, zoom),
            projection.tile_y_to_merc(y + 1, zoom),
            projection.tile_x_to_merc(x + 1, zoom),
            projection.tile_y_to_merc(y, zoom),
        )

    @staticmethod
    def calculate_tile_count(bbox: BoundingBox, min_zoom: int, max_zoom: int) -> int:
        """Calculate total number of tiles for given bbox and zoom range"""
        total = 0
        for zoom in range(min_zoom, max_zoom + 1):
            tile_range = ZoomRange.from_bbox_geographic(bbox, zoom).clamp(zoom)
            if tile_range is not None:
                total += tile_range.tile_count()
        return total
