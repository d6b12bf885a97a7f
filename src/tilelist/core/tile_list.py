from typing import Iterator, List, Set

from ..exceptions.tile_list_exceptions import ValidationError
from ..models.tile import Tile
from ..utils.quadkey import MAX_ZOOM, quadkey_to_xy, xy_to_quadkey


class TileList:
    """
    Set of dirty tiles at the maximum zoom level.

    Tiles are stored as quadkeys. The tiles of all coarser zoom levels are
    derived from them when the list is written out.
    """

    def __init__(self, maxzoom: int):
        if not 0 <= maxzoom <= MAX_ZOOM:
            raise ValidationError(f"maxzoom must be between 0 and {MAX_ZOOM}, got {maxzoom}")
        self.maxzoom = maxzoom
        self._dirty_tiles: Set[int] = set()
        # out of range, so the first call always inserts
        self._last_tile_x = (1 << maxzoom) + 1
        self._last_tile_y = (1 << maxzoom) + 1

    def __len__(self) -> int:
        return len(self._dirty_tiles)

    def add_tile(self, x: int, y: int) -> None:
        """Mark tile (x, y) at maxzoom as dirty"""
        # Skip the set insertion if this tile was the last one added.
        if self._last_tile_x != x or self._last_tile_y != y:
            self._dirty_tiles.add(xy_to_quadkey(x, y, self.maxzoom))
            self._last_tile_x = x
            self._last_tile_y = y

    def quadkeys(self) -> List[int]:
        """Sorted quadkeys of all dirty tiles"""
        return sorted(self._dirty_tiles)

    def iter_tiles(self, minzoom: int) -> Iterator[Tile]:
        """
        Yield the dirty tiles of every zoom level from maxzoom down to minzoom.

        Walks the sorted quadkeys once. The enclosing tile at a coarser level
        is found by dropping the lowest 2*dz bits of the quadkey. Sorting puts
        all descendants of a tile next to each other, so a coarser tile is
        written only for the first of them. Once an ancestor matches the one
        of the previous quadkey, all coarser ancestors match as well.

        Args:
            minzoom: Coarsest zoom level to output

        Yields:
            Tile objects, each distinct tile exactly once
        """
        if not 0 <= minzoom <= self.maxzoom:
            raise ValidationError(f"minzoom must be between 0 and {self.maxzoom}, got {minzoom}")

        # larger than the largest possible quadkey
        last_quadkey = 1 << (2 * self.maxzoom)
        for quadkey in self.quadkeys():
            for dz in range(self.maxzoom - minzoom + 1):
                qt_current = quadkey >> (dz * 2)
                if qt_current == last_quadkey >> (dz * 2):
                    break
                zoom = self.maxzoom - dz
                x, y = quadkey_to_xy(qt_current, zoom)
                yield Tile(zoom, x, y)
            last_quadkey = quadkey
