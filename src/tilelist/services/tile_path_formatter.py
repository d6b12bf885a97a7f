from ..models.tile import Tile
from ..utils.file_utils import FileUtils

# tirex works on meta tiles of 8x8 tiles, i.e. three zoom levels
TIREX_ZOOM_OFFSET = 3
TIREX_FACTOR = 1 << TIREX_ZOOM_OFFSET


class TilePathFormatter:
    """Formats tiles as 'zoom/x/y<suffix>' paths or tirex job lines"""
    
    def __init__(self, suffix: str = "", tirex: bool = False, directory: str = ""):
        self.suffix = suffix
        self.tirex = tirex
        self.directory = directory
    
    def output_tile(self, tile: Tile) -> Tile:
        """Tile coordinates as they appear in the output"""
        if not self.tirex:
            return tile
        return Tile(tile.zoom + TIREX_ZOOM_OFFSET, tile.x * TIREX_FACTOR, tile.y * TIREX_FACTOR)
    
    def format(self, tile: Tile) -> str:
        """Format a tile for the output"""
        out = self.output_tile(tile)
        if self.tirex:
            line = f"x={out.x} y={out.y} z={out.zoom}"
            return f"{line} {self.suffix}" if self.suffix else line
        return FileUtils.get_tile_path(self.directory, out.zoom, out.x, out.y, self.suffix)
    
    def filesystem_path(self, tile: Tile) -> str:
        """Path of the tile on disk below the tile directory"""
        out = self.output_tile(tile)
        return FileUtils.get_tile_path(self.directory, out.zoom, out.x, out.y, self.suffix)
