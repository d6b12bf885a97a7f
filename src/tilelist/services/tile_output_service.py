import logging
from typing import Iterable, TextIO

from .tile_path_formatter import TilePathFormatter
from ..models.tile import Tile
from ..utils.file_utils import FileUtils

logger = logging.getLogger(__name__)


class TileOutputService:
    """Writes formatted tiles to an output stream"""
    
    def __init__(self, stream: TextIO, formatter: TilePathFormatter,
                 delimiter: str = "\n", check_exists: bool = False):
        self.stream = stream
        self.formatter = formatter
        self.delimiter = delimiter
        self.check_exists = check_exists
    
    def write_tiles(self, tiles: Iterable[Tile]) -> int:
        """Write tiles, return the number of lines written"""
        written = 0
        skipped = 0
        for tile in tiles:
            if self.check_exists and not FileUtils.file_exists(self.formatter.filesystem_path(tile)):
                skipped += 1
                continue
            self.stream.write(f"{self.formatter.format(tile)}{self.delimiter}")
            written += 1
        if skipped:
            logger.debug(f"Skipped {skipped} tiles not present on disk")
        return written
    
    def write_trailer(self, text: str) -> None:
        """Write a closing line after all tiles"""
        if text:
            self.stream.write(f"{text}{self.delimiter}")
