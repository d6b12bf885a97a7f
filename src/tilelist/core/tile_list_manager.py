import argparse
import logging
from typing import List, Optional

from .intersecting_tiles_finder import IntersectingTilesFinder
from ..adapters.geopandas_adapter import GeoPandasVectorSource
from ..exceptions.tile_list_exceptions import InputSourceError
from ..infrastructure.logging import LoggingManager
from ..models.projection import WorkingProjection
from ..models.run_config import RunConfig
from ..services.config_service import ConfigService
from ..services.tile_output_service import TileOutputService
from ..services.tile_path_formatter import TilePathFormatter
from ..utils.file_utils import FileUtils
from ..utils.tile_calculator import TileCalculator

logger = logging.getLogger(__name__)


class TileListManager:
    """Main manager class for tile list generation"""

    def __init__(self, config: RunConfig):
        self.config = config
        self.projection = WorkingProjection()
        self.formatter = TilePathFormatter(
            suffix=config.suffix,
            tirex=config.tirex,
            directory=config.directory
        )

    def write_bbox_tiles(self, output: TileOutputService) -> int:
        """Write every tile of the bounding box on all zoom levels"""
        bbox, minzoom, maxzoom = self.config.bbox, self.config.minzoom, self.config.maxzoom
        logger.debug(f"Bounding box covers {TileCalculator.calculate_tile_count(bbox, minzoom, maxzoom)} tiles")
        tiles = TileCalculator.get_tiles_for_bbox(bbox, minzoom, maxzoom)
        written = output.write_tiles(tiles)
        logger.info(f"Wrote {written} tiles for bounding box {self.config.bbox.as_list()}")
        return written

    def write_geometry_tiles(self, output: TileOutputService) -> int:
        """Write the tiles intersecting the geometries of all input files"""
        finder = IntersectingTilesFinder(self.config.minzoom, self.config.maxzoom, verbose=self.config.verbose)
        for path in self.config.geometry_paths:
            source = GeoPandasVectorSource.from_path(path, self.projection)
            if not source.is_available():
                raise InputSourceError(f"Opening {path} failed: file does not exist")
            finder.find_intersections(source, self.config.buffer_size)
        written = output.write_tiles(finder.iter_tiles())
        logger.info(f"Wrote {written} tiles for {len(self.config.geometry_paths)} geometry file(s)")
        return written

    def run(self) -> int:
        """Produce the tile list, return the number of tiles written"""
        stream = FileUtils.open_output(self.config.output)
        written = 0
        try:
            output = TileOutputService(stream, self.formatter, self.config.delimiter, self.config.check_exists)
            if self.config.has_bbox():
                written += self.write_bbox_tiles(output)
            if self.config.has_geometries():
                written += self.write_geometry_tiles(output)
            output.write_trailer(self.config.append)
        finally:
            FileUtils.close_output(stream)
        return written

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """Command line parser"""
        parser = argparse.ArgumentParser(
            prog='polygon-to-tile-list',
            description=(
                'Print the list of map tiles covering a bounding box or intersecting the\n'
                'points, (multi)linestrings and (multi)polygons of vector data files.'
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                'Examples:\n\n'
                '1) All tiles of a bounding box (negative values need the = form):\n'
                '   polygon-to-tile-list --bbox=-0.1,51.5,0.1,51.6 -z 10 -Z 12\n\n'
                '2) Expiry list for changed geometries with a 50 m buffer:\n'
                '   polygon-to-tile-list -g changes.gpkg -B 50 -z 8 -Z 16 -s .png -o expire.list\n\n'
                '3) Tirex job list:\n'
                '   polygon-to-tile-list -g changes.shp -Z 17 -t -s map=osm\n'
            )
        )
        parser.add_argument('-a', '--append', help='Print following string at the end of the output')
        parser.add_argument('-b', '--bbox', help='Bounding box separated by comma: min_lon,min_lat,max_lon,max_lat')
        parser.add_argument('-B', '--buffer-size', dest='buffer_size', type=float,
                            help='Buffer size in metres for geometries (not bounding boxes)')
        parser.add_argument('-c', '--check-exists', dest='check_exists', action='store_true',
                            help='Only print tiles which exist as files on the disk')
        parser.add_argument('-d', '--directory', help='Tile directory, prepended to the paths and used by --check-exists')
        parser.add_argument('-g', '--geom', action='append',
                            help='Print all tiles intersecting the geometries in this file (repeatable)')
        parser.add_argument('-n', '--null', action='store_true', help='Use NUL character, not LF, as delimiter')
        parser.add_argument('-s', '--suffix', help='Suffix to append (do not forget the leading dot)')
        parser.add_argument('-t', '--tirex', action='store_true',
                            help='Tirex mode (different output style, only coords that are multiples of 8)')
        parser.add_argument('-z', '--minzoom', type=int, help='Minimum zoom level (default: 0)')
        parser.add_argument('-Z', '--maxzoom', type=int, help='Maximum zoom level (default: 14)')
        parser.add_argument('-o', '--output', help='Write output to file instead of standard output')
        parser.add_argument('-v', '--verbose', action='store_true', help='Be verbose')
        parser.add_argument('--config', help='JSON file with default options')
        return parser

    @classmethod
    def from_command_line(cls, argv: Optional[List[str]] = None) -> 'TileListManager':
        """Parse arguments, set up logging and validate the run configuration"""
        args = cls.build_parser().parse_args(argv)

        config_service = ConfigService()
        file_config = config_service.load_config(args.config) if args.config else {}
        config = config_service.build_run_config(args, file_config)

        LoggingManager.setup_logging({'logging': config.logging}, verbose=config.verbose)
        config = config_service.validate_run_config(config)
        return cls(config)
