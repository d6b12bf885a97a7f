#!/usr/bin/env python3
"""
polygon-to-tile-list - Main Entry Point
Prints the tiles covering a bounding box or intersecting vector geometries
"""

import logging
import sys
from typing import List, Optional

from .core.tile_list_manager import TileListManager
from .exceptions.tile_list_exceptions import TileListException


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the tile list generator"""
    logger = logging.getLogger(__name__)
    try:
        manager = TileListManager.from_command_line(argv)
        manager.run()
        return 0

    except KeyboardInterrupt:
        logger.error("Interrupted by user.")
        return 1
    except TileListException as e:
        logger.error(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
