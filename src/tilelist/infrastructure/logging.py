"""Logging configuration"""
import logging
import sys
from typing import Dict, Any


class LoggingManager:
    """Manages application logging configuration"""
    
    @staticmethod
    def setup_logging(config: Dict[str, Any], verbose: bool = False) -> None:
        """Setup logging based on configuration"""
        logging_config = config.get('logging', {})
        
        level_name = 'DEBUG' if verbose else logging_config.get('level', 'INFO')
        level = getattr(logging, level_name.upper(), logging.INFO)
        format_str = logging_config.get('format', 
                                       '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        
        # stdout carries the tile list
        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stderr,
            force=True
        )
        
        # Set specific loggers
        logging.getLogger('pyogrio').setLevel(logging.WARNING)
        logging.getLogger('fiona').setLevel(logging.WARNING)
        logging.getLogger('shapely').setLevel(logging.WARNING)
