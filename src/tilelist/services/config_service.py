import json
import logging
import os
from argparse import Namespace
from typing import Any, Dict, Optional

from ..exceptions.tile_list_exceptions import ConfigurationError, ValidationError
from ..models.run_config import RunConfig
from .tile_path_formatter import TIREX_ZOOM_OFFSET
from ..utils.quadkey import MAX_ZOOM
from ..utils.tile_calculator import BoundingBox

logger = logging.getLogger(__name__)

# option name -> accepted JSON types
CONFIG_KEYS = {
    'minzoom': (int,),
    'maxzoom': (int,),
    'bbox': (str, list),
    'geometry_paths': (list,),
    'buffer_size': (int, float),
    'suffix': (str,),
    'tirex': (bool,),
    'null': (bool,),
    'check_exists': (bool,),
    'directory': (str,),
    'append': (str,),
    'output': (str,),
    'verbose': (bool,),
    'logging': (dict,),
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigService:
    """Service for loading and validating run configuration"""

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from JSON file"""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Config file {config_path} not found!")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading config: {e}")

        self.validate_config(config)
        return config

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration structure"""
        if not isinstance(config, dict):
            raise ValidationError("Configuration must be a JSON object")

        for key, value in config.items():
            if key not in CONFIG_KEYS:
                raise ValidationError(f"Unknown configuration key: {key}")
            # bool is an int subclass, keep it out of numeric options
            if isinstance(value, bool) and bool not in CONFIG_KEYS[key]:
                raise ValidationError(f"Invalid type for {key}: {type(value).__name__}")
            if not isinstance(value, CONFIG_KEYS[key]):
                raise ValidationError(f"Invalid type for {key}: {type(value).__name__}")

        self.validate_logging(config.get('logging', {}))
        return True

    def validate_logging(self, logging_config: Dict[str, Any]) -> None:
        """Check the logging section, the level must be a standard level name"""
        level = logging_config.get('level', 'INFO')
        if not isinstance(level, str):
            raise ValidationError(f"Invalid type for logging.level: {type(level).__name__}")
        if level.upper() not in LOG_LEVELS:
            raise ValidationError(f"Unknown logging level: {level}")
        if not isinstance(logging_config.get('format', ''), str):
            raise ValidationError("Invalid type for logging.format")

    def build_run_config(self, args: Namespace, file_config: Optional[Dict[str, Any]] = None) -> RunConfig:
        """Merge command line arguments over the file configuration"""
        file_config = file_config or {}

        def pick(name: str, default: Any = None) -> Any:
            value = getattr(args, name, None)
            if value is not None:
                return value
            return file_config.get(name, default)

        self.validate_suffix(pick('suffix'))
        bbox = self._parse_bbox(pick('bbox'))
        geometry_paths = getattr(args, 'geom', None) or file_config.get('geometry_paths', [])
        null = bool(getattr(args, 'null', False) or file_config.get('null', False))

        return RunConfig(
            minzoom=pick('minzoom', 0),
            maxzoom=pick('maxzoom', 14),
            bbox=bbox,
            geometry_paths=list(geometry_paths),
            buffer_size=float(pick('buffer_size', 0.0)),
            suffix=pick('suffix', ''),
            tirex=bool(getattr(args, 'tirex', False) or file_config.get('tirex', False)),
            delimiter='\0' if null else '\n',
            check_exists=bool(getattr(args, 'check_exists', False) or file_config.get('check_exists', False)),
            directory=pick('directory', ''),
            append=pick('append', ''),
            output=pick('output'),
            verbose=bool(getattr(args, 'verbose', False) or file_config.get('verbose', False)),
            logging=file_config.get('logging', {}),
        )

    def validate_run_config(self, config: RunConfig) -> RunConfig:
        """Check option combinations and apply the tirex zoom shift"""
        if not config.has_bbox() and not config.has_geometries():
            raise ValidationError("Neither a bounding box nor a polygon was provided.")

        if not 0 <= config.minzoom <= config.maxzoom <= MAX_ZOOM:
            raise ValidationError(
                f"Zoom levels must satisfy 0 <= minzoom <= maxzoom <= {MAX_ZOOM}, "
                f"got minzoom={config.minzoom} maxzoom={config.maxzoom}"
            )

        if config.buffer_size < 0:
            raise ValidationError(f"Buffer size must not be negative, got {config.buffer_size}")

        if config.suffix and not config.suffix.startswith('.') and not config.tirex:
            logger.warning("Suffix does not start with a dot.")

        if config.check_exists and not config.suffix:
            logger.warning("Suffix is empty but checking tiles for existence is enabled.")

        if config.tirex:
            config.maxzoom = max(config.maxzoom - TIREX_ZOOM_OFFSET, 0)
            config.minzoom = max(config.minzoom - TIREX_ZOOM_OFFSET, 0)

        return config

    def validate_suffix(self, suffix: Optional[str]) -> None:
        """An explicitly given suffix must not be empty"""
        if suffix is not None and suffix == '':
            raise ValidationError("File name suffix is empty.")

    def _parse_bbox(self, value: Any) -> Optional[BoundingBox]:
        if value is None:
            return None
        if isinstance(value, BoundingBox):
            return value
        if isinstance(value, list):
            value = ','.join(str(v) for v in value)
        return BoundingBox.from_str(value)
