from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..utils.tile_calculator import BoundingBox


@dataclass
class RunConfig:
    """Data model for one run of the tile list generator"""
    minzoom: int = 0
    maxzoom: int = 14
    bbox: Optional[BoundingBox] = None
    geometry_paths: List[str] = field(default_factory=list)
    buffer_size: float = 0.0
    suffix: str = ""
    tirex: bool = False
    delimiter: str = "\n"
    check_exists: bool = False
    directory: str = ""
    append: str = ""
    output: Optional[str] = None
    verbose: bool = False
    logging: Dict[str, Any] = field(default_factory=dict)
    
    def has_bbox(self) -> bool:
        """Whether tiles of a bounding box are requested"""
        return self.bbox is not None
    
    def has_geometries(self) -> bool:
        """Whether tiles of vector geometries are requested"""
        return len(self.geometry_paths) > 0
