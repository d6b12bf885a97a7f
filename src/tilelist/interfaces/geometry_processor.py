from abc import ABC, abstractmethod
from typing import Any, Tuple

from shapely.geometry.base import BaseGeometry


class IGeometryProcessor(ABC):
    """Planar geometry operations used by the tile finder"""
    
    @abstractmethod
    def bbox(self, geometry: BaseGeometry) -> Tuple[float, float, float, float]:
        """Axis aligned bounds (minx, miny, maxx, maxy)"""
        pass
    
    @abstractmethod
    def buffer(self, geometry: BaseGeometry, radius: float) -> BaseGeometry:
        """Expand a geometry by a planar distance"""
        pass
    
    @abstractmethod
    def prepare(self, geometry: BaseGeometry) -> Any:
        """Prepare a geometry for repeated intersection tests"""
        pass
    
    @abstractmethod
    def intersects(self, prepared: Any, bounds: Tuple[float, float, float, float]) -> bool:
        """Check whether a prepared geometry intersects a box"""
        pass
