from typing import Tuple

from shapely.geometry import box
from shapely.geometry.base import BaseGeometry
from shapely.prepared import PreparedGeometry, prep

from ..interfaces.geometry_processor import IGeometryProcessor

# segments per quarter circle, as used for buffering expiry geometries
QUADRANT_SEGMENTS = 4


class ShapelyGeometryProcessor(IGeometryProcessor):
    """Shapely geometry processor"""
    
    def bbox(self, geometry: BaseGeometry) -> Tuple[float, float, float, float]:
        """Calculate geometry bounds"""
        return geometry.bounds
    
    def buffer(self, geometry: BaseGeometry, radius: float) -> BaseGeometry:
        """Buffer geometry by radius in map units"""
        return geometry.buffer(radius, quad_segs=QUADRANT_SEGMENTS)
    
    def prepare(self, geometry: BaseGeometry) -> PreparedGeometry:
        """Prepare geometry for repeated predicates"""
        return prep(geometry)
    
    def intersects(self, prepared: PreparedGeometry, bounds: Tuple[float, float, float, float]) -> bool:
        """Check whether geometry intersects the box given by bounds"""
        return prepared.intersects(box(*bounds))
