from dataclasses import dataclass
from enum import Enum

from shapely.geometry.base import BaseGeometry

from ..exceptions.tile_list_exceptions import UnsupportedGeometryError


class GeometryKind(Enum):
    """Geometry types accepted by the tile finder"""
    POINT = 'Point'
    MULTIPOINT = 'MultiPoint'
    LINESTRING = 'LineString'
    MULTILINESTRING = 'MultiLineString'
    POLYGON = 'Polygon'
    MULTIPOLYGON = 'MultiPolygon'


_KINDS_BY_TYPE = {kind.value: kind for kind in GeometryKind}


@dataclass(frozen=True)
class WorkingGeometry:
    """A supported planar geometry in the working projection"""
    kind: GeometryKind
    shape: BaseGeometry

    @classmethod
    def from_shape(cls, shape: BaseGeometry) -> 'WorkingGeometry':
        """Wrap a shapely geometry, rejecting unsupported types"""
        kind = _KINDS_BY_TYPE.get(shape.geom_type)
        if kind is None:
            raise UnsupportedGeometryError(f"Unsupported geometry type: {shape.geom_type}")
        return cls(kind=kind, shape=shape)

    def is_empty(self) -> bool:
        """Check whether the geometry has no coordinates"""
        return self.shape.is_empty
