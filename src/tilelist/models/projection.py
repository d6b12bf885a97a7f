from dataclasses import dataclass, field

from pyproj import CRS


@dataclass(frozen=True)
class WorkingProjection:
    """Spatial reference all input geometries are reprojected into"""
    crs: CRS = field(default_factory=lambda: CRS.from_epsg(3857))
    
    def get_crs(self) -> CRS:
        """Get the target CRS"""
        return self.crs
