import logging
import os
from typing import Any, Dict, Iterator, List, Optional

import geopandas as gpd
from shapely.geometry.base import BaseGeometry

from .base_adapter import BaseAdapter
from ..exceptions.tile_list_exceptions import (
    ConfigurationError,
    CoordinateTransformError,
    InputSourceError,
)
from ..interfaces.vector_source import IVectorSource
from ..models.projection import WorkingProjection

logger = logging.getLogger(__name__)


class GeoPandasVectorSource(BaseAdapter, IVectorSource):
    """
    Vector data source backed by geopandas.

    Reads every layer of a GIS file (Shapefile, GeoPackage, GeoJSON, ...) and
    yields its geometries reprojected into the working projection. Layers
    without a spatial reference, empty layers and layers that cannot be read
    are skipped with a warning.
    """
    
    def __init__(self, config: Dict[str, Any], projection: Optional[WorkingProjection] = None):
        super().__init__(config)
        if self.name == 'unknown':
            self.name = os.path.basename(self.path) or self.path
        self.projection = projection or WorkingProjection()
    
    @classmethod
    def from_path(cls, path: str, projection: Optional[WorkingProjection] = None) -> 'GeoPandasVectorSource':
        """Create a source for a single file"""
        return cls({'path': path}, projection)
    
    def validate_config(self) -> bool:
        """Validate adapter configuration"""
        if not self.path:
            raise ConfigurationError("Vector source requires a path")
        return True
    
    def is_available(self) -> bool:
        """Check if source file exists"""
        return os.path.exists(self.path)
    
    def list_layers(self) -> List[str]:
        """Names of all layers in the data source"""
        self.validate_config()
        try:
            layers = gpd.list_layers(self.path)
        except Exception as e:
            raise InputSourceError(f"Opening {self.path} failed: {e}")
        return list(layers['name'])
    
    def _read_layer(self, index: int, layer_name: str) -> Optional[gpd.GeoDataFrame]:
        try:
            gdf = gpd.read_file(self.path, layer=layer_name)
        except Exception as e:
            logger.warning(f"Skipping broken data layer {index} in {self.path}: {e}")
            return None
        
        if gdf.crs is None:
            logger.warning(f"Data layer {index} in {self.path} has no spatial reference. Skipping it.")
            return None
        
        if len(gdf) == 0:
            logger.warning(f"Skipping empty layer {layer_name} of {self.path}")
            return None
        
        try:
            return gdf.to_crs(self.projection.get_crs())
        except Exception as e:
            raise CoordinateTransformError(
                f"Failed to transform layer {layer_name} of {self.path}: {e}"
            )
    
    def iter_geometries(self) -> Iterator[BaseGeometry]:
        """Yield geometries of all usable layers in the working projection"""
        for index, layer_name in enumerate(self.list_layers()):
            gdf = self._read_layer(index, layer_name)
            if gdf is None:
                continue
            
            logger.info(f"Processing {len(gdf)} features from layer {layer_name} of {self.path}")
            for geometry in gdf.geometry:
                if geometry is None:
                    logger.debug(f"Skipping feature without geometry in layer {layer_name}")
                    continue
                yield geometry
