from abc import ABC, abstractmethod
from typing import Iterator

from shapely.geometry.base import BaseGeometry


class IVectorSource(ABC):
    """Interface for sources of planar geometries in the working projection"""
    
    @abstractmethod
    def get_name(self) -> str:
        """Get source name"""
        pass
    
    @abstractmethod
    def is_available(self) -> bool:
        """Check if source is available/accessible"""
        pass
    
    @abstractmethod
    def iter_geometries(self) -> Iterator[BaseGeometry]:
        """Yield all geometries, reprojected into the working projection"""
        pass
