from abc import ABC, abstractmethod
from typing import Dict, Any


class BaseAdapter(ABC):
    """Base adapter class for all vector data sources"""
    
    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.name = config.get('name', 'unknown')
        self.path = config.get('path', '')
    
    @abstractmethod
    def validate_config(self) -> bool:
        """Validate adapter configuration"""
        pass
    
    def get_name(self) -> str:
        """Get adapter name"""
        return self.name
    