class TileListException(Exception):
    """Base exception for the tile list generator"""
    pass


class ConfigurationError(TileListException):
    """Configuration related errors"""
    pass


class ValidationError(TileListException):
    """Validation related errors"""
    pass


class BoundingBoxParseError(ValidationError):
    """Bounding box string could not be parsed"""
    pass


class InputSourceError(TileListException):
    """Input data source could not be opened or read"""
    pass


class CoordinateTransformError(TileListException):
    """Reprojection into the working projection failed"""
    pass


class UnsupportedGeometryError(TileListException):
    """Geometry type is not one of the supported kinds"""
    pass


class OutputError(TileListException):
    """Output destination related errors"""
    pass
