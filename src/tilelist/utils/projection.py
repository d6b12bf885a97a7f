"""
Spherical Web Mercator math.

Conversions between geographic coordinates, Web Mercator metres and fractional
tile indices. Tile Y grows southward while latitude grows northward.
"""

import math

EARTH_RADIUS = 6378137.0
MERCATOR_MAX = math.pi * EARTH_RADIUS  # 20037508.342789244
MAX_LATITUDE = 85.0511287798


def lon_to_x(lon: float) -> float:
    """Longitude in degrees to Web Mercator X in metres"""
    return EARTH_RADIUS * math.radians(lon)


def lat_to_y(lat: float) -> float:
    """Latitude in degrees to Web Mercator Y in metres"""
    if abs(lat) >= 90:
        return math.copysign(math.inf, lat)
    return EARTH_RADIUS * math.log(math.tan(math.pi / 4 + math.radians(lat) / 2))


def x_to_lon(x: float) -> float:
    """Web Mercator X in metres to longitude in degrees"""
    return math.degrees(x / EARTH_RADIUS)


def y_to_lat(y: float) -> float:
    """Web Mercator Y in metres to latitude in degrees"""
    return math.degrees(2 * math.atan(math.exp(y / EARTH_RADIUS)) - math.pi / 2)


def merc_x_to_tile(x: float, zoom: int) -> float:
    """Web Mercator X to a fractional tile column at the given zoom"""
    return (x + MERCATOR_MAX) / (2 * MERCATOR_MAX) * (1 << zoom)


def merc_y_to_tile(y: float, zoom: int) -> float:
    """Web Mercator Y to a fractional tile row at the given zoom"""
    return (MERCATOR_MAX - y) / (2 * MERCATOR_MAX) * (1 << zoom)


def tile_x_to_merc(x: float, zoom: int) -> float:
    """Western edge of tile column x in Web Mercator metres"""
    return x * (2 * MERCATOR_MAX) / (1 << zoom) - MERCATOR_MAX


def tile_y_to_merc(y: float, zoom: int) -> float:
    """Northern edge of tile row y in Web Mercator metres"""
    return MERCATOR_MAX - y * (2 * MERCATOR_MAX) / (1 << zoom)


def mercator_scale(lat: float) -> float:
    """
    Local linear scale factor of the Mercator projection at a latitude.

    A distance of d metres on the ground covers d * mercator_scale(lat) units
    of the Mercator plane. The latitude is clamped to the Web Mercator limit.
    """
    lat = max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))
    return 1.0 / math.cos(math.radians(lat))
