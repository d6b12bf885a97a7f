from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """Data model for a tile coordinate"""
    zoom: int
    x: int
    y: int
