"""
Quadkey codec.

A quadkey packs a tile's x and y into one integer with the bits interleaved,
most significant first: Y(z-1) X(z-1) Y(z-2) X(z-2) ... Y0 X0. Dropping the
lowest 2*dz bits of a quadkey at zoom z gives the quadkey of the ancestor tile
at zoom z - dz.
"""

from typing import Tuple

MAX_ZOOM = 32


def xy_to_quadkey(x: int, y: int, zoom: int) -> int:
    """Interleave the lowest `zoom` bits of x and y into a quadkey"""
    quadkey = 0
    for z in range(zoom):
        quadkey |= (x & (1 << z)) << z
        quadkey |= (y & (1 << z)) << (z + 1)
    return quadkey


def quadkey_to_xy(quadkey: int, zoom: int) -> Tuple[int, int]:
    """Extract (x, y) from a quadkey valid at `zoom`"""
    x = 0
    y = 0
    for z in range(zoom, 0, -1):
        # y bit of level z sits at 2z-1, x bit at 2z-2
        y |= (quadkey & (1 << (2 * z - 1))) >> z
        x |= (quadkey & (1 << (2 * (z - 1)))) >> (z - 1)
    return x, y
