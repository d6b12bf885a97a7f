"""
polygon-to-tile-list

Turns bounding boxes and vector geometries into deduplicated tile expiry lists.
"""

__version__ = "1.0.0"
