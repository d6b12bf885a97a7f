#!/usr/bin/env python3
"""
Tests for TileCalculator, BoundingBox and ZoomRange
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from tilelist.exceptions.tile_list_exceptions import BoundingBoxParseError, ValidationError
from tilelist.models.tile import Tile
from tilelist.utils import projection
from tilelist.utils.tile_calculator import BoundingBox, TileCalculator, ZoomRange

from tile_helpers import as_tuple, deg2num, parent


class TestBoundingBox:
    """Test cases for bounding box parsing"""
    
    def test_default_is_world_without_polar_caps(self):
        """Default box spans the world between 83S and 83N"""
        assert BoundingBox().as_list() == [-180, -83, 180, 83]
    
    def test_from_str(self):
        """Comma separated values are parsed in lon/lat order"""
        bbox = BoundingBox.from_str("-0.1,51.5,0.1,51.6")
        assert bbox == BoundingBox(-0.1, 51.5, 0.1, 51.6)
    
    def test_from_str_ignores_extra_elements(self):
        """Only the first four elements are used"""
        assert BoundingBox.from_str("1,2,3,4,5") == BoundingBox(1, 2, 3, 4)
    
    @pytest.mark.parametrize("value", ["", "1,2,3", "1;2;3;4"])
    def test_from_str_too_few_elements(self, value):
        """Less than four elements is a parse error"""
        with pytest.raises(BoundingBoxParseError):
            BoundingBox.from_str(value)
    
    def test_from_str_not_numeric(self):
        """Non numeric elements are a parse error"""
        with pytest.raises(BoundingBoxParseError):
            BoundingBox.from_str("a,b,c,d")
    
    def test_parse_error_is_validation_error(self):
        """Parse errors abort the run like other validation errors"""
        assert issubclass(BoundingBoxParseError, ValidationError)


class TestZoomRange:
    """Test cases for ZoomRange"""
    
    @pytest.mark.parametrize("zoom", range(0, 5))
    def test_whole_world(self, zoom):
        """The default box covers all tiles at low zoom levels"""
        tile_range = ZoomRange.from_bbox_geographic(BoundingBox(), zoom)
        assert tile_range == ZoomRange.whole_world(zoom)
        assert tile_range.xmax == tile_range.ymax == (1 << zoom) - 1
    
    @pytest.mark.parametrize("zoom", [0, 5, 10, 20])
    def test_whole_world_columns(self, zoom):
        """Longitude -180..180 covers all columns at any zoom"""
        tile_range = ZoomRange.from_bbox_geographic(BoundingBox(), zoom)
        assert tile_range.xmin == 0
        assert tile_range.xmax == (1 << zoom) - 1
    
    def test_polar_caps_excluded_at_high_zoom(self):
        """At zoom 10 the 83 degree limit leaves out the northernmost rows"""
        tile_range = ZoomRange.from_bbox_geographic(BoundingBox(), 10)
        assert tile_range.ymin > 0
        assert tile_range.ymax < 1023
    
    def test_y_is_inverted(self):
        """ymin comes from the northern edge"""
        tile_range = ZoomRange.from_bbox_geographic(BoundingBox(-0.1, 51.5, 0.1, 51.6), 12)
        assert tile_range.ymin < tile_range.ymax
        assert tile_range.xmin < tile_range.xmax
    
    def test_webmerc_matches_geographic(self):
        """Projected and geographic boxes give the same range"""
        bbox = BoundingBox(28.5, 40.8, 29.5, 41.2)
        expected = ZoomRange.from_bbox_geographic(bbox, 11)
        actual = ZoomRange.from_bbox_webmerc(
            projection.lon_to_x(bbox.min_lon), projection.lat_to_y(bbox.min_lat),
            projection.lon_to_x(bbox.max_lon), projection.lat_to_y(bbox.max_lat), 11)
        assert actual == expected
    
    def test_width_and_height_are_index_differences(self):
        """A single tile has width and height 0"""
        tile_range = ZoomRange(3, 4, 3, 4)
        assert tile_range.width == 0
        assert tile_range.height == 0
        assert tile_range.tile_count() == 1
        assert ZoomRange(0, 0, 2, 1).tile_count() == 6
    
    def test_tiles_order(self):
        """Tiles are iterated x outer, y inner"""
        assert list(ZoomRange(0, 0, 1, 1).tiles()) == [(0, 0), (0, 1), (1, 0), (1, 1)]
    
    def test_clamp_to_world(self):
        """Indices outside the world are cut to 0 and the last index"""
        assert ZoomRange(-2, 3, 20, 17).clamp(4) == ZoomRange(0, 3, 15, 15)
        assert ZoomRange(1, 1, 2, 2).clamp(4) == ZoomRange(1, 1, 2, 2)
    
    def test_clamp_outside_world_is_none(self):
        """A range entirely outside the world leaves nothing"""
        assert ZoomRange(16, 0, 18, 3).clamp(4) is None
        assert ZoomRange(0, -3, 3, -1).clamp(4) is None


class TestTileCalculator:
    """Test cases for TileCalculator class"""
    
    def test_point_bbox_matches_slippy_tile(self):
        """A degenerate bbox at New York covers the slippy map tile of the position"""
        bbox = BoundingBox(-74.0060, 40.7128, -74.0060, 40.7128)
        tiles = list(TileCalculator.get_tiles_for_bbox(bbox, 10, 10))
        x, y = deg2num(40.7128, -74.0060, 10)
        assert x == 301
        assert [(tile.x, tile.y) for tile in tiles] == [(x, y)]
    
    def test_get_tiles_for_bbox(self):
        """Test bbox tile calculation"""
        bbox = BoundingBox(28.5, 40.8, 29.5, 41.2)  # Istanbul
        min_zoom = 10
        max_zoom = 12
        
        tiles = list(TileCalculator.get_tiles_for_bbox(bbox, min_zoom, max_zoom))
        
        assert len(tiles) > 0
        assert len(set(tiles)) == len(tiles)
        for tile in tiles:
            assert min_zoom <= tile.zoom <= max_zoom
        # zoom ascending, sorted within a zoom
        keys = [as_tuple(tile) for tile in tiles]
        assert keys == sorted(keys)
    
    def test_bbox_tiles_have_parents_in_list(self):
        """Every tile's parent is listed on the coarser zoom"""
        bbox = BoundingBox(-0.1, 51.5, 0.1, 51.6)
        tiles = set(TileCalculator.get_tiles_for_bbox(bbox, 10, 12))
        for tile in tiles:
            if tile.zoom > 10:
                assert parent(tile) in tiles
    
    def test_calculate_tile_count(self):
        """Test tile count calculation"""
        bbox = BoundingBox(28.5, 40.8, 29.5, 41.2)
        count = TileCalculator.calculate_tile_count(bbox, 10, 12)
        assert count == len(list(TileCalculator.get_tiles_for_bbox(bbox, 10, 12)))
    
    def test_tile_bounds_webmerc(self):
        """Tile 0/0/0 covers the whole Mercator plane"""
        minx, miny, maxx, maxy = TileCalculator.tile_bounds_webmerc(0, 0, 0)
        assert minx == pytest.approx(-projection.MERCATOR_MAX)
        assert miny == pytest.approx(-projection.MERCATOR_MAX)
        assert maxx == pytest.approx(projection.MERCATOR_MAX)
        assert maxy == pytest.approx(projection.MERCATOR_MAX)
    
    def test_edge_cases(self):
        """Test edge cases"""
        # Zero zoom
        origin = BoundingBox(0, 0, 0, 0)
        assert list(TileCalculator.get_tiles_for_bbox(origin, 0, 0)) == [Tile(0, 0, 0)]
        
        # Maximum zoom
        tiles = list(TileCalculator.get_tiles_for_bbox(origin, 20, 20))
        assert tiles == [Tile(20, 1 << 19, 1 << 19)]
    
    def test_polar_bbox_is_clamped(self):
        """A bbox reaching the pole stops at the last row"""
        bbox = BoundingBox(-10, -90, 10, -80)
        tiles = list(TileCalculator.get_tiles_for_bbox(bbox, 4, 4))
        assert {(tile.x, tile.y) for tile in tiles} == {(7, 14), (7, 15), (8, 14), (8, 15)}
        assert TileCalculator.calculate_tile_count(bbox, 4, 4) == 4
    
    def test_bbox_beyond_mercator_world_is_empty(self):
        """A bbox entirely above 85.0511 degrees covers no tiles"""
        bbox = BoundingBox(-10, 86, 10, 89)
        assert list(TileCalculator.get_tiles_for_bbox(bbox, 0, 6)) == []
        assert TileCalculator.calculate_tile_count(bbox, 0, 6) == 0


if __name__ == "__main__":
    pytest.main([__file__])
