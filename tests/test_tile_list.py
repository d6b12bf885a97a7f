#!/usr/bin/env python3
"""
Tests for the dirty tile set and its collapse onto coarser zoom levels
"""

import os
import random
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from tilelist.core.tile_list import TileList
from tilelist.exceptions.tile_list_exceptions import ValidationError
from tilelist.models.tile import Tile
from tilelist.utils.quadkey import xy_to_quadkey

from tile_helpers import parent, tiles_by_zoom


def random_tiles(seed, count, zoom):
    rng = random.Random(seed)
    n = 1 << zoom
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(count)]


class TestTileListInsertion:
    """Test cases for TileList.add_tile"""
    
    def test_consecutive_duplicate(self):
        """Adding the same tile twice in a row stores it once"""
        tile_list = TileList(10)
        tile_list.add_tile(5, 7)
        tile_list.add_tile(5, 7)
        assert len(tile_list) == 1
    
    def test_non_consecutive_duplicate(self):
        """Adding the same tile again later stores it once"""
        tile_list = TileList(10)
        tile_list.add_tile(5, 7)
        tile_list.add_tile(6, 7)
        tile_list.add_tile(5, 7)
        assert len(tile_list) == 2
    
    def test_first_call_inserts_origin(self):
        """The sentinel never matches a real tile, so (0, 0) is stored"""
        tile_list = TileList(0)
        tile_list.add_tile(0, 0)
        assert tile_list.quadkeys() == [0]
    
    def test_shortcut_has_no_observable_effect(self):
        """Repeating calls does not change the stored set"""
        tiles = random_tiles(1, 300, 8)
        plain = TileList(8)
        for x, y in tiles:
            plain.add_tile(x, y)
        repeated = TileList(8)
        for x, y in tiles:
            repeated.add_tile(x, y)
            repeated.add_tile(x, y)
        assert plain.quadkeys() == repeated.quadkeys()
    
    def test_quadkeys_sorted(self):
        """quadkeys() returns ascending keys at maxzoom"""
        tile_list = TileList(4)
        for x, y in [(3, 3), (0, 0), (1, 2)]:
            tile_list.add_tile(x, y)
        assert tile_list.quadkeys() == sorted(xy_to_quadkey(x, y, 4) for x, y in [(3, 3), (0, 0), (1, 2)])
    
    def test_invalid_maxzoom(self):
        """maxzoom above 32 does not fit into 64 bit quadkeys"""
        with pytest.raises(ValidationError):
            TileList(33)


class TestTileListOutput:
    """Test cases for TileList.iter_tiles"""
    
    def test_empty(self):
        """No dirty tiles, no output"""
        assert list(TileList(12).iter_tiles(0)) == []
    
    def test_single_tile_all_levels(self):
        """One tile yields exactly one ancestor on each level"""
        tile_list = TileList(14)
        tile_list.add_tile(8186, 5447)
        tiles = list(tile_list.iter_tiles(10))
        assert [tile.zoom for tile in tiles] == [14, 13, 12, 11, 10]
        for tile in tiles:
            assert tile == parent(Tile(14, 8186, 5447), 14 - tile.zoom)
    
    def test_siblings_collapse(self):
        """Four siblings share one parent"""
        tile_list = TileList(2)
        for x, y in [(0, 0), (1, 0), (0, 1), (1, 1)]:
            tile_list.add_tile(x, y)
        tiles = list(tile_list.iter_tiles(0))
        assert tiles == [
            Tile(2, 0, 0), Tile(1, 0, 0), Tile(0, 0, 0),
            Tile(2, 1, 0), Tile(2, 0, 1), Tile(2, 1, 1),
        ]
    
    def test_minzoom_equals_maxzoom(self):
        """Only the max zoom level is written"""
        tile_list = TileList(5)
        for x, y in [(1, 1), (2, 2)]:
            tile_list.add_tile(x, y)
        assert [tile.zoom for tile in tile_list.iter_tiles(5)] == [5, 5]
    
    def test_collapse_completeness(self):
        """Each level holds exactly the distinct ancestors of the dirty tiles"""
        maxzoom = 12
        tiles = random_tiles(3, 2000, maxzoom)
        # clustered tiles share ancestors on intermediate levels
        tiles += [(2040 + i % 13, 1360 + i // 13) for i in range(169)]
        tile_list = TileList(maxzoom)
        for x, y in tiles:
            tile_list.add_tile(x, y)
        
        grouped = tiles_by_zoom(tile_list, 4)
        for zoom in range(4, maxzoom + 1):
            dz = maxzoom - zoom
            expected = {(x >> dz, y >> dz) for x, y in tiles}
            actual = [(tile.x, tile.y) for tile in grouped[zoom]]
            assert len(actual) == len(set(actual))
            assert set(actual) == expected
    
    def test_each_level_in_quadkey_order(self):
        """Tiles of one zoom level come out with ascending quadkeys"""
        tile_list = TileList(10)
        for x, y in random_tiles(5, 500, 10):
            tile_list.add_tile(x, y)
        for zoom, tiles in tiles_by_zoom(tile_list, 3).items():
            keys = [xy_to_quadkey(tile.x, tile.y, zoom) for tile in tiles]
            assert keys == sorted(set(keys))
    
    def test_invalid_minzoom(self):
        """minzoom above maxzoom is rejected"""
        tile_list = TileList(5)
        with pytest.raises(ValidationError):
            list(tile_list.iter_tiles(6))


if __name__ == "__main__":
    pytest.main([__file__])
