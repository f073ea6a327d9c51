"""Tests for the tilegrid.tile_range module."""

import pytest

from tilegrid import Tile, TileRange


class TestIteration:
    """Tests for enumerating the tiles of a range."""

    def test_row_major_order(self):
        """Iteration should walk x within each row, rows top to bottom."""
        tiles = list(TileRange(2, 5, 3, 6, 4))
        assert tiles == [Tile(2, 5, 4), Tile(3, 5, 4), Tile(2, 6, 4), Tile(3, 6, 4)]

    def test_restartable(self):
        """A range should be iterable more than once with the same result."""
        tiles = TileRange(0, 0, 2, 2, 3)
        assert list(tiles) == list(tiles)

    def test_single_tile(self):
        """A degenerate range should hold one tile."""
        assert list(TileRange(1, 1, 1, 1, 1)) == [Tile(1, 1, 1)]

    def test_inverted_corners_are_empty(self):
        """A range with swapped corners should be empty."""
        tiles = TileRange(3, 0, 2, 0, 2)
        assert len(tiles) == 0
        assert list(tiles) == []

    def test_ids_follow_iteration(self):
        """ids() should yield the ids of the tiles in iteration order."""
        tiles = TileRange(1, 0, 3, 2, 2)
        assert list(tiles.ids()) == [tile.id for tile in tiles]

    def test_ids_of_zoom_1(self):
        """The full zoom 1 range should hold ids 1 to 4."""
        assert list(Tile(0, 0, 0).get_sub_tiles(1).ids()) == [1, 2, 3, 4]


class TestSize:
    """Tests for len, count, width and height."""

    @pytest.mark.parametrize("corners, expected", [
        ((0, 0, 0, 0), 1),
        ((0, 0, 3, 3), 16),
        ((2, 5, 4, 5), 3),
    ])
    def test_len(self, corners, expected):
        """len, count and iteration should agree on the tile count."""
        tiles = TileRange(*corners, 5)
        assert len(tiles) == expected
        assert tiles.count == expected
        assert len(list(tiles)) == expected

    def test_width_height(self):
        """width and height should count inclusive columns and rows."""
        tiles = TileRange(2, 5, 4, 8, 5)
        assert tiles.width == 3
        assert tiles.height == 4


class TestContains:
    """Tests for membership checks."""

    def test_inside(self):
        """A tile strictly inside the rectangle should be in the range."""
        assert Tile(3, 3, 4) in TileRange(2, 2, 5, 5, 4)

    def test_corners_are_inclusive(self):
        """Corner tiles should be part of the range."""
        tiles = TileRange(2, 2, 5, 5, 4)
        assert Tile(2, 2, 4) in tiles
        assert Tile(5, 5, 4) in tiles

    def test_outside(self):
        """A tile past the right edge should not be in the range."""
        assert Tile(6, 3, 4) not in TileRange(2, 2, 5, 5, 4)

    def test_other_zoom(self):
        """A tile at another zoom should never be in the range."""
        assert Tile(3, 3, 5) not in TileRange(2, 2, 5, 5, 4)

    @pytest.mark.parametrize("item", [(3, 3, 4), "3x-3y@4z", None, 3])
    def test_non_tiles_are_not_members(self, item):
        """Membership checks on anything but a Tile should be False."""
        assert item not in TileRange(2, 2, 5, 5, 4)


class TestValidity:
    """Tests for TileRange.is_valid."""

    def test_valid(self):
        """A range covering the grid should be valid."""
        assert TileRange(0, 0, 3, 3, 2).is_valid

    @pytest.mark.parametrize("corners, zoom", [
        ((0, 0, 4, 3), 2),
        ((-1, 0, 3, 3), 2),
        ((0, 0, 0, 0), -1),
    ])
    def test_invalid(self, corners, zoom):
        """Ranges with a corner off the grid should be invalid."""
        assert not TileRange(*corners, zoom).is_valid


class TestValueSemantics:
    """Tests for equality and text form."""

    def test_equality(self):
        """Ranges should compare equal on corners and zoom."""
        assert TileRange(0, 0, 1, 1, 1) == TileRange(0, 0, 1, 1, 1)
        assert TileRange(0, 0, 1, 1, 1) != TileRange(0, 0, 1, 1, 2)

    def test_str(self):
        """str should render both corners and the zoom."""
        assert str(TileRange(0, 1, 2, 3, 4)) == "0x-1y:2x-3y@4z"
