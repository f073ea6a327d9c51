"""Shared pytest fixtures for tilegrid tests."""

import pytest

from tilegrid import Tile


@pytest.fixture
def world_tile():
    """The single zoom 0 tile covering the world."""
    return Tile(0, 0, 0)


@pytest.fixture
def new_york_tile():
    """Tile at zoom 10 containing lower Manhattan."""
    return Tile.create_around_location(40.7, -74.0, 10)


@pytest.fixture
def sample_tiles():
    """Provide a spread of valid tiles across zoom levels 0-20."""
    tiles = [Tile(0, 0, 0)]
    for zoom in range(1, 21):
        last = (1 << zoom) - 1
        tiles.extend([
            Tile(0, 0, zoom),
            Tile(last, 0, zoom),
            Tile(0, last, zoom),
            Tile(last, last, zoom),
            Tile(last // 3, (2 * last) // 3, zoom),
        ])
    return tiles
