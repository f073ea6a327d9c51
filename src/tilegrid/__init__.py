"""Tile coordinates and global tile ids for Web Mercator maps.

A ``Tile`` is addressed by ``(x, y, zoom)``, carries its geographic bounds
and a 64-bit global id that orders every tile of every zoom level. A
``TileRange`` is a rectangle of tiles at one zoom, used to walk the
descendants of a tile.
"""
from .exceptions import (InvalidTileError, InvalidZoomError, TileGridError,
                         TileIdOutOfRangeError)
from .tile import (MAX_LATITUDE, MAX_TILE_ID, MAX_ZOOM, Tile, tile_id,
                   tile_xy_for_location, zoom_base_id, zoom_for_id)
from .tile_range import TileRange

__version__ = "0.1.0"

__all__ = [
    "Tile",
    "TileRange",
    "tile_id",
    "tile_xy_for_location",
    "zoom_base_id",
    "zoom_for_id",
    "MAX_LATITUDE",
    "MAX_TILE_ID",
    "MAX_ZOOM",
    "TileGridError",
    "InvalidTileError",
    "InvalidZoomError",
    "TileIdOutOfRangeError",
]
