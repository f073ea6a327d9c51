"""Tile identity and coordinate transforms.

A tile is addressed by ``(x, y, zoom)`` in the slippy-map convention: the
world is split into ``2**zoom`` columns and rows, ``x`` grows eastward and
``y`` grows southward. Every tile of every zoom level also has a global id
that linearises the quad-tree breadth first::

    id = zoom_base_id(zoom) + x + y * 2**zoom

where ``zoom_base_id(zoom)`` counts the tiles of all shallower levels. The
id format is stable and meant to be stored by external systems (cache keys
and the like), so it must not change.

Geographic bounds follow spherical Web Mercator and are kept in single
precision to stay compatible with bounds stored elsewhere.
"""
import logging
import math
import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional, Tuple

import numpy as np

from .exceptions import InvalidTileError, InvalidZoomError, TileIdOutOfRangeError
from .tile_range import TileRange

logger = logging.getLogger(__name__)

# Latitude limit of the Web Mercator square, in degrees.
MAX_LATITUDE = 85.0511
ANTIMERIDIAN_NUDGE = 1e-6

# Deepest zoom whose ids all fit in an unsigned 64-bit integer.
MAX_ZOOM = 31

_TILE_PATTERN = re.compile(r"^\s*(-?\d+)x-(-?\d+)y@(-?\d+)z\s*$")


def zoom_base_id(zoom: int) -> int:
    """Return the id of tile (0, 0) at ``zoom``.

    This is the number of tiles on all zoom levels strictly below
    ``zoom``, ``(4**zoom - 1) / 3``, computed with exact integers.

    Parameters
    ----------
    zoom : int
        Zoom level, must be non-negative.

    Returns
    -------
    int
        Global id of the first tile at ``zoom``.

    Raises
    ------
    ValueError
        If ``zoom`` is negative.
    """
    if zoom < 0:
        raise ValueError(f"zoom must be non-negative, got {zoom}")
    return ((1 << (2 * zoom)) - 1) // 3


# Last id of the 64-bit id space.
MAX_TILE_ID = zoom_base_id(MAX_ZOOM + 1) - 1


def tile_id(x: int, y: int, zoom: int) -> int:
    """Return the global id of the tile at ``(x, y, zoom)``.

    No range check is done on ``x`` and ``y``; ids of tiles outside the
    grid are not meaningful.
    """
    return zoom_base_id(zoom) + x + y * (1 << zoom)


def zoom_for_id(global_id: int) -> int:
    """Return the zoom level a global id belongs to.

    Walks up from zoom 0 until the next level's base id passes ``global_id``.

    Raises
    ------
    TileIdOutOfRangeError
        If ``global_id`` is negative or beyond ``MAX_TILE_ID``.
    """
    if global_id < 0 or global_id > MAX_TILE_ID:
        raise TileIdOutOfRangeError(
            f"Tile id {global_id} is outside [0, {MAX_TILE_ID}]")
    zoom = 0
    while zoom_base_id(zoom + 1) <= global_id:
        zoom += 1
    return zoom


def tile_xy_for_location(lat: float, lon: float,
                         zoom: int) -> Optional[Tuple[int, int]]:
    """Project a geographic point onto the tile grid.

    Parameters
    ----------
    lat : float
        Latitude in degrees.
    lon : float
        Longitude in degrees. Exactly 180 is moved just west of the
        antimeridian so it lands in the last column.
    zoom : int
        Zoom level of the grid.

    Returns
    -------
    tuple of int or None
        ``(x, y)`` of the tile containing the point, or None when the
        latitude is outside the Web Mercator range.
    """
    if lon == 180:
        lon = lon - ANTIMERIDIAN_NUDGE
    if lat > MAX_LATITUDE or lat < -MAX_LATITUDE:
        logger.debug(f"Latitude {lat} outside Web Mercator range")
        return None

    n = 1 << zoom
    x = math.floor((lon + 180.0) / 360.0 * n)
    lat_rad = lat * math.pi / 180.0
    y = math.floor((1.0 - math.log(math.tan(lat_rad) +
                                   1.0 / math.cos(lat_rad)) / math.pi) / 2.0 * n)
    return x, y


def _single(value):
    """Round a double to the nearest single precision value."""
    return float(np.float32(value))


def _tile_lat(y, n):
    merc = math.pi - (2.0 * math.pi * y) / n
    return 180.0 / math.pi * math.atan(math.sinh(merc))


@dataclass(frozen=True)
class Tile:
    """A map tile at a zoom level.

    Tiles are not validated on construction: arithmetic on ``x``, ``y``
    or ``zoom`` (a parent of a zoom 0 tile, a neighbour past the grid
    edge) gives a tile that is only caught by ``is_valid``.

    Parameters
    ----------
    x : int
        Column, counted eastward from the antimeridian.
    y : int
        Row, counted southward from the northern edge.
    zoom : int
        Zoom level, 0 is a single tile covering the world.

    Attributes
    ----------
    left, right : float
        Western and eastern longitude in degrees (single precision).
    top, bottom : float
        Northern and southern latitude in degrees (single precision).
    center_lat, center_lon : float
        Midpoints of the bounds.
    """

    x: int
    y: int
    zoom: int
    left: float = field(init=False, repr=False, compare=False)
    right: float = field(init=False, repr=False, compare=False)
    top: float = field(init=False, repr=False, compare=False)
    bottom: float = field(init=False, repr=False, compare=False)
    center_lat: float = field(init=False, repr=False, compare=False)
    center_lon: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        n = 2.0 ** self.zoom
        left = np.float32(self.x / n * 360.0 - 180.0)
        right = np.float32((self.x + 1) / n * 360.0 - 180.0)
        top = np.float32(_tile_lat(self.y, n))
        bottom = np.float32(_tile_lat(self.y + 1, n))

        object.__setattr__(self, "left", float(left))
        object.__setattr__(self, "right", float(right))
        object.__setattr__(self, "top", float(top))
        object.__setattr__(self, "bottom", float(bottom))
        object.__setattr__(self, "center_lat", _single((top + bottom) / 2.0))
        object.__setattr__(self, "center_lon", _single((left + right) / 2.0))

    @classmethod
    def from_id(cls, global_id: int) -> "Tile":
        """Decode a global id into its tile.

        Parameters
        ----------
        global_id : int
            Global tile id in ``[0, MAX_TILE_ID]``.

        Returns
        -------
        Tile
            The tile with that id.

        Raises
        ------
        TileIdOutOfRangeError
            If the id is outside the 64-bit id space.
        """
        zoom = zoom_for_id(global_id)
        local = global_id - zoom_base_id(zoom)
        width = 1 << zoom
        logger.debug(f"Decoded id {global_id} at zoom {zoom}")
        return cls(local % width, local // width, zoom)

    @classmethod
    def create_around_location(cls, lat: float, lon: float,
                               zoom: int) -> Optional["Tile"]:
        """Return the tile containing a point, or None if the latitude is
        outside the Web Mercator range."""
        xy = tile_xy_for_location(lat, lon, zoom)
        if xy is None:
            return None
        return cls(xy[0], xy[1], zoom)

    @staticmethod
    def create_around_location_id(lat: float, lon: float,
                                  zoom: int) -> Optional[int]:
        """Return the id of the tile containing a point without building it.

        None is returned for latitudes outside the Web Mercator range.
        """
        xy = tile_xy_for_location(lat, lon, zoom)
        if xy is None:
            return None
        return tile_id(xy[0], xy[1], zoom)

    @classmethod
    def parse(cls, text: str) -> "Tile":
        """Parse the ``"{x}x-{y}y@{zoom}z"`` form produced by ``str()``.

        Raises
        ------
        InvalidTileError
            If ``text`` is not in that form.
        """
        match = _TILE_PATTERN.match(text)
        if match is None:
            raise InvalidTileError(f"Cannot parse tile from {text!r}")
        x, y, zoom = (int(value) for value in match.groups())
        return cls(x, y, zoom)

    @cached_property
    def id(self) -> int:
        """Global id of this tile.

        Raises
        ------
        InvalidTileError
            If the zoom is negative.
        """
        if self.zoom < 0:
            raise InvalidTileError(f"Tile {self} has a negative zoom and no id")
        return tile_id(self.x, self.y, self.zoom)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounds as ``(left, bottom, right, top)`` in degrees."""
        return self.left, self.bottom, self.right, self.top

    @property
    def is_valid(self) -> bool:
        """True if the tile lies on the grid of its zoom level."""
        if self.x >= 0 and self.y >= 0 and self.zoom >= 0:
            size = 1 << self.zoom
            return self.x < size and self.y < size
        return False

    @property
    def parent(self) -> "Tile":
        """The tile one zoom level up containing this one.

        Not guarded at zoom 0, where the result has zoom -1.
        """
        return Tile(self.x // 2, self.y // 2, self.zoom - 1)

    @property
    def children(self) -> Tuple["Tile", ...]:
        """The four tiles one zoom level down, in row-major order."""
        return tuple(self.get_sub_tiles(self.zoom + 1))

    def get_sub_tiles(self, zoom: int) -> TileRange:
        """Return the range of tiles covering this tile at a deeper zoom.

        Parameters
        ----------
        zoom : int
            Target zoom level, at least this tile's zoom.

        Returns
        -------
        TileRange
            The descendants at ``zoom``; a single tile range when ``zoom``
            equals this tile's zoom.

        Raises
        ------
        InvalidZoomError
            If ``zoom`` is shallower than this tile's zoom.
        """
        if self.zoom > zoom:
            raise InvalidZoomError(
                f"Subtiles can only be calculated for higher zooms, "
                f"got {zoom} for a tile at zoom {self.zoom}")

        if self.zoom == zoom:
            return TileRange(self.x, self.y, self.x, self.y, self.zoom)

        factor = 1 << (zoom - self.zoom)
        return TileRange(
            self.x * factor,
            self.y * factor,
            self.x * factor + factor - 1,
            self.y * factor + factor - 1,
            zoom)

    def get_sub_tile_id_for(self, lat: float, lon: float) -> int:
        """Return the id of the child at ``zoom + 1`` containing a point.

        The point is compared with this tile's centre. A point exactly on
        the centre goes to the north-east child.
        """
        x = self.x * 2
        y = self.y * 2
        if lon >= self.center_lon:
            x += 1
        if lat < self.center_lat:
            y += 1
        return tile_id(x, y, self.zoom + 1)

    def _grid_size(self) -> int:
        if self.zoom < 0:
            raise InvalidTileError(f"Tile {self} has a negative zoom and no grid")
        return 1 << self.zoom

    def invert_x(self) -> "Tile":
        """Mirror the column, ``2**zoom - x - 1``.

        Raises
        ------
        InvalidTileError
            If the zoom is negative.
        """
        return Tile(self._grid_size() - self.x - 1, self.y, self.zoom)

    def invert_y(self) -> "Tile":
        """Mirror the row, ``2**zoom - y - 1``.

        Converts between top-origin (XYZ) and bottom-origin (TMS) rows.

        Raises
        ------
        InvalidTileError
            If the zoom is negative.
        """
        return Tile(self.x, self._grid_size() - self.y - 1, self.zoom)

    def __str__(self):
        return f"{self.x}x-{self.y}y@{self.zoom}z"
