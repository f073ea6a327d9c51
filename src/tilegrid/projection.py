"""Web Mercator helpers built on the tile grid.

Metric bounds, per-zoom resolution, vectorised point to id lookups and
conversion to and from ``mercantile`` tiles.
"""
import logging
import math
from typing import Tuple

import mercantile
import numpy as np
from pyproj import Transformer

from .tile import MAX_LATITUDE, ANTIMERIDIAN_NUDGE, MAX_ZOOM, Tile, zoom_base_id

logger = logging.getLogger(__name__)

WEBMERCATOR_RADIUS = 6378137.0
TILE_SIZE = 256

# Web Mercator transformer (lon/lat to x/y meters)
_transformer_to_webmerc = Transformer.from_crs(
    "EPSG:4326", "EPSG:3857", always_xy=True
)


def zoom_to_resolution_m(zoom: int, tile_size: int = TILE_SIZE) -> float:
    """Convert Web Mercator zoom level to resolution in meters per pixel.

    Parameters
    ----------
    zoom : int
        Web Mercator zoom level (slippy-map convention).
    tile_size : int, optional
        Tile edge in pixels, by default 256.

    Returns
    -------
    float
        Resolution in meters per pixel at the equator.
    """
    return (2 * math.pi * WEBMERCATOR_RADIUS) / (tile_size * 2**zoom)


def lonlat_to_webmercator(lons: np.ndarray, lats: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Transform longitude/latitude arrays to Web Mercator coordinates.

    Parameters
    ----------
    lons : numpy.ndarray
        Longitude values in degrees.
    lats : numpy.ndarray
        Latitude values in degrees.

    Returns
    -------
    tuple of numpy.ndarray
        (x, y) coordinates in Web Mercator meters.
    """
    x, y = _transformer_to_webmerc.transform(np.asarray(lons, dtype=float),
                                             np.asarray(lats, dtype=float))
    return np.asarray(x), np.asarray(y)


def mercator_bounds(tile: Tile) -> Tuple[float, float, float, float]:
    """Return the bounds of a tile in EPSG:3857 meters.

    Parameters
    ----------
    tile : Tile
        Tile to project.

    Returns
    -------
    tuple of float
        ``(x_min, y_min, x_max, y_max)`` in meters.
    """
    xs, ys = lonlat_to_webmercator([tile.left, tile.right],
                                   [tile.bottom, tile.top])
    return float(xs[0]), float(ys[0]), float(xs[1]), float(ys[1])


def location_ids(lats, lons, zoom: int) -> np.ma.MaskedArray:
    """Return the ids of the tiles containing many points at once.

    Same projection as ``Tile.create_around_location_id``, evaluated on
    numpy arrays.

    Parameters
    ----------
    lats : array_like
        Latitudes in degrees.
    lons : array_like
        Longitudes in degrees, same shape as ``lats``.
    zoom : int
        Zoom level, at most ``MAX_ZOOM``.

    Returns
    -------
    numpy.ma.MaskedArray
        ``uint64`` ids; points with a latitude outside the Web Mercator
        range are masked.

    Raises
    ------
    ValueError
        If ``zoom`` is outside ``[0, MAX_ZOOM]`` or the shapes differ.
    """
    if zoom < 0 or zoom > MAX_ZOOM:
        raise ValueError(f"zoom must be in [0, {MAX_ZOOM}], got {zoom}")
    lats = np.asarray(lats, dtype=np.float64)
    lons = np.asarray(lons, dtype=np.float64)
    if lats.shape != lons.shape:
        raise ValueError(f"Shape mismatch: {lats.shape} != {lons.shape}")

    lons = np.where(lons == 180, lons - ANTIMERIDIAN_NUDGE, lons)
    invalid = (lats > MAX_LATITUDE) | (lats < -MAX_LATITUDE)
    if invalid.any():
        logger.debug(f"{int(invalid.sum())} points outside Web Mercator range")
    # Placeholder latitude keeps tan/cos finite under the mask.
    lat_rad = np.radians(np.where(invalid, 0.0, lats))

    n = 1 << zoom
    x = np.floor((lons + 180.0) / 360.0 * n)
    y = np.floor((1.0 - np.log(np.tan(lat_rad) + 1.0 / np.cos(lat_rad)) / np.pi)
                 / 2.0 * n)

    ids = (np.uint64(zoom_base_id(zoom))
           + x.astype(np.uint64)
           + y.astype(np.uint64) * np.uint64(n))
    return np.ma.masked_array(ids, mask=invalid)


def to_mercantile(tile: Tile) -> mercantile.Tile:
    """Convert a tile to a ``mercantile.Tile``."""
    return mercantile.Tile(x=tile.x, y=tile.y, z=tile.zoom)


def from_mercantile(tile: mercantile.Tile) -> Tile:
    """Convert a ``mercantile.Tile`` to a tile."""
    return Tile(tile.x, tile.y, tile.z)
