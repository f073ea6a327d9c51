"""Rectangular blocks of tiles at a single zoom level."""
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class TileRange:
    """A closed rectangle of tiles ``[x_min, x_max] x [y_min, y_max]``.

    All bounds are inclusive. Corners are taken as given: a range with
    ``x_min > x_max`` or ``y_min > y_max`` is simply empty.

    Iteration is row-major (``y`` outer, ``x`` inner) and can be repeated
    any number of times.

    Parameters
    ----------
    x_min, y_min : int
        Column and row of the north-west corner tile.
    x_max, y_max : int
        Column and row of the south-east corner tile.
    zoom : int
        Zoom level shared by every tile in the range.
    """

    x_min: int
    y_min: int
    x_max: int
    y_max: int
    zoom: int

    @property
    def width(self) -> int:
        return max(self.x_max - self.x_min + 1, 0)

    @property
    def height(self) -> int:
        return max(self.y_max - self.y_min + 1, 0)

    @property
    def count(self) -> int:
        """Number of tiles in the range."""
        return self.width * self.height

    @property
    def is_valid(self) -> bool:
        """True if both corners lie on the grid of the zoom level."""
        if self.zoom < 0:
            return False
        size = 1 << self.zoom
        return all(0 <= value < size for value in
                   (self.x_min, self.y_min, self.x_max, self.y_max))

    def __len__(self):
        return self.count

    def __iter__(self) -> Iterator["Tile"]:
        from .tile import Tile

        for y in range(self.y_min, self.y_max + 1):
            for x in range(self.x_min, self.x_max + 1):
                yield Tile(x, y, self.zoom)

    def __contains__(self, tile) -> bool:
        from .tile import Tile

        if not isinstance(tile, Tile):
            return False
        return (tile.zoom == self.zoom and
                self.x_min <= tile.x <= self.x_max and
                self.y_min <= tile.y <= self.y_max)

    def ids(self) -> Iterator[int]:
        """Yield the global ids of the range in iteration order.

        Tiles are not built, so this is the cheap way to list cache keys.
        """
        from .tile import tile_id

        for y in range(self.y_min, self.y_max + 1):
            for x in range(self.x_min, self.x_max + 1):
                yield tile_id(x, y, self.zoom)

    def __str__(self):
        return (f"{self.x_min}x-{self.y_min}y:{self.x_max}x-{self.y_max}y"
                f"@{self.zoom}z")
