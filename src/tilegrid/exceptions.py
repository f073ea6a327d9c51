"""Exceptions raised by tilegrid."""


class TileGridError(Exception):
    """Base tilegrid error."""
    pass


class InvalidZoomError(TileGridError, ValueError):
    """Raised when a zoom level cannot be used for the requested operation."""
    pass


class TileIdOutOfRangeError(TileGridError, ValueError):
    """Raised when a global tile id lies outside the 64-bit id space."""
    pass


class InvalidTileError(TileGridError, ValueError):
    """Raised when a tile has no id or a tile description cannot be parsed."""
    pass
