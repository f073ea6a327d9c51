"""Command-line interface for tilegrid.

Small inspection commands over the tile id scheme, built with Typer.
"""
import logging
from typing import Optional

import typer

from . import config
from .exceptions import InvalidZoomError, TileIdOutOfRangeError
from .tile import Tile, tile_id

app = typer.Typer(help="Inspect map tiles and their global ids.")


def _setup(env: str):
    if env != "DEFAULT":
        config.change_env(env)
    level_name = str(config.get("log_level")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log_level {level_name!r} in settings",
                                 param_hint="--env")
    logging.basicConfig()
    logging.getLogger().setLevel(level)


def _describe(tile: Tile) -> str:
    lines = [
        f"tile:   {tile}",
        f"id:     {tile.id}",
        f"bounds: left={tile.left} bottom={tile.bottom} "
        f"right={tile.right} top={tile.top}",
        f"center: lat={tile.center_lat} lon={tile.center_lon}",
        f"valid:  {tile.is_valid}",
    ]
    return "\n".join(lines)


@app.command()
def encode(x: int, y: int, zoom: int,
           env: str = typer.Option("DEFAULT", help="Settings environment")):
    """Print the global id of tile X Y at ZOOM."""
    _setup(env)
    if zoom < 0:
        raise typer.BadParameter("zoom must be non-negative", param_hint="ZOOM")
    typer.echo(tile_id(x, y, zoom))


@app.command()
def decode(global_id: int,
           env: str = typer.Option("DEFAULT", help="Settings environment")):
    """Print the tile with the given global id."""
    _setup(env)
    try:
        tile = Tile.from_id(global_id)
    except TileIdOutOfRangeError as err:
        raise typer.BadParameter(str(err), param_hint="GLOBAL_ID")
    typer.echo(_describe(tile))


@app.command()
def locate(lat: float, lon: float,
           zoom: Optional[int] = typer.Option(None, help="Zoom level, from settings if omitted"),
           env: str = typer.Option("DEFAULT", help="Settings environment")):
    """Print the tile containing LAT LON."""
    _setup(env)
    if zoom is None:
        zoom = int(config.get("default_zoom"))
    tile = Tile.create_around_location(lat, lon, zoom)
    if tile is None:
        typer.echo(f"Latitude {lat} is outside the Web Mercator range", err=True)
        raise typer.Exit(code=1)
    typer.echo(_describe(tile))


@app.command()
def children(x: int, y: int, zoom: int, target_zoom: int,
             ids: bool = typer.Option(False, "--ids", help="Print ids instead of tiles"),
             env: str = typer.Option("DEFAULT", help="Settings environment")):
    """List the tiles covering X Y ZOOM at TARGET_ZOOM."""
    _setup(env)
    try:
        tiles = Tile(x, y, zoom).get_sub_tiles(target_zoom)
    except InvalidZoomError as err:
        raise typer.BadParameter(str(err), param_hint="TARGET_ZOOM")
    for value in (tiles.ids() if ids else tiles):
        typer.echo(value)


if __name__ == "__main__":
    app()
