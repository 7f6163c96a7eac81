"""
Maxar ARD grid cell encoding and decoding.

Each UTM zone is covered by one square tile 20 480 km on a side, centered
on the zone origin (central meridian at the equator). The tile is split
into quadrants recursively; a quadkey lists the quadrant chosen at each
level, most significant first:

    0 | 1
    --+--
    2 | 3

i.e. digit = x bit + 2 * y bit, where columns count eastward from the west
edge and rows count southward from the north edge. At level 12 the cells
are 5 km squares, and ``-99.09358, 19.29676`` falls in ``14/033113131312``.

A decoded cell is represented by its center.
"""

import math
from typing import List, Tuple

from ardcoord.core.config import get_settings
from ardcoord.core.constants import (
    FALSE_EASTING,
    FALSE_NORTHING_SOUTH,
    MAX_LEVEL,
    QUADKEY_DIGITS,
    TOP_TILE_SIZE,
)
from ardcoord.core.errors import GridRangeError, InvalidLevel
from ardcoord.models.coordinates import CellBounds, GridCell, Hemisphere, UtmCoordinate


HALF_TILE = TOP_TILE_SIZE / 2


def _true_y(coordinate: UtmCoordinate) -> float:
    """Signed meters north of the equator, without false northing."""
    if coordinate.hemisphere is Hemisphere.SOUTH:
        return coordinate.northing - FALSE_NORTHING_SOUTH
    return coordinate.northing


def _check_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= MAX_LEVEL:
        raise InvalidLevel(level, MAX_LEVEL)


def cell_indices(cell: GridCell) -> Tuple[int, int]:
    """
    Get the column and row of a cell within its level.

    Args:
        cell: Grid cell

    Returns:
        Tuple of (column, row); row 0 is the northernmost
    """
    ix = 0
    iy = 0
    for digit in cell.key:
        quadrant = QUADKEY_DIGITS.index(digit)
        ix = (ix << 1) | (quadrant & 1)
        iy = (iy << 1) | (quadrant >> 1)
    return ix, iy


def decode_bounds(cell: GridCell) -> CellBounds:
    """
    Decode a grid cell to its UTM bounding box.

    Args:
        cell: Grid cell

    Returns:
        Bounding box in the cell's zone, northings in the hemisphere of the
        cell center
    """
    size = cell.cell_size
    ix, iy = cell_indices(cell)

    min_x = FALSE_EASTING - HALF_TILE + ix * size
    max_y = HALF_TILE - iy * size
    center_y = max_y - size / 2

    hemisphere = Hemisphere.SOUTH if center_y < 0 else Hemisphere.NORTH
    offset = FALSE_NORTHING_SOUTH if hemisphere is Hemisphere.SOUTH else 0.0

    return CellBounds(
        zone=cell.zone,
        hemisphere=hemisphere,
        min_easting=min_x,
        min_northing=max_y - size + offset,
        max_easting=min_x + size,
        max_northing=max_y + offset,
    )


def decode(cell: GridCell) -> UtmCoordinate:
    """
    Decode a grid cell to its representative point, the cell center.

    The point is in the cell's own zone, which need not be the proper zone
    of that point; see ``normalize_utm``.

    Args:
        cell: Grid cell

    Returns:
        UTM coordinate of the cell center
    """
    bounds = decode_bounds(cell)
    easting, northing = bounds.center
    return UtmCoordinate(
        zone=cell.zone,
        hemisphere=bounds.hemisphere,
        easting=easting,
        northing=northing,
    )


def encode(coordinate: UtmCoordinate, level: int) -> GridCell:
    """
    Encode a UTM point as the cell containing it at a given level.

    Cells own their west and north edges.

    Args:
        coordinate: UTM coordinate
        level: Quadkey length (1-12)

    Returns:
        Grid cell in the coordinate's zone

    Raises:
        InvalidLevel: If level is outside 1..12
        GridRangeError: If the point lies outside the zone's tile
    """
    _check_level(level)

    size = TOP_TILE_SIZE / 2**level
    ix = math.floor((coordinate.easting - FALSE_EASTING + HALF_TILE) / size)
    iy = math.floor((HALF_TILE - _true_y(coordinate)) / size)

    cells_per_side = 2**level
    if not (0 <= ix < cells_per_side and 0 <= iy < cells_per_side):
        raise GridRangeError(coordinate.easting, coordinate.northing, coordinate.zone)

    digits = []
    for shift in range(level - 1, -1, -1):
        quadrant = ((ix >> shift) & 1) + 2 * ((iy >> shift) & 1)
        digits.append(QUADKEY_DIGITS[quadrant])

    return GridCell(zone=coordinate.zone, key="".join(digits))


def encode_finest(coordinate: UtmCoordinate) -> GridCell:
    """
    Encode a UTM point at the configured finest level (12 by default).

    Args:
        coordinate: UTM coordinate

    Returns:
        Grid cell in the coordinate's zone

    Raises:
        GridRangeError: If the point lies outside the zone's tile
    """
    return encode(coordinate, get_settings().grid_level)


def parent(cell: GridCell) -> GridCell:
    """
    Get the enclosing cell one level up.

    Raises:
        InvalidLevel: If the cell is already at level 1
    """
    if cell.level == 1:
        raise InvalidLevel(0, MAX_LEVEL)
    return GridCell(zone=cell.zone, key=cell.key[:-1])


def children(cell: GridCell) -> List[GridCell]:
    """
    Get the four cells one level down, in quadkey order.

    Raises:
        InvalidLevel: If the cell is already at the finest level
    """
    if cell.level == MAX_LEVEL:
        raise InvalidLevel(cell.level + 1, MAX_LEVEL)
    return [GridCell(zone=cell.zone, key=cell.key + digit) for digit in QUADKEY_DIGITS]
