"""
Input classification and parsing.

Raw tokens are classified purely by count and lexical shape:

- 1 token: a grid cell, ``<zone>/<quadkey>`` such as ``14/033113131312``
- 2 tokens: longitude then latitude, such as ``-99.09358 19.29676``
- 3 tokens: UTM zone, easting, northing, such as ``14N 490168 2133666``

The three shapes never overlap, so magnitudes are never inspected to tell
them apart. Each parser returns a CanonicalCoordinate carrying the parsed
value and the UTM coordinate it corresponds to.
"""

import logging
import re
from typing import Callable, Dict, Optional, Sequence, Tuple

from ardcoord.core.constants import MAX_EASTING, MAX_NORTHING, MIN_EASTING, MIN_NORTHING
from ardcoord.core.errors import (
    ArityError,
    GridFormatError,
    NumberFormatError,
    UtmRangeError,
    ZoneFormatError,
)
from ardcoord.core.geodesy.projection import geographic_to_utm
from ardcoord.core.geodesy.utm import hemisphere_for_band
from ardcoord.core.grid.codec import decode
from ardcoord.models.coordinates import (
    CanonicalCoordinate,
    GeographicCoordinate,
    GridCell,
    Hemisphere,
    InputKind,
    UtmCoordinate,
)

logger = logging.getLogger(__name__)

GRID_CELL_PATTERN = re.compile(r"^(\d{1,2})/([0-3]+)$", re.ASCII)
ZONE_PATTERN = re.compile(r"^(\d{1,2})([A-Za-z]?)$", re.ASCII)
DECIMAL_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)


def parse_decimal(token: str, field: str) -> float:
    """
    Parse a signed decimal number.

    Accepts forms like ``-122.667``, ``+45``, ``.5`` and ``6.25e6``.
    ``nan``, ``inf`` and underscore separators are rejected.

    Args:
        token: Raw token
        field: Name of the value, used in the error message

    Returns:
        The number

    Raises:
        NumberFormatError: If the token is not a decimal number
    """
    if not DECIMAL_PATTERN.match(token):
        raise NumberFormatError(token, field)
    return float(token)


def parse_grid_cell(token: str) -> CanonicalCoordinate:
    """
    Parse a ``<zone>/<quadkey>`` grid cell.

    Args:
        token: Raw token

    Returns:
        CanonicalCoordinate whose hub is the cell center

    Raises:
        GridFormatError: If the token is not shaped like a grid cell
        InvalidZone: If the zone is outside 1..60
        InvalidLevel: If the quadkey is longer than 12 digits
    """
    match = GRID_CELL_PATTERN.match(token)
    if not match:
        raise GridFormatError(
            f"With one argument, expected a grid cell like 42/012301230123 "
            f"but got '{token}'.",
            value=token,
        )

    cell = GridCell(zone=int(match.group(1)), key=match.group(2))
    return CanonicalCoordinate(kind=InputKind.GRID_CELL, value=cell, utm=decode(cell))


def parse_lonlat(lon_token: str, lat_token: str) -> CanonicalCoordinate:
    """
    Parse a longitude/latitude pair, longitude first.

    Args:
        lon_token: Raw longitude token
        lat_token: Raw latitude token

    Returns:
        CanonicalCoordinate whose hub is the projection in the native zone

    Raises:
        NumberFormatError: If either token is not a decimal number
        GeographicRangeError: If either value is out of range
        PolarUnsupported: If the latitude is outside the UTM bands
    """
    longitude = parse_decimal(lon_token, "longitude")
    latitude = parse_decimal(lat_token, "latitude")

    coordinate = GeographicCoordinate(longitude=longitude, latitude=latitude)
    return CanonicalCoordinate(
        kind=InputKind.GEOGRAPHIC,
        value=coordinate,
        utm=geographic_to_utm(coordinate),
    )


def parse_zone(token: str) -> Tuple[int, Hemisphere, Optional[str]]:
    """
    Parse a UTM zone descriptor into zone, hemisphere and band.

    ``N`` and ``S`` always mean north and south (``56S`` is Sydney). Any
    other latitude band letter implies its hemisphere and is kept as the
    band. No letter means north.

    Returns:
        Tuple of (zone, hemisphere, band or None)

    Raises:
        ZoneFormatError: If the descriptor is malformed
    """
    match = ZONE_PATTERN.match(token)
    if not match:
        raise ZoneFormatError(
            f"Expected a UTM zone like 1, 23N, or 42S, but got '{token}'.",
            value=token,
        )

    zone = int(match.group(1))
    letter = match.group(2).upper()

    if not letter or letter == Hemisphere.NORTH.value:
        return zone, Hemisphere.NORTH, None
    if letter == Hemisphere.SOUTH.value:
        return zone, Hemisphere.SOUTH, None
    return zone, hemisphere_for_band(letter), letter


def parse_utm(zone_token: str, easting_token: str, northing_token: str) -> CanonicalCoordinate:
    """
    Parse a UTM zone, easting and northing.

    The coordinate may lie outside its zone's nominal easting range; it is
    moved into its proper zone when converted.

    Args:
        zone_token: Zone descriptor such as ``56S``
        easting_token: Easting in meters
        northing_token: Northing in meters

    Returns:
        CanonicalCoordinate whose hub is the parsed coordinate itself

    Raises:
        ZoneFormatError: If the zone descriptor is malformed
        InvalidZone: If the zone is outside 1..60
        NumberFormatError: If easting or northing is not a decimal number
        UtmRangeError: If easting or northing is outside the accepted span
    """
    zone, hemisphere, band = parse_zone(zone_token)
    easting = parse_decimal(easting_token, "UTM easting")
    northing = parse_decimal(northing_token, "UTM northing")

    if not MIN_EASTING <= easting <= MAX_EASTING:
        raise UtmRangeError(
            f"Expected a UTM easting in {MIN_EASTING:.0f}..{MAX_EASTING:.0f} "
            f"but got {easting_token}.",
            value=easting,
            details={"field": "easting"},
        )
    if not MIN_NORTHING <= northing <= MAX_NORTHING:
        raise UtmRangeError(
            f"Expected a UTM northing in {MIN_NORTHING:.0f}..{MAX_NORTHING:.0f} "
            f"but got {northing_token}.",
            value=northing,
            details={"field": "northing"},
        )

    coordinate = UtmCoordinate(
        zone=zone,
        hemisphere=hemisphere,
        easting=easting,
        northing=northing,
        band=band,
    )
    return CanonicalCoordinate(kind=InputKind.UTM, value=coordinate, utm=coordinate)


PARSERS: Dict[int, Callable[..., CanonicalCoordinate]] = {
    1: parse_grid_cell,
    2: parse_lonlat,
    3: parse_utm,
}


def parse(tokens: Sequence[str]) -> CanonicalCoordinate:
    """
    Classify raw tokens and parse them.

    Args:
        tokens: Input tokens, already split

    Returns:
        CanonicalCoordinate tagged with the input kind

    Raises:
        ArityError: If there are not 1, 2 or 3 tokens
        InputError: For any malformed or out-of-range token
        ArdCoordException: For any other failure to interpret the input
    """
    stripped = [token.strip() for token in tokens]
    parser = PARSERS.get(len(stripped))
    if parser is None:
        raise ArityError(stripped)

    canonical = parser(*stripped)
    logger.debug(f"Parsed {stripped} as {canonical.kind.value}")
    return canonical
