"""
UTM zone and latitude band utilities.

Zones follow the plain 6-degree scheme. The Norway and Svalbard zone
exceptions are deliberately not applied.
"""

import math
from typing import Tuple

from ardcoord.core.errors import InvalidLatitude, InvalidZone, PolarUnsupported, ZoneFormatError
from ardcoord.core.constants import (
    BAND_HEIGHT_DEG,
    BAND_LETTERS,
    MAX_UTM_LATITUDE,
    MIN_UTM_LATITUDE,
    SOUTHERN_BANDS,
    ZONE_COUNT,
    ZONE_WIDTH_DEG,
)
from ardcoord.models.coordinates import Hemisphere


def validate_zone(zone: int) -> int:
    """
    Check a UTM zone number.

    Args:
        zone: UTM zone number

    Returns:
        The zone, unchanged

    Raises:
        InvalidZone: If zone is outside 1..60
    """
    if isinstance(zone, bool) or not isinstance(zone, int) or not 1 <= zone <= ZONE_COUNT:
        raise InvalidZone(zone)
    return zone


def utm_zone_for_longitude(longitude: float) -> int:
    """
    Get the UTM zone containing a longitude.

    A longitude exactly on a zone boundary belongs to the eastern zone.
    180° is clamped into zone 60.

    Args:
        longitude: Longitude in decimal degrees (-180 to 180)

    Returns:
        Zone number (1-60)
    """
    zone = int(math.floor((longitude + 180.0) / ZONE_WIDTH_DEG)) + 1
    return min(max(zone, 1), ZONE_COUNT)


def central_meridian(zone: int) -> float:
    """
    Calculate the central meridian for a UTM zone.

    Args:
        zone: UTM zone number (1-60)

    Returns:
        Central meridian in decimal degrees

    Raises:
        InvalidZone: If zone is out of valid range
    """
    validate_zone(zone)
    return -180.0 + (zone - 1) * ZONE_WIDTH_DEG + ZONE_WIDTH_DEG / 2


def zone_bounds(zone: int) -> Tuple[float, float]:
    """
    Get the longitude bounds for a UTM zone.

    Args:
        zone: UTM zone number (1-60)

    Returns:
        Tuple of (min_longitude, max_longitude)

    Raises:
        InvalidZone: If zone is out of valid range
    """
    validate_zone(zone)
    min_lon = -180.0 + (zone - 1) * ZONE_WIDTH_DEG
    return (min_lon, min_lon + ZONE_WIDTH_DEG)


def latitude_band(latitude: float) -> str:
    """
    Get the UTM latitude band letter.

    Bands are 8 degrees tall starting at 80°S and lettered C to X, omitting
    I and O. Band X covers 72°N to 84°N.

    Args:
        latitude: Latitude in decimal degrees

    Returns:
        Band letter (C-X)

    Raises:
        InvalidLatitude: If latitude is outside -90..90
        PolarUnsupported: If latitude is outside [-80, 84)
    """
    if not math.isfinite(latitude) or not -90.0 <= latitude <= 90.0:
        raise InvalidLatitude(
            f"Latitude must be between -90 and 90, got {latitude}", value=latitude
        )
    if not MIN_UTM_LATITUDE <= latitude < MAX_UTM_LATITUDE:
        raise PolarUnsupported(latitude)

    index = int((latitude - MIN_UTM_LATITUDE) // BAND_HEIGHT_DEG)
    return BAND_LETTERS[min(index, len(BAND_LETTERS) - 1)]


def hemisphere_for_band(letter: str) -> Hemisphere:
    """
    Get the hemisphere a latitude band lies in.

    Args:
        letter: Band letter (C-X, without I and O), any case

    Returns:
        SOUTH for bands C-M, NORTH for bands N-X

    Raises:
        ZoneFormatError: If letter is not a band letter
    """
    band = letter.upper()
    if len(band) != 1 or band not in BAND_LETTERS:
        raise ZoneFormatError(f"'{letter}' is not a UTM latitude band letter.", value=letter)
    return Hemisphere.SOUTH if band in SOUTHERN_BANDS else Hemisphere.NORTH
