"""
UTM zone normalization.

A UTM coordinate can be written in any zone, for example when a grid cell
is stepped across a zone boundary or a whole scene is kept in one
reference zone. Normalizing re-derives the zone from the true longitude:
UTM -> geographic -> UTM in the native zone. Because the zone always comes
from the recovered longitude, the result does not depend on the input's
zone label, and normalizing twice is the same as normalizing once.

Note that this is a reprojection, not a relabelling: the same ground point
has different easting/northing values in different zones.
"""

import logging

from ardcoord.core.geodesy.projection import geographic_to_utm, utm_to_geographic
from ardcoord.core.geodesy.utm import utm_zone_for_longitude, validate_zone
from ardcoord.models.coordinates import UtmCoordinate

logger = logging.getLogger(__name__)


def normalize_utm(coordinate: UtmCoordinate) -> UtmCoordinate:
    """
    Re-express a UTM coordinate in its proper zone.

    Args:
        coordinate: UTM coordinate in any zone

    Returns:
        The same ground point in the zone of its true longitude, with the
        hemisphere and latitude band derived from its true latitude

    Raises:
        ProjectionError: If the coordinate cannot be unprojected
        PolarUnsupported: If the point lies outside the UTM latitude bands
    """
    geographic = utm_to_geographic(coordinate)
    normalized = geographic_to_utm(geographic)

    if normalized.zone != coordinate.zone or normalized.hemisphere != coordinate.hemisphere:
        logger.debug(
            f"Normalized {coordinate.designator} ({coordinate.easting:.3f}, "
            f"{coordinate.northing:.3f}) to {normalized.designator} "
            f"({normalized.easting:.3f}, {normalized.northing:.3f})"
        )

    return normalized


def reproject_utm(coordinate: UtmCoordinate, zone: int) -> UtmCoordinate:
    """
    Re-express a UTM coordinate in an explicitly requested zone.

    Useful for keeping coordinates continuous across a zone boundary, e.g.
    for a scene straddling two zones.

    Args:
        coordinate: UTM coordinate in any zone
        zone: Target zone (1-60)

    Returns:
        The same ground point expressed in ``zone``

    Raises:
        InvalidZone: If zone is outside 1..60
        ProjectionError: If the point cannot be projected into ``zone``
        PolarUnsupported: If the point lies outside the UTM latitude bands
    """
    validate_zone(zone)
    geographic = utm_to_geographic(coordinate)
    return geographic_to_utm(geographic, zone=zone)


def is_canonical(coordinate: UtmCoordinate) -> bool:
    """
    Check whether a UTM coordinate is written in the zone of its longitude.

    Args:
        coordinate: UTM coordinate

    Returns:
        True if no normalization would change the zone

    Raises:
        ProjectionError: If the coordinate cannot be unprojected
    """
    geographic = utm_to_geographic(coordinate)
    return utm_zone_for_longitude(geographic.longitude) == coordinate.zone
