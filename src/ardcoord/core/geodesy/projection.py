"""
Forward and inverse UTM projection.

Transverse Mercator on the WGS84 ellipsoid, assembled from the constants in
``ardcoord.core.constants`` and evaluated with pyproj.
"""

import logging
import math
from functools import lru_cache
from typing import Optional, Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from ardcoord.core.constants import (
    FALSE_EASTING,
    FALSE_NORTHING_SOUTH,
    INVERSE_FLATTENING,
    SCALE_FACTOR,
    SEMI_MAJOR_AXIS,
)
from ardcoord.core.errors import ProjectionError
from ardcoord.core.geodesy.utm import (
    central_meridian,
    latitude_band,
    utm_zone_for_longitude,
    validate_zone,
)
from ardcoord.models.coordinates import GeographicCoordinate, Hemisphere, UtmCoordinate

logger = logging.getLogger(__name__)


def geographic_crs() -> CRS:
    """WGS84 longitude/latitude on the fixed ellipsoid."""
    return CRS.from_dict(
        {
            "proj": "longlat",
            "a": SEMI_MAJOR_AXIS,
            "rf": INVERSE_FLATTENING,
            "no_defs": True,
        }
    )


def utm_crs(zone: int, hemisphere: Hemisphere) -> CRS:
    """
    Build the transverse Mercator CRS of a UTM zone.

    Args:
        zone: UTM zone number (1-60)
        hemisphere: Selects the false northing

    Returns:
        pyproj CRS

    Raises:
        InvalidZone: If zone is out of valid range
    """
    false_northing = FALSE_NORTHING_SOUTH if hemisphere is Hemisphere.SOUTH else 0.0
    return CRS.from_dict(
        {
            "proj": "tmerc",
            "lat_0": 0.0,
            "lon_0": central_meridian(zone),
            "k_0": SCALE_FACTOR,
            "x_0": FALSE_EASTING,
            "y_0": false_northing,
            "a": SEMI_MAJOR_AXIS,
            "rf": INVERSE_FLATTENING,
            "units": "m",
            "no_defs": True,
        }
    )


class UtmProjection:
    """
    Forward and inverse transformers for one zone and hemisphere.

    Instances are immutable; use ``get_projection`` to share them.
    """

    def __init__(self, zone: int, hemisphere: Hemisphere):
        """
        Initialize projection.

        Args:
            zone: UTM zone number (1-60)
            hemisphere: Hemisphere of the zone

        Raises:
            InvalidZone: If zone is out of valid range
            ProjectionError: If pyproj cannot build the transformers
        """
        self.zone = validate_zone(zone)
        self.hemisphere = hemisphere

        try:
            geographic = geographic_crs()
            projected = utm_crs(zone, hemisphere)
            self._forward = Transformer.from_crs(geographic, projected, always_xy=True)
            self._inverse = Transformer.from_crs(projected, geographic, always_xy=True)
        except ProjError as e:
            raise ProjectionError(
                f"Failed to create transformer for zone {zone}{hemisphere.value}: {e}",
                details={"zone": zone, "hemisphere": hemisphere.value},
            ) from e

    def forward(self, longitude: float, latitude: float) -> Tuple[float, float]:
        """
        Project longitude/latitude to easting/northing.

        Raises:
            ProjectionError: If the point cannot be projected
        """
        return self._run(self._forward, longitude, latitude, "forward")

    def inverse(self, easting: float, northing: float) -> Tuple[float, float]:
        """
        Unproject easting/northing to longitude/latitude.

        Raises:
            ProjectionError: If the point cannot be unprojected
        """
        return self._run(self._inverse, easting, northing, "inverse")

    def _run(
        self, transformer: Transformer, x: float, y: float, direction: str
    ) -> Tuple[float, float]:
        try:
            xx, yy = transformer.transform(x, y, errcheck=True)
        except ProjError as e:
            raise ProjectionError(
                f"{direction.capitalize()} projection of ({x}, {y}) in zone "
                f"{self.zone}{self.hemisphere.value} failed: {e}",
                details={"x": x, "y": y, "zone": self.zone, "direction": direction},
            ) from e

        if not (math.isfinite(xx) and math.isfinite(yy)):
            raise ProjectionError(
                f"{direction.capitalize()} projection of ({x}, {y}) in zone "
                f"{self.zone}{self.hemisphere.value} has no finite result",
                details={"x": x, "y": y, "zone": self.zone, "direction": direction},
            )
        return (xx, yy)


@lru_cache(maxsize=None)
def get_projection(zone: int, hemisphere: Hemisphere) -> UtmProjection:
    """Get the shared projection for a zone and hemisphere."""
    logger.debug(f"Building UTM projection for zone {zone}{hemisphere.value}")
    return UtmProjection(zone, hemisphere)


def geographic_to_utm(
    coordinate: GeographicCoordinate,
    zone: Optional[int] = None,
) -> UtmCoordinate:
    """
    Project a geographic coordinate to UTM.

    The zone is derived from the longitude unless one is given. Forcing a
    zone other than the native one is how coordinates are expressed across
    a zone boundary.

    Args:
        coordinate: WGS84 longitude/latitude
        zone: UTM zone to project into, or None for the native zone

    Returns:
        UTM coordinate with hemisphere and latitude band

    Raises:
        InvalidZone: If the forced zone is outside 1..60
        PolarUnsupported: If latitude is outside [-80, 84)
        ProjectionError: If the point cannot be projected into the zone
    """
    band = latitude_band(coordinate.latitude)

    if zone is None:
        zone = utm_zone_for_longitude(coordinate.longitude)
    else:
        validate_zone(zone)

    hemisphere = Hemisphere.from_latitude(coordinate.latitude)
    easting, northing = get_projection(zone, hemisphere).forward(
        coordinate.longitude, coordinate.latitude
    )

    return UtmCoordinate(
        zone=zone,
        hemisphere=hemisphere,
        easting=easting,
        northing=northing,
        band=band,
    )


def utm_to_geographic(coordinate: UtmCoordinate) -> GeographicCoordinate:
    """
    Unproject a UTM coordinate to longitude/latitude.

    Within 3° of the central meridian the result recovers the original
    geographic coordinate to sub-millimeter precision. Further out it is
    still the mathematically correct answer for the given zone.

    Args:
        coordinate: UTM coordinate

    Returns:
        WGS84 longitude/latitude

    Raises:
        ProjectionError: If the point cannot be unprojected
        GeographicRangeError: If the result is not a valid longitude/latitude
    """
    longitude, latitude = get_projection(coordinate.zone, coordinate.hemisphere).inverse(
        coordinate.easting, coordinate.northing
    )
    return GeographicCoordinate(longitude=longitude, latitude=latitude)
