"""
Geodesy core: WGS84 / UTM projection and zone handling.

This module provides:
- UTM zone, central meridian and latitude band utilities
- Forward and inverse transverse Mercator projection
- Normalization of UTM coordinates into their proper zone
"""

from ardcoord.core.geodesy.normalizer import (
    is_canonical,
    normalize_utm,
    reproject_utm,
)
from ardcoord.core.geodesy.projection import (
    UtmProjection,
    geographic_to_utm,
    get_projection,
    utm_to_geographic,
)
from ardcoord.core.geodesy.utm import (
    central_meridian,
    hemisphere_for_band,
    latitude_band,
    utm_zone_for_longitude,
    validate_zone,
    zone_bounds,
)

__all__ = [
    # Normalizer
    "is_canonical",
    "normalize_utm",
    "reproject_utm",
    # Projection
    "UtmProjection",
    "geographic_to_utm",
    "get_projection",
    "utm_to_geographic",
    # UTM utilities
    "central_meridian",
    "hemisphere_for_band",
    "latitude_band",
    "utm_zone_for_longitude",
    "validate_zone",
    "zone_bounds",
]
