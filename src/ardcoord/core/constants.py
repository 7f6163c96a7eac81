"""
Fixed WGS84, UTM and Maxar ARD grid constants.

Everything here is read-only for the lifetime of the process.
"""

# WGS84 reference ellipsoid
SEMI_MAJOR_AXIS = 6378137.0  # meters
INVERSE_FLATTENING = 298.257223563

# UTM projection parameters
ZONE_COUNT = 60
ZONE_WIDTH_DEG = 6.0
SCALE_FACTOR = 0.9996
FALSE_EASTING = 500_000.0
FALSE_NORTHING_SOUTH = 10_000_000.0

# Latitude bands: 8 degrees each from 80°S, X stretched to 84°N
BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
BAND_HEIGHT_DEG = 8.0
MIN_UTM_LATITUDE = -80.0
MAX_UTM_LATITUDE = 84.0
SOUTHERN_BANDS = frozenset(BAND_LETTERS[: BAND_LETTERS.index("N")])

# Span accepted for parsed UTM input. Eastings reach a full zone width past
# either zone edge so coordinates forced into a neighboring zone still parse.
MIN_EASTING = -500_000.0
MAX_EASTING = 1_500_000.0
MIN_NORTHING = 0.0
MAX_NORTHING = 10_000_000.0

# Maxar ARD grid: 4096 x 4096 cells of 5 km per zone at the finest level,
# a square centered on the zone origin (central meridian, equator).
MAX_LEVEL = 12
FINEST_CELL_SIZE = 5_000.0
TOP_TILE_SIZE = FINEST_CELL_SIZE * 2**MAX_LEVEL
QUADKEY_DIGITS = "0123"
