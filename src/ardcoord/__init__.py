"""
ardcoord - coordinate conversions for Maxar ARD grid cells.

This package converts a single coordinate between a Maxar ARD grid cell,
WGS84 longitude/latitude and UTM easting/northing.
"""

__version__ = "0.1.0"
