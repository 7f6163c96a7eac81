"""
Data models for the three coordinate representations.

This module defines the immutable value types exchanged between the parser,
the geodesy core, the grid codec and the converter: geographic
coordinates, UTM coordinates, grid cells and their bounding boxes.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from ardcoord.core.constants import (
    BAND_LETTERS,
    FALSE_NORTHING_SOUTH,
    MAX_LEVEL,
    QUADKEY_DIGITS,
    TOP_TILE_SIZE,
    ZONE_COUNT,
)
from ardcoord.core.errors import (
    EmptyIdentifier,
    GeographicRangeError,
    InvalidDigit,
    InvalidLatitude,
    InvalidLevel,
    InvalidZone,
    UtmRangeError,
    ZoneFormatError,
)


class Hemisphere(str, Enum):
    """Hemisphere of a UTM coordinate."""

    NORTH = "N"
    SOUTH = "S"

    @classmethod
    def from_latitude(cls, latitude: float) -> "Hemisphere":
        """Southern for negative latitudes, northern otherwise (including 0)."""
        return cls.SOUTH if latitude < 0 else cls.NORTH


class InputKind(str, Enum):
    """Which representation a parsed input was given in."""

    GRID_CELL = "grid_cell"
    GEOGRAPHIC = "geographic"
    UTM = "utm"


def _check_zone(zone: Any) -> None:
    if isinstance(zone, bool) or not isinstance(zone, int) or not 1 <= zone <= ZONE_COUNT:
        raise InvalidZone(zone)


@dataclass(frozen=True)
class GeographicCoordinate:
    """
    WGS84 longitude/latitude in decimal degrees.

    Attributes:
        longitude: Longitude, -180 to 180
        latitude: Latitude, -90 to 90
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        """Validate ranges."""
        if not math.isfinite(self.longitude) or not -180.0 <= self.longitude <= 180.0:
            raise GeographicRangeError(
                f"Expected a longitude in -180..180 but got {self.longitude}.",
                value=self.longitude,
                details={"field": "longitude"},
            )
        if not math.isfinite(self.latitude) or not -90.0 <= self.latitude <= 90.0:
            raise InvalidLatitude(
                f"Expected a latitude in -90..90 but got {self.latitude}.",
                value=self.latitude,
                details={"field": "latitude"},
            )

    @property
    def lonlat(self) -> Tuple[float, float]:
        """Coordinate as (longitude, latitude)."""
        return (self.longitude, self.latitude)

    @property
    def latlon(self) -> Tuple[float, float]:
        """Coordinate as (latitude, longitude)."""
        return (self.latitude, self.longitude)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {"longitude": self.longitude, "latitude": self.latitude}

    def __str__(self) -> str:
        return f"{self.longitude:.5f}, {self.latitude:.5f}"


@dataclass(frozen=True)
class UtmCoordinate:
    """
    UTM easting/northing tied to a zone.

    The hemisphere decides whether the 10 000 km false northing applies.
    The band letter is only known when the coordinate was derived from a
    latitude or given with a band letter.

    Attributes:
        zone: UTM zone number (1-60)
        hemisphere: Northern or southern hemisphere
        easting: Easting in meters
        northing: Northing in meters
        band: Latitude band letter (C-X), if known
    """

    zone: int
    hemisphere: Hemisphere
    easting: float
    northing: float
    band: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate zone, band and finiteness."""
        _check_zone(self.zone)
        if not math.isfinite(self.easting) or not math.isfinite(self.northing):
            raise UtmRangeError(
                f"Expected finite easting and northing but got "
                f"({self.easting}, {self.northing}).",
                details={"easting": self.easting, "northing": self.northing},
            )
        if self.band is not None and (len(self.band) != 1 or self.band not in BAND_LETTERS):
            raise ZoneFormatError(
                f"'{self.band}' is not a UTM latitude band letter.", value=self.band
            )

    @property
    def designator(self) -> str:
        """Zone with hemisphere letter, e.g. ``56S``."""
        return f"{self.zone}{self.hemisphere.value}"

    @property
    def band_designator(self) -> Optional[str]:
        """Zone with latitude band letter, e.g. ``56H``; None if band unknown."""
        if self.band is None:
            return None
        return f"{self.zone}{self.band}"

    @property
    def epsg(self) -> int:
        """WGS84 / UTM EPSG code (326zz north, 327zz south)."""
        base = 32600 if self.hemisphere is Hemisphere.NORTH else 32700
        return base + self.zone

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "zone": self.zone,
            "hemisphere": self.hemisphere.value,
            "band": self.band,
            "easting": self.easting,
            "northing": self.northing,
            "epsg": self.epsg,
        }

    def __str__(self) -> str:
        return f"{self.designator} {self.easting:.3f} {self.northing:.3f}"


@dataclass(frozen=True)
class GridCell:
    """
    Maxar ARD grid cell: a zone and a quadkey.

    Each quadkey digit picks one quadrant of the previous level's cell
    (0 = NW, 1 = NE, 2 = SW, 3 = SE), so the key length is the level and
    every extra digit halves the cell's side.

    Attributes:
        zone: UTM zone number (1-60)
        key: Quadkey string over 0-3, 1 to 12 digits
    """

    zone: int
    key: str

    def __post_init__(self) -> None:
        """Validate zone and quadkey."""
        _check_zone(self.zone)
        if not self.key:
            raise EmptyIdentifier(self.zone)
        for digit in self.key:
            if digit not in QUADKEY_DIGITS:
                raise InvalidDigit(self.key, digit)
        if len(self.key) > MAX_LEVEL:
            raise InvalidLevel(len(self.key), MAX_LEVEL)

    @property
    def level(self) -> int:
        """Subdivision level, equal to the quadkey length."""
        return len(self.key)

    @property
    def cell_size(self) -> float:
        """Side length of the cell in meters."""
        return TOP_TILE_SIZE / 2**self.level

    @property
    def identifier(self) -> str:
        """Cell identifier, e.g. ``14/033113131312``."""
        return f"{self.zone}/{self.key}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "zone": self.zone,
            "key": self.key,
            "level": self.level,
            "cell_size": self.cell_size,
            "identifier": self.identifier,
        }

    def __str__(self) -> str:
        return self.identifier


@dataclass(frozen=True)
class CellBounds:
    """
    UTM bounding box of a grid cell.

    Northings are expressed in the hemisphere of the cell center. The
    equator is a cell edge at every level, so no cell straddles it, but
    cells at the edge of the grid reach past the poles.

    Attributes:
        zone: UTM zone number
        hemisphere: Hemisphere of the cell center
        min_easting: West edge in meters
        min_northing: South edge in meters
        max_easting: East edge in meters
        max_northing: North edge in meters
    """

    zone: int
    hemisphere: Hemisphere
    min_easting: float
    min_northing: float
    max_easting: float
    max_northing: float

    def __post_init__(self) -> None:
        """Validate bounding box."""
        if self.min_easting > self.max_easting:
            raise ValueError(
                f"min_easting ({self.min_easting}) must be <= max_easting ({self.max_easting})"
            )
        if self.min_northing > self.max_northing:
            raise ValueError(
                f"min_northing ({self.min_northing}) must be <= max_northing ({self.max_northing})"
            )

    @property
    def width(self) -> float:
        """Calculate width of bounding box."""
        return self.max_easting - self.min_easting

    @property
    def height(self) -> float:
        """Calculate height of bounding box."""
        return self.max_northing - self.min_northing

    @property
    def center(self) -> Tuple[float, float]:
        """Calculate center point of bounding box as (easting, northing)."""
        return (
            (self.min_easting + self.max_easting) / 2,
            (self.min_northing + self.max_northing) / 2,
        )

    def contains(
        self,
        easting: float,
        northing: float,
        hemisphere: Optional[Hemisphere] = None,
    ) -> bool:
        """
        Check if a point is in the cell.

        Cells own their west and north edges, matching how points are
        assigned to cells when encoding. A northing given in the other
        hemisphere is shifted by the false northing first, so the equator
        (northing 0 north, 10 000 000 south) is the same line either way.

        Args:
            easting: Easting in meters, same zone
            northing: Northing in meters
            hemisphere: Hemisphere the northing is expressed in; the cell's
                own hemisphere if None

        Returns:
            True if the point is within the cell
        """
        if hemisphere is not None and hemisphere is not self.hemisphere:
            if hemisphere is Hemisphere.NORTH:
                northing += FALSE_NORTHING_SOUTH
            else:
                northing -= FALSE_NORTHING_SOUTH

        return (
            self.min_easting <= easting < self.max_easting
            and self.min_northing < northing <= self.max_northing
        )

    def contains_point(self, coordinate: UtmCoordinate) -> bool:
        """Check if a UTM coordinate in the cell's zone is in the cell."""
        return coordinate.zone == self.zone and self.contains(
            coordinate.easting, coordinate.northing, coordinate.hemisphere
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "zone": self.zone,
            "hemisphere": self.hemisphere.value,
            "min_easting": self.min_easting,
            "min_northing": self.min_northing,
            "max_easting": self.max_easting,
            "max_northing": self.max_northing,
        }

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple (min_easting, min_northing, max_easting, max_northing)."""
        return (self.min_easting, self.min_northing, self.max_easting, self.max_northing)


ParsedValue = Union[GridCell, GeographicCoordinate, UtmCoordinate]


@dataclass(frozen=True)
class CanonicalCoordinate:
    """
    A parsed input, tagged with the representation it came in.

    Attributes:
        kind: Which representation was given
        value: The parsed value itself
        utm: Hub UTM coordinate derived from the value, not yet normalized
    """

    kind: InputKind
    value: ParsedValue
    utm: UtmCoordinate


@dataclass(frozen=True)
class ConversionResult:
    """
    All three representations of one coordinate.

    Attributes:
        source: The parsed input the conversion started from
        geographic: WGS84 longitude/latitude
        utm: UTM coordinate in its canonical zone
        cell: Finest grid cell containing the UTM coordinate
    """

    source: CanonicalCoordinate
    geographic: GeographicCoordinate
    utm: UtmCoordinate
    cell: GridCell

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "input": {
                "kind": self.source.kind.value,
                "value": self.source.value.to_dict(),
            },
            "geographic": self.geographic.to_dict(),
            "utm": self.utm.to_dict(),
            "cell": self.cell.to_dict(),
        }
