"""
Custom exception hierarchy for ardcoord.

Every failure of a conversion is reported through one of these exceptions.
Each carries a stable error code, the offending input in ``details`` and the
process exit status the command line should use.
"""

from typing import Any, Dict, List, Optional, Sequence


EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 78


class ArdCoordException(Exception):
    """
    Base exception for all ardcoord-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        exit_code: Process exit status for the command line
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        exit_code: int = EXIT_INPUT_ERROR,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ArdCoordException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            exit_code: Process exit status (default: 1)
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.exit_code = exit_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for structured output.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"exit_code={self.exit_code})"
        )


class InputError(ArdCoordException):
    """
    Raised when the raw input tokens cannot be understood.

    Base class for the parser errors. The ``value`` of the offending token is
    recorded in ``details["value"]`` when there is a single one.
    """

    error_code = "INPUT_ERROR"
    default_suggestions: List[str] = ["Run with --help to see the accepted input forms"]

    def __init__(
        self,
        message: str,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if value is not None:
            error_details["value"] = value

        super().__init__(
            message=message,
            error_code=type(self).error_code,
            exit_code=EXIT_INPUT_ERROR,
            details=error_details,
            suggestions=suggestions or list(type(self).default_suggestions),
        )


class ArityError(InputError):
    """Raised when the number of input tokens is not 1, 2 or 3."""

    error_code = "ARITY_ERROR"
    accepted_counts = (1, 2, 3)

    def __init__(self, tokens: Sequence[str]):
        count = len(tokens)
        super().__init__(
            message=(
                f"Expected 1 argument (grid cell), 2 (lon lat), or 3 (UTM), "
                f"but got {count}."
            ),
            details={
                "count": count,
                "accepted_counts": list(self.accepted_counts),
                "tokens": list(tokens),
            },
            suggestions=[
                "Give a grid cell like 14/033113131312",
                "Give a longitude and latitude like -99.09358 19.29676",
                "Give a UTM zone, easting and northing like 14N 490168 2133666",
            ],
        )
        self.count = count


class GridFormatError(InputError):
    """Raised when a single token is not shaped like ``<zone>/<quadkey>``."""

    error_code = "GRID_FORMAT_ERROR"
    default_suggestions = [
        "With one argument, give a grid cell like 42/012301230123, with the slash",
        "Quadkey digits must each be 0, 1, 2 or 3",
    ]


class ZoneFormatError(InputError):
    """Raised when a UTM zone descriptor is not shaped like ``56S`` or ``14``."""

    error_code = "ZONE_FORMAT_ERROR"
    default_suggestions = [
        "Give a UTM zone like 1, 23N, or 42S",
        "Latitude band letters run C to X, without I and O",
    ]


class NumberFormatError(InputError):
    """Raised when a token that must be a decimal number is not one."""

    error_code = "NUMBER_FORMAT_ERROR"
    default_suggestions = ["Give plain decimal numbers such as -122.667 or 6252376"]

    def __init__(self, value: str, field: str):
        super().__init__(
            message=f"Expected a numeric {field} but got '{value}'.",
            value=value,
            details={"field": field},
        )
        self.field = field


class UtmRangeError(InputError):
    """Raised when a UTM easting or northing is outside the accepted span."""

    error_code = "UTM_RANGE_ERROR"
    default_suggestions = [
        "Easting is meters from the zone's false origin, usually 100000 to 900000",
        "Northing is meters from the equator, or from 10000000 south of it",
    ]


class GeographicRangeError(InputError):
    """Raised when a longitude or latitude is outside its valid range."""

    error_code = "GEOGRAPHIC_RANGE_ERROR"
    default_suggestions = [
        "Longitude comes first and must be within -180..180",
        "Latitude comes second and must be within -90..90",
    ]


class InvalidLatitude(GeographicRangeError):
    """Raised when a latitude is outside -90..90 or not finite."""

    error_code = "INVALID_LATITUDE"


class GeodesyError(ArdCoordException):
    """
    Raised when a projection cannot be carried out.

    Base class for zone and latitude-band failures of the geodesy core.
    """

    error_code = "GEODESY_ERROR"
    default_suggestions: List[str] = ["Check the coordinate is inside the UTM system"]

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code=type(self).error_code,
            exit_code=EXIT_INPUT_ERROR,
            details=details,
            suggestions=suggestions or list(type(self).default_suggestions),
        )


class InvalidZone(GeodesyError):
    """Raised when a UTM zone number is outside 1..60."""

    error_code = "INVALID_ZONE"
    default_suggestions = ["UTM zones are numbered 1 to 60 eastward from 180°W"]

    def __init__(self, zone: Any):
        super().__init__(
            message=f"Expected a zone in 1..60 but got {zone}.",
            details={"zone": zone},
        )
        self.zone = zone


class PolarUnsupported(GeodesyError):
    """Raised for latitudes outside the UTM latitude bands (-80..84)."""

    error_code = "POLAR_UNSUPPORTED"
    default_suggestions = [
        "UTM covers 80°S to 84°N; polar regions use UPS, which is not supported",
    ]

    def __init__(self, latitude: float):
        super().__init__(
            message=f"UTM is only defined between 80°S and 84°N, got latitude {latitude}.",
            details={"latitude": latitude},
        )
        self.latitude = latitude


class ProjectionError(GeodesyError):
    """Raised when the projection engine cannot map a point."""

    error_code = "PROJECTION_ERROR"
    default_suggestions = [
        "The point is too far from the zone's central meridian to project",
        "Check the zone and the easting/northing belong together",
    ]


class GridCodecError(ArdCoordException):
    """
    Raised when a grid cell cannot be encoded or decoded.

    Base class for quadkey failures.
    """

    error_code = "GRID_CODEC_ERROR"
    default_suggestions: List[str] = ["Grid cells look like 14/033113131312"]

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(
            message=message,
            error_code=type(self).error_code,
            exit_code=EXIT_INPUT_ERROR,
            details=details,
            suggestions=suggestions or list(type(self).default_suggestions),
        )


class InvalidDigit(GridCodecError):
    """Raised when a quadkey contains a character other than 0-3."""

    error_code = "INVALID_DIGIT"

    def __init__(self, key: str, digit: str):
        super().__init__(
            message=f"Quadkey digit '{digit}' in '{key}' is not in 0..3.",
            details={"key": key, "digit": digit},
        )


class EmptyIdentifier(GridCodecError):
    """Raised when a grid cell has an empty quadkey."""

    error_code = "EMPTY_IDENTIFIER"

    def __init__(self, zone: Any = None):
        super().__init__(
            message="Expected at least one quadkey digit after the zone.",
            details={"zone": zone},
        )


class InvalidLevel(GridCodecError):
    """Raised when a quadkey length or requested level is outside 1..max."""

    error_code = "INVALID_LEVEL"

    def __init__(self, level: int, max_level: int):
        super().__init__(
            message=f"Expected a grid level in 1..{max_level} but got {level}.",
            details={"level": level, "max_level": max_level},
        )
        self.level = level


class GridRangeError(GridCodecError):
    """Raised when a UTM point lies outside its zone's grid cell space."""

    error_code = "GRID_RANGE_ERROR"

    def __init__(self, easting: float, northing: float, zone: int):
        super().__init__(
            message=(
                f"Point ({easting}, {northing}) is outside the grid of zone {zone}."
            ),
            details={"easting": easting, "northing": northing, "zone": zone},
        )


class ConfigurationError(ArdCoordException):
    """
    Raised when application configuration is invalid.

    Used for malformed environment variables or ``.env`` settings.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check ARDCOORD_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            exit_code=EXIT_CONFIG_ERROR,
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
