"""
Conversion orchestrator.

UTM is the hub every conversion routes through. The parsed input's hub
coordinate is first moved into its proper zone; the geographic coordinate
and the grid cell are then both derived from that one normalized value, so
the cell always contains the emitted UTM point and the geographic
coordinate always projects back onto it.
"""

import logging
import time
from typing import Sequence

from ardcoord.core.geodesy.normalizer import normalize_utm
from ardcoord.core.geodesy.projection import utm_to_geographic
from ardcoord.core.grid.codec import encode_finest
from ardcoord.core.parsing import parse
from ardcoord.models.coordinates import CanonicalCoordinate, ConversionResult

logger = logging.getLogger(__name__)


def convert(canonical: CanonicalCoordinate) -> ConversionResult:
    """
    Derive all three representations of a parsed coordinate.

    Args:
        canonical: Parsed input

    Returns:
        ConversionResult with the geographic coordinate, the normalized UTM
        coordinate and the finest grid cell

    Raises:
        ArdCoordException: If the coordinate cannot be projected or encoded
    """
    start = time.perf_counter()

    utm = normalize_utm(canonical.utm)
    geographic = utm_to_geographic(utm)
    cell = encode_finest(utm)

    if canonical.utm.zone != utm.zone:
        logger.info(
            f"{canonical.kind.value} input in zone {canonical.utm.zone} "
            f"belongs to zone {utm.zone}"
        )

    duration_ms = (time.perf_counter() - start) * 1000
    logger.debug(
        f"Converted {canonical.kind.value} input to {cell.identifier} "
        f"in {duration_ms:.2f}ms",
        extra={
            "input_kind": canonical.kind.value,
            "zone": utm.zone,
            "hemisphere": utm.hemisphere.value,
            "cell": cell.identifier,
            "duration_ms": duration_ms,
        },
    )

    return ConversionResult(
        source=canonical,
        geographic=geographic,
        utm=utm,
        cell=cell,
    )


def convert_tokens(tokens: Sequence[str]) -> ConversionResult:
    """
    Parse raw tokens and convert them.

    Args:
        tokens: One grid cell, a lon/lat pair, or a UTM zone/easting/northing

    Returns:
        ConversionResult

    Raises:
        ArdCoordException: If the input is malformed or cannot be converted
    """
    return convert(parse(tokens))
