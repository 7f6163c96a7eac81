"""
Tests for the grid cell codec.
"""

import pytest

from ardcoord.core.errors import GridRangeError, InvalidLevel
from ardcoord.core.geodesy.projection import geographic_to_utm
from ardcoord.core.grid.codec import (
    cell_indices,
    children,
    decode,
    decode_bounds,
    encode,
    encode_finest,
    parent,
)
from ardcoord.models.coordinates import GeographicCoordinate, GridCell, Hemisphere, UtmCoordinate


class TestCellIndices:
    """Tests for column/row extraction from quadkeys."""

    def test_quadrant_layout(self) -> None:
        """Test 0=NW, 1=NE, 2=SW, 3=SE at level 1."""
        assert cell_indices(GridCell(zone=1, key="0")) == (0, 0)
        assert cell_indices(GridCell(zone=1, key="1")) == (1, 0)
        assert cell_indices(GridCell(zone=1, key="2")) == (0, 1)
        assert cell_indices(GridCell(zone=1, key="3")) == (1, 1)

    def test_worked_example(self) -> None:
        """Test the column and row of 14/033113131312."""
        assert cell_indices(GridCell(zone=14, key="033113131312")) == (2046, 1621)


class TestDecodeBounds:
    """Tests for grid cell bounding boxes."""

    def test_northwest_quadrant(self) -> None:
        """Test the top-level NW quadrant."""
        bounds = decode_bounds(GridCell(zone=14, key="0"))

        assert bounds.hemisphere is Hemisphere.NORTH
        assert bounds.to_tuple() == (-9740000.0, 0.0, 500000.0, 10240000.0)

    def test_southeast_quadrant(self) -> None:
        """Test the top-level SE quadrant uses southern northings."""
        bounds = decode_bounds(GridCell(zone=14, key="3"))

        assert bounds.hemisphere is Hemisphere.SOUTH
        assert bounds.to_tuple() == (500000.0, -240000.0, 10740000.0, 10000000.0)

    def test_worked_example(self) -> None:
        """Test the 5 km cell of the worked example."""
        bounds = decode_bounds(GridCell(zone=14, key="033113131312"))

        assert bounds.hemisphere is Hemisphere.NORTH
        assert bounds.to_tuple() == (490000.0, 2130000.0, 495000.0, 2135000.0)
        assert bounds.width == 5000.0
        assert bounds.height == 5000.0

    @pytest.mark.parametrize("level", [1, 4, 8, 12])
    def test_size_halves_per_level(self, level: int) -> None:
        """Test cell side is 20 480 km / 2**level."""
        bounds = decode_bounds(GridCell(zone=30, key="1" * level))
        assert bounds.width == 20_480_000 / 2**level


class TestDecode:
    """Tests for decoding to the cell center."""

    def test_worked_example_center(self) -> None:
        """Test the representative point is the cell center."""
        center = decode(GridCell(zone=14, key="033113131312"))

        assert center.zone == 14
        assert center.hemisphere is Hemisphere.NORTH
        assert center.easting == 492500.0
        assert center.northing == 2132500.0
        assert center.band is None

    def test_southern_cell(self) -> None:
        """Test a southern cell decodes with false northing."""
        center = decode(GridCell(zone=19, key="213133023133"))

        assert center.hemisphere is Hemisphere.SOUTH
        assert center.easting == 257500.0
        assert center.northing == 6342500.0


class TestEncode:
    """Tests for encoding UTM points."""

    def test_worked_example(self) -> None:
        """Test the worked example point encodes to 14/033113131312."""
        geo = GeographicCoordinate(longitude=-99.09357951534054, latitude=19.29675919163688)
        cell = encode(geographic_to_utm(geo), 12)
        assert cell.identifier == "14/033113131312"

    def test_coarser_levels_are_prefixes(self) -> None:
        """Test encoding at level n gives the first n digits."""
        point = UtmCoordinate(
            zone=14, hemisphere=Hemisphere.NORTH, easting=490168, northing=2133666
        )
        finest = encode(point, 12)

        for level in range(1, 13):
            assert encode(point, level).key == finest.key[:level]

    @pytest.mark.parametrize(
        "key",
        [
            "0",
            "3",
            "21",
            "1230",
            "0312021",
            "30000000000",
            "000000000000",
            "333333333333",
            "033113131312",
            "213133023133",
        ],
    )
    def test_encode_decode_inverse(self, key: str) -> None:
        """Test encoding a decoded cell center gives the cell back."""
        cell = GridCell(zone=27, key=key)
        assert encode(decode(cell), cell.level) == cell

    def test_decoded_point_inside_bounds(self) -> None:
        """Test the decoded center lies within the cell's bounds."""
        cell = GridCell(zone=5, key="102312301")
        center = decode(cell)
        assert decode_bounds(cell).contains_point(center)

    def test_north_edge_belongs_to_cell(self) -> None:
        """Test a point on a cell's north edge encodes to that cell."""
        point = UtmCoordinate(
            zone=14, hemisphere=Hemisphere.NORTH, easting=490000, northing=2135000
        )
        assert encode(point, 12).key == "033113131312"

    def test_equator_both_labels_agree(self) -> None:
        """Test the equator encodes the same whichever hemisphere it is written in."""
        north = UtmCoordinate(zone=31, hemisphere=Hemisphere.NORTH, easting=500000, northing=0)
        south = UtmCoordinate(
            zone=31, hemisphere=Hemisphere.SOUTH, easting=500000, northing=10_000_000
        )

        assert encode(north, 12) == encode(south, 12)
        assert encode(north, 12).key == "300000000000"

    def test_outside_tile(self) -> None:
        """Test points beyond the zone's tile are rejected."""
        east = UtmCoordinate(
            zone=14, hemisphere=Hemisphere.NORTH, easting=10_740_000, northing=0
        )
        north = UtmCoordinate(
            zone=14, hemisphere=Hemisphere.NORTH, easting=500000, northing=10_240_001
        )

        with pytest.raises(GridRangeError):
            encode(east, 12)
        with pytest.raises(GridRangeError):
            encode(north, 12)

    @pytest.mark.parametrize("level", [0, 13, -1])
    def test_invalid_level(self, level: int) -> None:
        """Test levels outside 1..12 are rejected."""
        point = UtmCoordinate(zone=14, hemisphere=Hemisphere.NORTH, easting=500000, northing=0)
        with pytest.raises(InvalidLevel):
            encode(point, level)


class TestEncodeFinest:
    """Tests for encoding at the configured level."""

    def test_default_level(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test the finest level defaults to 12."""
        point = UtmCoordinate(
            zone=14, hemisphere=Hemisphere.NORTH, easting=490168, northing=2133666
        )
        assert encode_finest(point).level == 12

    def test_configured_level(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test ARDCOORD_GRID_LEVEL changes the level written."""
        clean_env.setenv("ARDCOORD_GRID_LEVEL", "8")

        point = UtmCoordinate(
            zone=14, hemisphere=Hemisphere.NORTH, easting=490168, northing=2133666
        )
        assert encode_finest(point).key == "03311313"


class TestHierarchy:
    """Tests for parent and children navigation."""

    def test_parent(self) -> None:
        """Test the parent drops the last digit."""
        cell = GridCell(zone=14, key="033113131312")
        assert parent(cell) == GridCell(zone=14, key="03311313131")

    def test_parent_of_top_level(self) -> None:
        """Test a level 1 cell has no parent."""
        with pytest.raises(InvalidLevel):
            parent(GridCell(zone=14, key="2"))

    def test_children(self) -> None:
        """Test children are the four quadrants in order."""
        kids = children(GridCell(zone=14, key="03"))
        assert [kid.key for kid in kids] == ["030", "031", "032", "033"]
        assert all(parent(kid) == GridCell(zone=14, key="03") for kid in kids)

    def test_children_tile_parent(self) -> None:
        """Test the children exactly cover the parent's bounds."""
        cell = GridCell(zone=14, key="0331")
        bounds = decode_bounds(cell)
        kid_bounds = [decode_bounds(kid) for kid in children(cell)]

        assert min(b.min_easting for b in kid_bounds) == bounds.min_easting
        assert max(b.max_easting for b in kid_bounds) == bounds.max_easting
        assert min(b.min_northing for b in kid_bounds) == bounds.min_northing
        assert max(b.max_northing for b in kid_bounds) == bounds.max_northing

    def test_children_of_finest(self) -> None:
        """Test a level 12 cell has no children."""
        with pytest.raises(InvalidLevel):
            children(GridCell(zone=14, key="033113131312"))
