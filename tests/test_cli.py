"""
Tests for the command-line interface.
"""

import json

import pytest

from ardcoord import __version__
from ardcoord.cli import build_parser, format_text, main, separate_coordinates
from ardcoord.core.converter import convert_tokens


class TestTextOutput:
    """Tests for the four-line text report."""

    def test_worked_example(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the worked example prints all three representations."""
        assert main(["-99.09357951534054", "19.29675919163688"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "Lon, lat: -99.09358, 19.29676",
            "Lat/lon: 19.29676/-99.09358",
            "UTM 14N 490168 2133666",
            "14/033113131312",
        ]

    def test_grid_cell_input(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a grid cell prints its center and itself."""
        assert main(["14/033113131312"]) == 0

        lines = capsys.readouterr().out.splitlines()
        label, zone, easting, northing = lines[2].split()
        assert (label, zone) == ("UTM", "14N")
        assert abs(int(easting) - 492500) <= 1
        assert abs(int(northing) - 2132500) <= 1
        assert lines[3] == "14/033113131312"

    def test_southern_utm_input(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a southern UTM input prints an S zone."""
        assert main(["56S", "334871", "6252376"]) == 0

        lines = capsys.readouterr().out.splitlines()
        label, zone, easting, northing = lines[2].split()
        assert (label, zone) == ("UTM", "56S")
        assert abs(int(easting) - 334871) <= 1
        assert abs(int(northing) - 6252376) <= 1
        assert lines[3].startswith("56/")

    def test_precision_option(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test --precision changes the geographic decimals."""
        assert main(["--precision", "2", "-99.09357951534054", "19.29675919163688"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Lon, lat: -99.09, 19.30"
        assert lines[1] == "Lat/lon: 19.30/-99.09"

    def test_precision_from_settings(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test ARDCOORD_GEOGRAPHIC_PRECISION sets the default decimals."""
        clean_env.setenv("ARDCOORD_GEOGRAPHIC_PRECISION", "3")
        assert main(["-122.667", "45.505"]) == 0

        assert capsys.readouterr().out.splitlines()[0] == "Lon, lat: -122.667, 45.505"

    def test_format_text(self) -> None:
        """Test the formatter truncates UTM to whole meters."""
        result = convert_tokens(["-99.09357951534054", "19.29675919163688"])
        assert format_text(result, 1).splitlines()[:3] == [
            "Lon, lat: -99.1, 19.3",
            "Lat/lon: 19.3/-99.1",
            "UTM 14N 490168 2133666",
        ]


class TestJsonOutput:
    """Tests for --json."""

    def test_json(self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON output contains every representation."""
        assert main(["--json", "14/033113131312"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["input"]["kind"] == "grid_cell"
        assert data["cell"]["identifier"] == "14/033113131312"
        assert data["utm"]["zone"] == 14
        assert data["geographic"]["longitude"] == pytest.approx(-99.07, abs=0.01)


class TestErrors:
    """Tests for error reporting."""

    def test_wrong_arity(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test four arguments fail with status 1 and a message on stderr."""
        assert main(["1", "2", "3", "4"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "but got 4" in captured.err
        assert "Traceback" not in captured.err

    def test_no_arguments(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test no arguments is an arity error."""
        assert main([]) == 1
        assert "but got 0" in capsys.readouterr().err

    def test_invalid_zone(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test zone 99 is reported."""
        assert main(["99/213133"]) == 1
        assert "Expected a zone in 1..60 but got 99." in capsys.readouterr().err

    def test_bad_number(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test non-numeric coordinates are reported."""
        assert main(["west", "45"]) == 1
        assert "'west'" in capsys.readouterr().err

    def test_polar_utm_input(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a UTM point at the south pole fails with status 1."""
        assert main(["1S", "500000", "0"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "80°S" in captured.err

    def test_unknown_option(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test dash arguments that are not numbers are still usage errors."""
        with pytest.raises(SystemExit) as exc_info:
            main(["-x", "14/033113131312"])
        assert exc_info.value.code == 2

    def test_bad_log_level_setting(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test an unknown ARDCOORD_LOG_LEVEL exits with the configuration status."""
        clean_env.setenv("ARDCOORD_LOG_LEVEL", "LOUD")

        assert main(["14/033113131312"]) == 78
        assert "Unknown log level 'LOUD'" in capsys.readouterr().err

    def test_configuration_error(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test bad settings exit with the configuration status."""
        clean_env.setenv("ARDCOORD_GRID_LEVEL", "99")

        assert main(["14/033113131312"]) == 78
        assert "Invalid configuration" in capsys.readouterr().err

    def test_precision_out_of_range(self, clean_env: pytest.MonkeyPatch) -> None:
        """Test --precision outside 0..12 is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--precision", "20", "1", "2"])
        assert exc_info.value.code == 2


class TestParser:
    """Tests for argument parsing."""

    def test_negative_numbers_are_positional(self) -> None:
        """Test negative coordinates are not mistaken for options."""
        args = build_parser().parse_args(["-122.667", "-45.5"])
        assert args.tokens == ["-122.667", "-45.5"]

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_exponent_coordinates(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a negative longitude in exponent form is read as a coordinate."""
        assert main(["-1.22667e2", "45.505"]) == 0
        assert capsys.readouterr().out.splitlines()[2].startswith("UTM 10N ")

    def test_explicit_separator(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test coordinates after -- are read as given."""
        assert main(["--", "-1.22667e2", "45.505"]) == 0
        assert capsys.readouterr().out.splitlines()[2].startswith("UTM 10N ")

    def test_options_after_coordinates(
        self, clean_env: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test options may follow the coordinates."""
        assert main(["-99.09357951534054", "19.29675919163688", "--precision", "2"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "Lon, lat: -99.09, 19.30"


class TestSeparateCoordinates:
    """Tests for moving coordinate tokens behind --."""

    def test_options_first(self) -> None:
        """Test options keep their values and tokens keep their order."""
        assert separate_coordinates(["-1e2", "--precision", "3", "45", "--json"]) == [
            "--precision",
            "3",
            "--json",
            "--",
            "-1e2",
            "45",
        ]

    def test_existing_separator(self) -> None:
        """Test everything after an existing -- stays a token."""
        assert separate_coordinates(["--json", "--", "--precision"]) == [
            "--json",
            "--",
            "--precision",
        ]

    def test_unknown_option_left_for_argparse(self) -> None:
        """Test dash arguments that are not numbers stay options."""
        assert separate_coordinates(["-x", "14/0331"]) == ["-x", "--", "14/0331"]
