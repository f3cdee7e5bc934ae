"""Tests for the command-line interface."""

import json
import logging
from pathlib import Path

import pytest

from sunrise_report import __version__
from sunrise_report.cli import (
    EXIT_CONFIGURATION,
    EXIT_FAILURE,
    EXIT_OK,
    build_parser,
    join_time_zone_values,
    main,
)
from sunrise_report.report.request import FixedDateProvider

from conftest import StubCalculator

NYC_JSON = '{"day_start":"07:12:36","day_end":"17:03:42"}'


@pytest.fixture
def run(stub_calculator: StubCalculator, fixed_date_provider: FixedDateProvider):
    def invoke(*argv: str, calculator=None) -> int:
        return main(
            list(argv),
            calculator=calculator or stub_calculator,
            date_provider=fixed_date_provider,
        )

    return invoke


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.latitude is None
        assert args.longitude is None
        assert args.time_offset is None
        assert args.out is None
        assert args.verbose == 0

    def test_short_flags(self):
        args = build_parser().parse_args(
            ["-l", "37.8044", "-o", "-122.2712", "-s", "-15", "-u", "out.json", "-vvv"]
        )
        assert args.latitude == 37.8044
        assert args.longitude == -122.2712
        assert args.time_offset == -15
        assert args.out == "out.json"
        assert args.verbose == 3

    def test_long_flags(self):
        args = build_parser().parse_args(
            ["--latitude", "1", "--longitude", "2", "--time-offset", "5", "--out", "x"]
        )
        assert (args.latitude, args.longitude, args.time_offset, args.out) == (1, 2, 5, "x")

    def test_non_integer_offset_rejected(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-s", "1.5"])
        assert exc_info.value.code == 2


class TestJoinTimeZoneValues:
    """Tests for attaching negative UTC offsets to -z/--time-zone."""

    @pytest.mark.parametrize("flag", ["-z", "--time-zone"])
    def test_negative_offset_joined(self, flag):
        assert join_time_zone_values(["-d", "2022-01-24", flag, "-05:00"]) == [
            "-d",
            "2022-01-24",
            "--time-zone=-05:00",
        ]

    def test_positive_offset_joined(self):
        assert join_time_zone_values(["-z", "+03:00"]) == ["--time-zone=+03:00"]

    def test_other_arguments_untouched(self):
        argv = ["-s", "-15", "-l", "-33.8688", "-o", "151.2093", "-z", "Z"]
        assert join_time_zone_values(argv) == argv

    def test_flag_followed_by_option_untouched(self):
        assert join_time_zone_values(["-z", "-v"]) == ["-z", "-v"]

    def test_parsed_value(self):
        args = build_parser().parse_args(join_time_zone_values(["-z", "-05:00"]))
        assert args.time_zone == "-05:00"


class TestMain:
    """End-to-end tests through main() with a stub calculator."""

    def test_stdout(self, run, capsys: pytest.CaptureFixture[str]):
        assert run() == EXIT_OK
        assert capsys.readouterr().out == NYC_JSON + "\n"

    def test_time_offset(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-s", "30") == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data == {"day_start": "07:42:36", "day_end": "16:33:42"}

    def test_file_output_matches_stdout(
        self, run, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        out = tmp_path / "sunrise_sunset.json"

        assert run() == EXIT_OK
        stdout = capsys.readouterr().out
        assert run("-u", str(out)) == EXIT_OK

        assert capsys.readouterr().out == ""
        assert out.read_bytes() == stdout.encode("utf-8")

    def test_latitude_without_longitude(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-l", "40.7128") == EXIT_CONFIGURATION
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "longitude is missing" in captured.err

    def test_out_of_range_latitude(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-l", "95", "-o", "0") == EXIT_CONFIGURATION
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid coordinates" in captured.err

    def test_invalid_date(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-d", "2022-02-30") == EXIT_CONFIGURATION
        assert "Invalid date" in capsys.readouterr().err

    def test_no_event(self, run, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        out = tmp_path / "report.json"

        code = run("-l", "78.2", "-o", "15.6", "-u", str(out), calculator=StubCalculator(None, None))

        assert code == EXIT_FAILURE
        assert not out.exists()
        assert "No sunrise occurs" in capsys.readouterr().err

    def test_overflow(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-s", str(10**15)) == EXIT_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "overflows" in captured.err

    def test_unwritable_output(self, run, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        out = tmp_path / "missing" / "report.json"
        assert run("-u", str(out)) == EXIT_FAILURE
        assert "Failed to write report" in capsys.readouterr().err

    def test_invalid_settings(
        self, run, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ):
        monkeypatch.setenv("SUNRISE_REPORT_TIME_OFFSET", "soon")
        assert run() == EXIT_CONFIGURATION
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid configuration" in captured.err

    def test_verbose_logs_to_stderr(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-v") == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == NYC_JSON + "\n"
        assert "sunrise: 07:12:36 sunset: 17:03:42" in captured.err

    def test_very_verbose_dumps_options(self, run, capsys: pytest.CaptureFixture[str]):
        assert run("-vvv", "-s", "5") == EXIT_OK
        err = capsys.readouterr().err
        assert "time_offset 5" in err
        assert "Assembled request" in err

    def test_quiet_by_default(self, run, capsys: pytest.CaptureFixture[str]):
        assert run() == EXIT_OK
        assert capsys.readouterr().err == ""

    def test_verbosity_sets_root_level(self, run):
        run("-vv")
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.parametrize("flag", ["-z", "--time-zone"])
    def test_negative_time_zone(
        self, run, stub_calculator: StubCalculator, capsys: pytest.CaptureFixture[str], flag
    ):
        assert run("-d", "2022-01-24", flag, "-05:00") == EXIT_OK
        assert capsys.readouterr().out == NYC_JSON + "\n"

        date, _, _ = stub_calculator.calls[0]
        assert date.isoformat() == "2022-01-24T12:00:00-05:00"

    def test_positive_time_zone(self, run, stub_calculator: StubCalculator):
        assert run("-d", "2022-01-24", "-z", "+03:00") == EXIT_OK
        date, _, _ = stub_calculator.calls[0]
        assert date.utcoffset().total_seconds() == 3 * 3600

    @pytest.mark.parametrize(
        "day, offset", [("9999-12-31", "-05:00"), ("0001-01-01", "+05:00")]
    )
    def test_date_at_edge_of_range(
        self, run, capsys: pytest.CaptureFixture[str], day, offset
    ):
        assert run("-d", day, "-z", offset) == EXIT_CONFIGURATION
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "outside the supported date range" in captured.err

    def test_version(self, capsys: pytest.CaptureFixture[str]):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out
