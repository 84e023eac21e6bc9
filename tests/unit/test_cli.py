"""Tests for the command-line entry point.

Covers:
- Success path: exit 0, completion message, output written
- Conversion failures: exit 1, error on stderr, structured log record
- Configuration failures and argparse usage errors
- Environment variables as defaults, arguments as overrides
"""

from __future__ import annotations

import json
import logging
import os
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from csv_geojson.cli import build_parser, main

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env() -> Iterator[None]:
    """Run every CLI test without ambient CSV_GEOJSON_* settings."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("CSV_GEOJSON_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestMainSuccess:
    def test_converts_and_exits_zero(
        self, cities_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "points.geojson"
        assert main([str(cities_csv), str(out)]) == 0
        assert "Conversion complete!" in capsys.readouterr().out
        assert len(json.loads(out.read_bytes())["features"]) == 2

    def test_paths_from_environment(self, cities_csv: Path, tmp_path: Path) -> None:
        out = tmp_path / "env.geojson"
        env = {"CSV_GEOJSON_INPUT_PATH": str(cities_csv), "CSV_GEOJSON_OUTPUT_PATH": str(out)}
        with patch.dict(os.environ, env):
            assert main([]) == 0
        assert out.exists()

    def test_arguments_override_environment(self, semicolon_csv: Path, tmp_path: Path) -> None:
        out = tmp_path / "points.geojson"
        with patch.dict(os.environ, {"CSV_GEOJSON_DELIMITER": "|"}):
            assert main([str(semicolon_csv), str(out), "--delimiter", ";"]) == 0
        assert len(json.loads(out.read_bytes())["features"]) == 2

    def test_skip_header_flag(self, header_csv: Path, tmp_path: Path) -> None:
        out = tmp_path / "points.geojson"
        assert main([str(header_csv), str(out), "--skip-header"]) == 0
        assert len(json.loads(out.read_bytes())["features"]) == 3


class TestMainFailure:
    def test_parse_error_exits_one(
        self,
        bad_latitude_csv: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        out = tmp_path / "points.geojson"
        with caplog.at_level(logging.ERROR, logger="csv_geojson.cli"):
            assert main([str(bad_latitude_csv), str(out)]) == 1
        assert "Row 2 field 0 (latitude)" in capsys.readouterr().err
        assert '"code": "RECORD_PARSE_FAILED"' in caplog.text
        assert not out.exists()

    def test_format_error_exits_one(
        self, single_field_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(single_field_csv), str(tmp_path / "o.geojson")]) == 1
        assert "Row 2 has 1 field(s)" in capsys.readouterr().err

    def test_missing_input_exits_one(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(tmp_path / "absent.csv"), str(tmp_path / "o.geojson")]) == 1
        assert "Cannot read source file" in capsys.readouterr().err

    def test_range_flag(self, out_of_range_csv: Path, tmp_path: Path) -> None:
        out = tmp_path / "points.geojson"
        assert main([str(out_of_range_csv), str(out)]) == 0
        assert main([str(out_of_range_csv), str(out), "--validate-range"]) == 1

    def test_config_error_exits_one(
        self, cities_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(cities_csv), str(tmp_path / "o.geojson"), "--delimiter", ";;"]) == 1
        assert "CSV_GEOJSON_DELIMITER" in capsys.readouterr().err

    def test_binary_encoding_exits_one(
        self, cities_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        out = tmp_path / "o.geojson"
        with patch.dict(os.environ, {"CSV_GEOJSON_ENCODING": "rot13"}):
            assert main([str(cities_csv), str(out)]) == 1
        assert "CSV_GEOJSON_ENCODING" in capsys.readouterr().err
        assert not out.exists()

    def test_usage_error_exits_two(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--indent", "wide"])
        assert exc_info.value.code == 2


class TestBuildParser:
    def test_unset_options_are_none(self) -> None:
        args = build_parser().parse_args([])
        assert vars(args) == {
            "input_path": None,
            "output_path": None,
            "delimiter": None,
            "encoding": None,
            "skip_header": None,
            "validate_range": None,
            "indent": None,
            "log_level": None,
        }
