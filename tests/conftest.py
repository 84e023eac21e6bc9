"""Shared pytest fixtures for the CSV to GeoJSON test suite."""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample CSV file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def cities_csv(data_dir: Path) -> Path:
    """San Francisco and New York, no header."""
    return data_dir / "cities.csv"


@pytest.fixture()
def empty_csv(data_dir: Path) -> Path:
    """A zero-byte file."""
    return data_dir / "empty.csv"


@pytest.fixture()
def header_csv(data_dir: Path) -> Path:
    """Header row, a name column, three cities and a blank line."""
    return data_dir / "with_header.csv"


@pytest.fixture()
def semicolon_csv(data_dir: Path) -> Path:
    """The cities file with ``;`` as delimiter."""
    return data_dir / "semicolon.csv"


# ---------------------------------------------------------------------------
# Edge-case CSV file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def bad_latitude_csv(data_dir: Path) -> Path:
    """Second row has a non-numeric latitude (``abc,12.5``)."""
    return data_dir / "bad_latitude.csv"


@pytest.fixture()
def single_field_csv(data_dir: Path) -> Path:
    """Second row has only one field (``12.5``)."""
    return data_dir / "single_field.csv"


@pytest.fixture()
def out_of_range_csv(data_dir: Path) -> Path:
    """A latitude of 95, accepted unless range validation is on."""
    return data_dir / "out_of_range.csv"
