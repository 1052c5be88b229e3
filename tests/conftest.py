"""
Pytest configuration and fixtures for bookstore tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import logging
import os
from pathlib import Path
from typing import Callable, Generator

import pytest

from bookstore.config import BookstoreSettings
from bookstore.observability.logger import APP_LOGGER_NAME


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that read data files from disk"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the command line"
    )


# =======================
# SAMPLE DATA
# =======================

CUSTOMER_HEADER = "ID|First Name|Last Name|Street|City|Postal Code|Phone|Email|Join Date"
BOOK_HEADER = "ID|ISBN|Authors|Year|Title|Rating|Ratings Count|Image URL"
PURCHASE_HEADER = "ID|Customer ID|Book ID|Price"

CUSTOMER_LINES = [
    "1|John|Doe|1 Main St|Springfield|12345|555-1234|john@example.com|20200115",
    "2|Mary|Major|77 Elm Ave|Shelbyville|54321|555-8765|mary.major@example.org|20190607",
    "3|Ada|Lovelace|10 Analytical Rd|London|EC1A 1BB|555-1815|ada@engine.co.uk|20151210",
]

BOOK_LINES = [
    "1|439023483|Suzanne Collins|2008|The Hunger Games|4.34|4780653|https://images.example.com/1.jpg",
    "2|439554934|J.K. Rowling|1997|Harry Potter and the Philosopher's Stone|4.44|4602479|https://images.example.com/2.jpg",
    "3|316015849|Stephenie Meyer|2005|Twilight|3.57|3866839|https://images.example.com/3.jpg",
]

PURCHASE_LINES = [
    "1|1|1|12.99",
    "2|1|3|8.50",
    "3|2|2|15.25",
    "4|3|1|11.00",
]


@pytest.fixture(scope="session")
def test_data_dir() -> Path:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return Path(os.path.dirname(__file__)) / "fixtures"


@pytest.fixture
def write_data_file(tmp_path) -> Callable[..., Path]:
    """
    Factory writing a data file with a header line into tmp_path

    Returns:
        Function (name, header, lines) -> Path
    """
    def _write(name: str, header: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_dir(tmp_path, write_data_file) -> Path:
    """
    A directory holding valid customers.dat, books.dat and purchases.dat

    Returns:
        Path to the directory
    """
    write_data_file("customers.dat", CUSTOMER_HEADER, CUSTOMER_LINES)
    write_data_file("books.dat", BOOK_HEADER, BOOK_LINES)
    write_data_file("purchases.dat", PURCHASE_HEADER, PURCHASE_LINES)
    return tmp_path


@pytest.fixture
def settings(data_dir, tmp_path) -> BookstoreSettings:
    """Settings pointing at the sample data directory"""
    return BookstoreSettings(data_dir=data_dir, output_dir=tmp_path / "reports")


# =======================
# LOGGING FIXTURES
# =======================

@pytest.fixture
def bookstore_log(caplog) -> Generator[pytest.LogCaptureFixture, None, None]:
    """
    Capture records of the bookstore logger hierarchy

    The application logger does not propagate to the root logger, so the
    caplog handler is attached to it directly.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    previous_level = app_logger.level
    app_logger.setLevel(logging.DEBUG)
    app_logger.addHandler(caplog.handler)
    yield caplog
    app_logger.removeHandler(caplog.handler)
    app_logger.setLevel(previous_level)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that override settings"""
    for name in ("BOOKSTORE_DATA_DIR", "BOOKSTORE_OUTPUT_DIR", "BOOKSTORE_LOG_FILE", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
