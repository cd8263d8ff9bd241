"""
Test configuration for the MRZ verifier test suite.
"""

from __future__ import annotations

import logging
from datetime import date

import pytest

from mrz_verifier.config import Settings
from mrz_verifier.logging_config import ServiceNameFilter
from mrz_verifier.validation import MRZValidator
from tests.generators.mrz_generator import MRZGenerator

# Data line from the ICAO Doc 9303 specimen with a 1969 birth date
SPECIMEN_LINE = "L898902C<3UTO6908061F9406236ZE184226B<<<<<14"

# Data line from ICAO Doc 9303 Part 4 Appendix B
ICAO_APPENDIX_LINE = "L898902C36UTO7408122F1204159ZE184226B<<<<<10"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "api: mark test as exercising the HTTP service")
    config.addinivalue_line("markers", "mrz: mark test as MRZ related")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "api" in str(item.fspath):
            item.add_marker(pytest.mark.api)
        if "mrz" in item.name.lower():
            item.add_marker(pytest.mark.mrz)


@pytest.fixture
def before_specimen_expiry() -> date:
    """A reference day on which the specimen passport is still valid."""
    return date(1990, 1, 1)


@pytest.fixture
def mrz_generator() -> MRZGenerator:
    return MRZGenerator()


@pytest.fixture
def test_settings() -> Settings:
    """Default settings, independent of any .env file in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def validator(test_settings) -> MRZValidator:
    return MRZValidator(test_settings)


@pytest.fixture
def restore_root_logger():
    """Remove the handler installed by setup_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if any(isinstance(f, ServiceNameFilter) for f in handler.filters):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
