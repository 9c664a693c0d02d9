"""
Test configuration and fixtures for hsvcolor tests.
"""
import pytest

from hsvcolor import Color
from hsvcolor.utils.logging import configure_logging, reset_logging


@pytest.fixture
def base_color():
    """Mid-saturation, mid-value cyan used by most scenarios."""
    return Color(180, 0.5, 0.5)


@pytest.fixture
def log_records():
    """Capture hsvcolor log messages at DEBUG level."""
    records = []
    sink_id = configure_logging(level="DEBUG", sink=lambda message: records.append(message.record))
    yield records
    reset_logging(sink_id)
