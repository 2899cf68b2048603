"""
Root conftest: puts ``src`` on the path and keeps global logging state from
leaking between tests.
"""

import logging
import sys
from pathlib import Path

import pytest
import structlog

# Ensure src on path
sys.path.insert(0, str(Path(__file__).parent / "src"))

logger = logging.getLogger(__name__)


@pytest.fixture
def clean_logging():
    """Reset stdlib logging and structlog before and after a test."""
    original_handlers = logging.root.handlers[:]

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()

    yield

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    logging.root.handlers = original_handlers
