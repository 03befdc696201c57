"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['LIST1_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    # Refusals are logged at DEBUG; keep them out of test output
    for logger_name in ['list1.container', 'list1.splice', 'list1.codec']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
