"""Root pytest configuration for all tests.

This conftest applies to all test types (unit and integration).
"""

import pytest

from wiki2md.models.conversion_options import ConversionOptions


@pytest.fixture
def all_options():
    """ConversionOptions with every flag enabled."""
    return ConversionOptions.uniform(True)


@pytest.fixture
def no_options():
    """ConversionOptions with every flag disabled."""
    return ConversionOptions.uniform(False)
