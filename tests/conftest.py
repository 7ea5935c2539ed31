"""
Pytest configuration and shared fixtures for the turbo_grid test suite.
"""

import pytest

from turbo_grid.geometry import CartesianGeometry
from turbo_grid.utils.turbo_logging import GridLogger

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Geometry Fixtures
# =============================================================================


@pytest.fixture
def reference_extents():
    """Extents (x_min, x_max, y_min, y_max, z_min, z_max) used across tests."""
    return (0.0, 1.0, -1.0, 1.0, 4.0, 5.5)


@pytest.fixture
def reference_geometry(reference_extents):
    """Valid Cartesian geometry built from the reference extents."""
    return CartesianGeometry(*reference_extents)


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def reset_logging():
    """Restore default logging settings after a test reconfigures them."""
    yield
    GridLogger.configure(level="INFO", use_colors=True)
