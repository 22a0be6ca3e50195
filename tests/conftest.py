"""
Shared pytest configuration and fixtures for all tests.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add project root to sys.path to enable importing project modules
# This allows tests to import from 'core', 'sqlformatter' and 'main' without installation
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests - isolated function-level tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interactions")
    config.addinivalue_line("markers", "smoke: Smoke tests - basic functionality checks")
    config.addinivalue_line("markers", "edge_case: Edge case tests - boundary conditions")
    config.addinivalue_line("markers", "regression: Regression tests - previously fixed bugs")
    config.addinivalue_line("markers", "system: System tests - full system behavior tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - complete workflow tests")


@pytest.fixture
def restore_root_logger():
    """Snapshot root logger handlers and level, restore them after the test.

    setup_logging() replaces the root handlers; tests calling it (directly or
    through main()) use this fixture so logging state does not leak.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def default_indent(monkeypatch):
    """Pin the configured default indentation to 4 spaces."""
    from core.config import FormatterConfig, config

    monkeypatch.setattr(config, "formatter", FormatterConfig(indent_type="space", indent=4))
    return config
