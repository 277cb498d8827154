"""
Shared pytest configuration and fixtures for the configstore tests.
"""

import os

import pytest

from configstore.core.registry import Store


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without background threads")
    config.addinivalue_line("markers", "integration: tests exercising background pollers")


def pytest_collection_modifyitems(config, items):
    """Every test not marked integration is a unit test."""
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)


def write_file(path, content, mtime=None):
    """Write a text file, optionally forcing its modification time."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


ITEMS_YAML = """
- key: db_host
  value: localhost
  priority: 10
- key: db_port
  value: "5432"
"""


@pytest.fixture
def store():
    """A fresh store, so tests never touch the process-wide default."""
    s = Store()
    yield s
    s.stop_polling(timeout=2.0)


@pytest.fixture
def items_file(tmp_path):
    """An item list file in the default YAML format."""
    return write_file(str(tmp_path / "app.yaml"), ITEMS_YAML)

