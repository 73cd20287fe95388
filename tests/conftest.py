"""Shared test fixtures for the BAI test suite."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from bai.sources.base import PropertySource
from bai.sources.inmemory import InMemoryPropertySource
from tests.factories.sources import CountingPropertySource


@pytest.fixture
def make_source() -> Callable[[dict[str, str]], CountingPropertySource]:
    """Factory fixture for counting in-memory property sources."""

    def _make(properties: dict[str, str]) -> CountingPropertySource:
        return CountingPropertySource(properties)

    return _make

@pytest.fixture
def empty_source() -> PropertySource:
    return InMemoryPropertySource()

@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir

@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and loaded TOML before and after each test."""
    from bai.config import get_settings
    from bai.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})
