"""Shared pytest fixtures for layout_convert tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from layout_convert.layout import load_layout
from layout_convert.models import Layout

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def qwerty_path() -> Path:
    return DATA_DIR / "qwerty.json"


@pytest.fixture
def qwerty(qwerty_path: Path) -> Layout:
    """The standard QWERTY layout from test data."""
    return load_layout(qwerty_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package = logging.getLogger("layout_convert")
    package_level = package.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(package_level)
