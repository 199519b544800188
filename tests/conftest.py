"""
Pytest configuration for tablebench.

Provides fixtures for:
- Temporary template documents (trivial, realistic, malformed)
- Settings cache isolation between tests
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Generator

import pytest

from tablebench.config import get_settings

REPO_ROOT = Path(__file__).resolve().parent.parent

TRIVIAL_TEMPLATE = "{% block table %}{% endblock %}"
ROWS_TEMPLATE = "{% block table %}{% for item in items %}[{{ item.id }}]{% endfor %}{% endblock %}"
NO_TABLE_TEMPLATE = "{% block header %}<h1>Items</h1>{% endblock %}"
MALFORMED_TEMPLATE = "{% block table %}{% for item in %}{% endblock %}"


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """
    Drop the cached Settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """
    Remove handlers installed by the CLI so they do not outlive the test's streams.
    """
    yield
    logging.getLogger().handlers.clear()


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def trivial_template(tmp_path: Path) -> Path:
    """Template whose `table` block renders as an empty string."""
    return _write(tmp_path / "trivial.html", TRIVIAL_TEMPLATE)


@pytest.fixture
def rows_template(tmp_path: Path) -> Path:
    """Template whose `table` block renders one marker per item."""
    return _write(tmp_path / "rows.html", ROWS_TEMPLATE)


@pytest.fixture
def no_table_template(tmp_path: Path) -> Path:
    """Valid template without a `table` block: every render fails."""
    return _write(tmp_path / "no_table.html", NO_TABLE_TEMPLATE)


@pytest.fixture
def malformed_template(tmp_path: Path) -> Path:
    """Template with a syntax error."""
    return _write(tmp_path / "malformed.html", MALFORMED_TEMPLATE)


@pytest.fixture
def list_template() -> Path:
    """The shipped benchmark template."""
    return REPO_ROOT / "templates" / "List.html"
