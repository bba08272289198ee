"""Pytest configuration and shared fixtures for google-font-url tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from google_font_url.catalog.bundled import load_catalog_file
from google_font_url.models import FontAxis, FontRecord

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_SNAPSHOT = FIXTURES_DIR / "googlefonts_sample.json"

URLOPEN = "google_font_url.catalog.remote.urllib.request.urlopen"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """Keep user config, API keys and CLI log handlers out of every test."""
    for var in (
        "GOOGLE_FONTS_API_KEY",
        "GOOGLE_FONT_URL_FETCH_LATEST",
        "GOOGLE_FONT_URL_TIMEOUT",
        "GOOGLE_FONT_URL_SNAPSHOT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GOOGLE_FONT_URL_CONFIG", str(tmp_path / "missing-config.toml"))

    yield

    # The CLI installs a RichHandler and disables propagation
    package_logger = logging.getLogger("google_font_url")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_catalog() -> tuple[FontRecord, ...]:
    """Curated families used as the snapshot in most tests."""
    return load_catalog_file(SAMPLE_SNAPSHOT)


@pytest.fixture(autouse=True)
def sample_snapshot(
    request: pytest.FixtureRequest, sample_catalog: tuple[FontRecord, ...]
) -> Generator[None, None, None]:
    """Serve the curated sample in place of the packaged snapshot.

    Tests marked `packaged_snapshot` see the real packaged data.
    """
    if request.node.get_closest_marker("packaged_snapshot"):
        yield
        return
    with patch("google_font_url.catalog.load_bundled_catalog", return_value=sample_catalog):
        yield


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def roboto_static() -> FontRecord:
    """Static family with regular, bold and their italics."""
    return FontRecord(family="Roboto", variants=("regular", "700", "italic", "700italic"))


@pytest.fixture
def recursive_variable() -> FontRecord:
    """Variable family mixing a registered and a custom axis."""
    return FontRecord(
        family="Recursive",
        variants=("regular",),
        axes=(FontAxis("wght", 300, 1000), FontAxis("CASL", 0, 1)),
    )


@pytest.fixture
def api_payload() -> dict[str, Any]:
    """A small Developer API response body."""
    return {
        "kind": "webfonts#webfontList",
        "items": [
            {
                "family": "Live Sans",
                "category": "sans-serif",
                "variants": ["regular", "700"],
                "files": {"regular": "https://fonts.gstatic.com/s/livesans/v1/a.ttf"},
            },
            {
                "family": "Roboto",
                "variants": ["regular"],
            },
        ],
    }


def _response(body: bytes, charset: str | None = "utf-8") -> MagicMock:
    response = MagicMock()
    response.read.return_value = body
    response.headers.get_content_charset.return_value = charset
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Factory for context-manager mocks standing in for urlopen()'s response."""
    return _response


@pytest.fixture
def mock_urlopen() -> Generator[MagicMock, None, None]:
    """Patch urlopen so no test reaches the network."""
    with patch(URLOPEN) as mocked:
        yield mocked


@pytest.fixture
def api_returns(mock_urlopen: MagicMock, api_payload: dict[str, Any]) -> MagicMock:
    """urlopen answering with api_payload."""
    mock_urlopen.return_value = _response(json.dumps(api_payload).encode("utf-8"))
    return mock_urlopen


def pytest_configure(config: pytest.Config) -> None:
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "packaged_snapshot: use the snapshot shipped with the package"
    )
