"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from lostfound.core import config as app_config
from lostfound.core.matching import config as matching_config


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point settings at a temporary data directory and reset cached config."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    monkeypatch.setenv("LOSTFOUND_DATA_DIR", str(data_dir))
    app_config.get_settings.cache_clear()
    matching_config._cached_config = None

    yield data_dir

    app_config.get_settings.cache_clear()
    matching_config._cached_config = None


@pytest.fixture
def make_item():
    """Factory for found-item records shaped like the item store rows."""
    counter = {"next_id": 1}

    def _make_item(**fields: Any) -> dict[str, Any]:
        item: dict[str, Any] = {
            "id": counter["next_id"],
            "title": "Found item",
            "description": None,
            "category": "Other",
            "color": None,
            "ai_tags": None,
            "location": "Library",
            "date_found": "2026-10-01",
            "image_url": None,
            "status": "active",
        }
        item.update(fields)
        counter["next_id"] += 1
        return item

    return _make_item
