"""Tests for the lostfound-match command."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from lostfound.cli import load_items, main
from lostfound.core.logging import APP_LOG_FILENAME


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def items_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "title": "Keys", "category": "Keys", "color": "Silver", "ai_tags": "keys"},
                {"id": 2, "title": "Scarf", "category": "Clothing", "color": "Red", "ai_tags": "scarf"},
                {"id": 3, "title": "Old keys", "category": "Keys", "color": "Silver", "status": "claimed"},
            ]
        )
    )
    return path


def test_prints_ranked_matches(items_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that matches are printed as the search response JSON."""
    exit_code = main([str(items_file), "--tags", "keys", "--colors", "silver", "--category", "Keys"])

    assert exit_code == 0
    response = json.loads(capsys.readouterr().out)
    assert response["match_count"] == 1
    top = response["matches"][0]
    assert top["title"] == "Keys"
    assert top["score"] == 100
    assert top["quality"] == {"label": "Excellent Match", "color": "green"}


def test_min_score_option(items_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that --min-score overrides the search threshold."""
    assert main([str(items_file), "--category", "Keys", "--min-score", "30"]) == 0

    assert json.loads(capsys.readouterr().out) == {"match_count": 0, "matches": []}


def test_logs_go_to_data_dir(
    items_file: Path, isolated_data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test that the command configures file logging under the data directory."""
    main([str(items_file), "--tags", "scarf"])

    log_file = isolated_data_dir / "logs" / APP_LOG_FILENAME
    assert "Lost-item search completed" in log_file.read_text(encoding="utf-8")
    json.loads(capsys.readouterr().out)


def test_unreadable_items_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "items.json"
    bad.write_text('{"id": 1}')

    assert main([str(bad), "--tags", "keys"]) == 1
    assert "expected a JSON list" in capsys.readouterr().err


def test_missing_items_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 1


def test_load_items_defaults_status(items_file: Path) -> None:
    statuses = [item["status"] for item in load_items(items_file)]
    assert statuses == ["active", "active", "claimed"]
