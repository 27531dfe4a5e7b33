"""Tests for quality banding and match formatting."""

from __future__ import annotations

import pytest

from lostfound.core.matching import MatchResult, build_match_response, quality_band


class TestQualityBand:
    """Test quality_band."""

    @pytest.mark.parametrize(
        ("score", "label", "color"),
        [
            (100, "Excellent Match", "green"),
            (80, "Excellent Match", "green"),
            (75, "Excellent Match", "green"),
            (74, "Good Match", "gold"),
            (50, "Good Match", "gold"),
            (49, "Possible Match", "orange"),
            (30, "Possible Match", "orange"),
            (29, "Low Match", "gray"),
            (0, "Low Match", "gray"),
        ],
    )
    def test_bands(self, score, label, color):
        quality = quality_band(score)
        assert quality.label == label
        assert quality.color == color

    def test_repeatable(self):
        assert quality_band(62) == quality_band(62)


class TestBuildMatchResponse:
    """Test build_match_response."""

    def test_flattens_item_and_match(self, make_item):
        item = make_item(
            title="Blue water bottle",
            category="Drinkware",
            color="Blue",
            description="Hydro flask with stickers",
            image_url="/uploads/bottle.jpg",
        )
        result = MatchResult(
            item=item,
            score=80,
            tag_matches=["bottle"],
            color_match=True,
            category_match=False,
        )

        response = build_match_response(result)

        assert response["id"] == item["id"]
        assert response["title"] == "Blue water bottle"
        assert response["location"] == "Library"
        assert response["image_url"] == "/uploads/bottle.jpg"
        assert response["score"] == 80
        assert response["quality"] == {"label": "Excellent Match", "color": "green"}
        assert response["tag_matches"] == ["bottle"]
        assert response["color_match"] is True
        assert response["category_match"] is False

    def test_internal_fields_not_exposed(self, make_item):
        item = make_item(ai_tags="bottle", contact_email="finder@example.edu")
        result = MatchResult(item=item, score=40, tag_matches=[], color_match=False, category_match=False)

        response = build_match_response(result)

        assert "contact_email" not in response
        assert "ai_tags" not in response
        assert "status" not in response

    def test_missing_fields_become_none(self):
        result = MatchResult(
            item={"id": 3, "category": "Keys"},
            score=25,
            tag_matches=[],
            color_match=False,
            category_match=True,
        )

        response = build_match_response(result)

        assert response["title"] is None
        assert response["date_found"] is None
        assert response["quality"] == {"label": "Low Match", "color": "gray"}
