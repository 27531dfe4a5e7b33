"""Result builders for the matching system.

Functions to band scores for display and to format matches for the search
results UI.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from .evaluator import MatchResult

# Item fields copied into each formatted match (missing fields become None)
RESPONSE_ITEM_FIELDS = (
    "id",
    "title",
    "description",
    "category",
    "color",
    "location",
    "date_found",
    "image_url",
)


class MatchQuality(NamedTuple):
    """Display band for a match score."""

    label: str
    color: str


EXCELLENT_MATCH = MatchQuality("Excellent Match", "green")
GOOD_MATCH = MatchQuality("Good Match", "gold")
POSSIBLE_MATCH = MatchQuality("Possible Match", "orange")
LOW_MATCH = MatchQuality("Low Match", "gray")


def quality_band(score: float) -> MatchQuality:
    """Get the display band for a match score.

    Used for presentation only, never for scoring or filtering.

    Args:
        score: Match score (0-100)

    Returns:
        MatchQuality with label and color tag
    """
    if score >= 75:
        return EXCELLENT_MATCH
    if score >= 50:
        return GOOD_MATCH
    if score >= 30:
        return POSSIBLE_MATCH
    return LOW_MATCH


def build_match_response(result: MatchResult) -> dict[str, Any]:
    """Build a match entry for the search results UI.

    Args:
        result: Ranked match from find_matches

    Returns:
        Dict with item fields, score, quality band and match flags
    """
    item = result.item
    quality = quality_band(result.score)

    response: dict[str, Any] = {name: item.get(name) for name in RESPONSE_ITEM_FIELDS}
    response.update(
        {
            "score": result.score,
            "quality": {"label": quality.label, "color": quality.color},
            "tag_matches": list(result.tag_matches),
            "color_match": result.color_match,
            "category_match": result.category_match,
        }
    )
    return response
