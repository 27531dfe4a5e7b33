"""Match evaluator - orchestrates all criteria.

Combines the individual criteria into a single 0-100 score per candidate item
and ranks candidates for a search.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import BaseModel, Field, field_validator

from .config import MatchingConfig, get_matching_config
from .criteria import match_category, match_color, match_description, match_tags

logger = structlog.get_logger("lostfound.matching")

# A found-item record as supplied by the item store. Only "category", "color",
# "ai_tags" and "description" are read; everything else is passed through.
CandidateItem = Mapping[str, Any]

# Final scores are clamped to [0, MAX_SCORE]
MAX_SCORE = 100


class SearchQuery(BaseModel):
    """What a user is looking for."""

    tags: list[str] = Field(default_factory=list, description="Keywords from photo analysis or input")
    colors: list[str] = Field(default_factory=list, description="Color names, case-insensitive")
    category: str = Field(default="", description="Category label (empty for any)")
    description: str | None = Field(default=None, description="Free-text description")

    @field_validator("tags", "colors", mode="before")
    @classmethod
    def none_to_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("category", mode="before")
    @classmethod
    def none_to_empty_string(cls, value: Any) -> Any:
        return "" if value is None else value


@dataclass
class ScoreBreakdown:
    """Score of a single item against a search.

    Attributes:
        score: Final score, rounded and clamped to 0-100
        tag_matches: Search tags that matched the item, in search order
        color_match: Whether any search color matched
        category_match: Whether the category matched
        details: Human-readable reason for each signal
    """

    score: int
    tag_matches: list[str] = field(default_factory=list)
    color_match: bool = False
    category_match: bool = False
    details: list[str] = field(default_factory=list)


@dataclass
class MatchResult:
    """A candidate item that cleared the minimum score."""

    item: CandidateItem
    score: int
    tag_matches: list[str]
    color_match: bool
    category_match: bool

    def __repr__(self) -> str:
        return (
            f"MatchResult(score={self.score}, item_id={self.item.get('id')!r}, "
            f"tags={len(self.tag_matches)}, color={self.color_match}, category={self.category_match})"
        )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_score(
    query: SearchQuery,
    item: CandidateItem,
    config: MatchingConfig | None = None,
) -> ScoreBreakdown:
    """Score a found item against a search.

    Tags are worth up to 50, color 25, category 25, and the description adds a
    bonus of up to 10. The total is rounded and clamped, so a perfect match with
    a description bonus saturates at 100.

    Args:
        query: The search
        item: Candidate found-item record (never modified)
        config: Matching configuration (if None, loads from settings file)

    Returns:
        ScoreBreakdown with score, matched tags and match flags
    """
    if config is None:
        config = get_matching_config()

    details: list[str] = []

    tag_score, tag_matches, tag_reason = match_tags(query.tags, item.get("ai_tags"), config)
    details.append(tag_reason)

    color_score, color_reason = match_color(query.colors, item.get("color"), config)
    details.append(color_reason)

    category_score, category_reason = match_category(query.category, item.get("category"), config)
    details.append(category_reason)

    description_score, description_reason = match_description(
        query.description, item.get("description"), config
    )
    details.append(description_reason)

    total = tag_score + color_score + category_score + description_score
    score = max(0, min(_round_half_up(total), MAX_SCORE))

    return ScoreBreakdown(
        score=score,
        tag_matches=tag_matches,
        color_match=color_score > 0,
        category_match=category_score > 0,
        details=details,
    )


def find_matches(
    query: SearchQuery,
    candidates: Iterable[CandidateItem],
    min_score: int | None = None,
    config: MatchingConfig | None = None,
) -> list[MatchResult]:
    """Rank candidate items for a search.

    Candidates are expected to be the active items only; no status filtering
    happens here. Results are sorted by score, highest first, with ties kept in
    candidate order.

    Args:
        query: The search
        candidates: Found items to score
        min_score: Minimum score to keep (defaults to config.min_score, 30)
        config: Matching configuration (if None, loads from settings file)

    Returns:
        List of MatchResult, empty when nothing clears the threshold
    """
    if config is None:
        config = get_matching_config()
    if min_score is None:
        min_score = config.min_score

    results: list[MatchResult] = []

    for item in candidates:
        breakdown = compute_score(query, item, config)
        if breakdown.score < min_score:
            continue

        logger.debug(
            "Candidate matched",
            item_id=item.get("id"),
            score=breakdown.score,
            details=breakdown.details,
        )
        results.append(
            MatchResult(
                item=item,
                score=breakdown.score,
                tag_matches=breakdown.tag_matches,
                color_match=breakdown.color_match,
                category_match=breakdown.category_match,
            )
        )

    # sorted() is stable, so equal scores keep candidate order
    return sorted(results, key=lambda result: result.score, reverse=True)
