"""Lost-item search against a candidate store."""

from __future__ import annotations

import time
from typing import Any, TypedDict

import structlog

from lostfound.core.metrics import record_match_search
from lostfound.core.store import ACTIVE_STATUS, CandidateStore

from .config import MatchingConfig, get_matching_config
from .evaluator import SearchQuery, find_matches
from .results import build_match_response

logger = structlog.get_logger("lostfound.matching.service")


class SearchResponse(TypedDict):
    match_count: int
    matches: list[dict[str, Any]]


def search_active_items(
    store: CandidateStore,
    query: SearchQuery,
    min_score: int | None = None,
    config: MatchingConfig | None = None,
) -> SearchResponse:
    """Find active found items matching a lost-item search.

    Uses the lower search threshold (config.search_min_score) by default so
    the searcher sees more possible matches. Store errors propagate.

    Args:
        store: Source of found-item records
        query: The search
        min_score: Override for the minimum score
        config: Matching configuration (if None, loads from settings file)

    Returns:
        SearchResponse with the formatted matches, best first
    """
    if config is None:
        config = get_matching_config()
    if min_score is None:
        min_score = config.search_min_score

    start = time.perf_counter()
    candidates = store.get_items(ACTIVE_STATUS)
    matches = find_matches(query, candidates, min_score=min_score, config=config)
    duration = time.perf_counter() - start

    record_match_search(len(candidates), len(matches), duration)
    logger.info(
        "Lost-item search completed",
        candidates=len(candidates),
        matches=len(matches),
        min_score=min_score,
        top_score=matches[0].score if matches else None,
        duration_ms=round(duration * 1000, 2),
    )

    return {
        "match_count": len(matches),
        "matches": [build_match_response(match) for match in matches],
    }
