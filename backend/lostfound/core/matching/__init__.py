"""Matching engine for lost-and-found searches.

Scores found items against a lost-item search using tag overlap, color,
category and description similarity, and ranks them for display.
"""

from .config import (
    DEFAULT_CONFIG,
    MatchingConfig,
    MatchingSettings,
    get_matching_config,
    reload_matching_config,
)
from .criteria import (
    description_similarity,
    find_tag_matches,
    match_category,
    match_color,
    match_description,
    match_tags,
)
from .evaluator import (
    MAX_SCORE,
    CandidateItem,
    MatchResult,
    ScoreBreakdown,
    SearchQuery,
    compute_score,
    find_matches,
)
from .results import MatchQuality, build_match_response, quality_band
from .service import SearchResponse, search_active_items
from .similarity import edit_distance, levenshtein_similarity
from .text import STOP_WORDS, extract_significant_words, parse_item_tags

__all__ = [
    "MatchingConfig",
    "DEFAULT_CONFIG",
    "MatchingSettings",
    "get_matching_config",
    "reload_matching_config",
    "find_tag_matches",
    "match_tags",
    "match_color",
    "match_category",
    "match_description",
    "description_similarity",
    "MAX_SCORE",
    "CandidateItem",
    "SearchQuery",
    "ScoreBreakdown",
    "MatchResult",
    "compute_score",
    "find_matches",
    "MatchQuality",
    "quality_band",
    "build_match_response",
    "SearchResponse",
    "search_active_items",
    "edit_distance",
    "levenshtein_similarity",
    "STOP_WORDS",
    "extract_significant_words",
    "parse_item_tags",
]
