"""Individual match criteria evaluators.

Each function evaluates a single signal of a match (tags, color, category,
description) and returns a score and reason. This keeps every signal testable
on its own and lets the evaluator simply add them up.
"""

from __future__ import annotations

from collections.abc import Sequence

from .config import MatchingConfig, get_matching_config
from .similarity import levenshtein_similarity
from .text import extract_significant_words, parse_item_tags


def find_tag_matches(
    search_tags: Sequence[str],
    item_tags: Sequence[str],
    similarity_threshold: float = 0.7,
) -> list[str]:
    """Find the search tags that match any of the item's tags.

    A search tag matches the first item tag that contains it, is contained in
    it, or is similar enough by normalized Levenshtein distance. Short tags
    match loosely ("a" is a substring of "app"); that is how ranking has always
    behaved.

    Args:
        search_tags: Tags from the search, original casing
        item_tags: Lower-cased tags parsed from the item
        similarity_threshold: Similarity must be strictly greater than this

    Returns:
        Matched search tags in search order, original casing, no duplicates
    """
    matches: list[str] = []

    for search_tag in search_tags:
        normalized_search = search_tag.lower()
        for item_tag in item_tags:
            if (
                normalized_search in item_tag
                or item_tag in normalized_search
                or levenshtein_similarity(normalized_search, item_tag) > similarity_threshold
            ):
                if search_tag not in matches:
                    matches.append(search_tag)
                break

    return matches


def match_tags(
    search_tags: Sequence[str],
    item_ai_tags: str | None,
    config: MatchingConfig | None = None,
) -> tuple[float, list[str], str]:
    """Evaluate tag overlap.

    Args:
        search_tags: Tags from the search (photo analysis or user input)
        item_ai_tags: Raw ai_tags value from the item (JSON array or CSV)
        config: Matching configuration (if None, loads from settings file)

    Returns:
        Tuple of (score, matched search tags, reason)
    """
    if config is None:
        config = get_matching_config()

    if not search_tags:
        return 0.0, [], "No tags in search"

    item_tags = parse_item_tags(item_ai_tags)
    if not item_tags:
        return 0.0, [], "No tags on item"

    matches = find_tag_matches(search_tags, item_tags, config.tag_similarity_threshold)
    ratio = len(matches) / max(len(search_tags), 1)
    score = ratio * config.tag_weight

    if not matches:
        return 0.0, [], f"No tag overlap: {list(search_tags)} vs {item_tags}"

    return (
        score,
        matches,
        f"Tag overlap: {len(matches)}/{len(search_tags)} {matches} (+{score:.1f})",
    )


def match_color(
    search_colors: Sequence[str],
    item_color: str | None,
    config: MatchingConfig | None = None,
) -> tuple[float, str]:
    """Evaluate color match.

    Item colors may list several names ("Navy/White", "red, black"). A search
    color matches when the item color contains it, or when it contains the first
    slash- or comma-separated item color.

    Args:
        search_colors: Color names from the search
        item_color: Color string from the item
        config: Matching configuration (if None, loads from settings file)

    Returns:
        Tuple of (score, reason); score is either 0 or the full color weight
    """
    if config is None:
        config = get_matching_config()

    if not search_colors:
        return 0.0, "No colors in search"

    normalized_item = (item_color or "").lower()
    if not normalized_item:
        return 0.0, "No color on item"

    first_slash_color = normalized_item.split("/")[0]
    first_comma_color = normalized_item.split(",")[0].strip()

    for search_color in search_colors:
        normalized_search = search_color.lower()
        if (
            normalized_search in normalized_item
            or first_slash_color in normalized_search
            or first_comma_color in normalized_search
        ):
            return (
                config.color_weight,
                f"Color match: '{normalized_search}' ~ '{normalized_item}' (+{config.color_weight})",
            )

    return 0.0, f"No match: {list(search_colors)} vs '{normalized_item}'"


def match_category(
    search_category: str | None,
    item_category: str | None,
    config: MatchingConfig | None = None,
) -> tuple[float, str]:
    """Evaluate category match (case-insensitive equality).

    Returns:
        Tuple of (score, reason); score is either 0 or the full category weight
    """
    if config is None:
        config = get_matching_config()

    if not search_category:
        return 0.0, "No category in search"

    if not item_category:
        return 0.0, "No category on item"

    if search_category.lower() == item_category.lower():
        return (
            config.category_weight,
            f"Category match: '{item_category}' (+{config.category_weight})",
        )

    return 0.0, f"No match: '{search_category}' vs '{item_category}'"


def description_similarity(
    search_description: str,
    item_description: str,
    config: MatchingConfig | None = None,
) -> float:
    """Word-overlap similarity between two descriptions (0.0-1.0).

    Counts search words that have an identical or near-identical item word,
    divided by the longer word list so that padding either side lowers the
    ratio.
    """
    if config is None:
        config = get_matching_config()

    search_words = extract_significant_words(search_description, config.min_word_length)
    item_words = extract_significant_words(item_description, config.min_word_length)

    if not search_words or not item_words:
        return 0.0

    threshold = config.description_similarity_threshold
    matched = [
        search_word
        for search_word in search_words
        if any(
            search_word == item_word or levenshtein_similarity(search_word, item_word) > threshold
            for item_word in item_words
        )
    ]

    return len(matched) / max(len(search_words), len(item_words))


def match_description(
    search_description: str | None,
    item_description: str | None,
    config: MatchingConfig | None = None,
) -> tuple[float, str]:
    """Evaluate the free-text description bonus.

    Returns:
        Tuple of (score, reason); score ranges from 0 to the description weight
    """
    if config is None:
        config = get_matching_config()

    if not search_description:
        return 0.0, "No description in search"

    if not item_description:
        return 0.0, "No description on item"

    ratio = description_similarity(search_description, item_description, config)
    score = ratio * config.description_weight

    return score, f"Description overlap: {ratio:.2f} (+{score:.1f})"
