"""Text normalization for matching: tag parsing and significant-word extraction."""

from __future__ import annotations

import json
import math
import re
from typing import Any

# Common English filler plus words that appear in nearly every lost/found report
STOP_WORDS = frozenset(
    {
        "a", "an", "the", "is", "it", "to", "of", "and", "or", "in", "on", "at",
        "for", "with", "my", "was", "has", "have", "had", "be", "been", "being",
        "this", "that", "these", "those", "i", "you", "we", "they", "he", "she",
        "found", "lost", "item", "near", "from", "by", "inside", "outside",
    }
)  # fmt: skip

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s]")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unsupported JSON constant: {name}")


def _tag_to_string(value: Any) -> str:
    """Render a decoded JSON value the way stored tags were originally stringified.

    Integral floats drop the ".0", arrays join their elements with commas
    (null elements render empty) and objects become "[object Object]".
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, list):
        return ",".join("" if item is None else _tag_to_string(item) for item in value)
    return "[object Object]"


def _parse_json_tags(ai_tags: str) -> list[str] | None:
    """Decode a JSON array literal of tags.

    Returns None when the value is not valid JSON (NaN and Infinity included)
    or not an array, so the caller can fall back to comma splitting.
    """
    try:
        parsed = json.loads(ai_tags, parse_constant=_reject_constant)
    except ValueError:
        return None

    if not isinstance(parsed, list):
        return None

    return [_tag_to_string(tag).lower() for tag in parsed]


def _parse_csv_tags(ai_tags: str) -> list[str]:
    """Split a comma-separated tag string, dropping blanks."""
    tags = (tag.strip().lower() for tag in ai_tags.split(","))
    return [tag for tag in tags if tag]


def parse_item_tags(ai_tags: str | None) -> list[str]:
    """Parse an item's stored AI tags into lower-cased strings.

    Stored tags come either as a JSON array ('["Backpack", "Navy"]') or as a
    comma-separated string ('Backpack, Navy'); both give the same result.

    Args:
        ai_tags: Raw ai_tags value from the item record

    Returns:
        List of lower-cased tags (empty when absent)
    """
    if not ai_tags:
        return []

    json_tags = _parse_json_tags(ai_tags)
    if json_tags is not None:
        return json_tags

    return _parse_csv_tags(ai_tags)


def extract_significant_words(text: str | None, min_length: int = 2) -> list[str]:
    """Extract the words worth comparing from a free-text description.

    Lower-cases, strips everything outside [a-z0-9] and whitespace, then drops
    short words (length <= min_length) and stop words. Order and duplicates are
    kept.
    """
    if not text:
        return []

    cleaned = _NON_WORD_CHARS.sub("", text.lower())
    return [
        word for word in cleaned.split() if len(word) > min_length and word not in STOP_WORDS
    ]
