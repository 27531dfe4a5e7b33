"""String similarity primitives used by the matching criteria."""

from __future__ import annotations


def edit_distance(s1: str, s2: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute.

    Comparison is exact: callers lower-case before calling when they want
    case-insensitive results.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            cost = 0 if c1 == c2 else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current

    return previous[-1]


def levenshtein_similarity(s1: str, s2: str) -> float:
    """Normalized Levenshtein similarity in the range 0.0-1.0.

    Two empty strings are identical (1.0); exactly one empty string is 0.0.

    Examples:
        >>> levenshtein_similarity("backpack", "backpack")
        1.0
        >>> round(levenshtein_similarity("kitten", "sitting"), 4)
        0.5714
    """
    if not s1 and not s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    return 1.0 - edit_distance(s1, s2) / max(len(s1), len(s2))
