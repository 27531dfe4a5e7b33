"""Prometheus metrics for the matching engine."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

match_searches_total = Counter(
    "match_searches_total",
    "Total number of lost-item match searches run",
)
match_candidates_scanned_total = Counter(
    "match_candidates_scanned_total",
    "Total number of candidate items scored across all searches",
)
match_results_returned = Histogram(
    "match_results_returned",
    "Number of matches returned per search",
    buckets=(0, 1, 2, 5, 10, 25, 50, 100, 250),
)
match_search_duration_seconds = Histogram(
    "match_search_duration_seconds",
    "Duration of lost-item match searches in seconds",
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)


def record_match_search(candidates: int, results: int, duration: float) -> None:
    """Record the outcome of one match search.

    Args:
        candidates: Number of candidate items scored
        results: Number of matches that cleared the threshold
        duration: Wall-clock duration of the search in seconds
    """
    match_searches_total.inc()
    match_candidates_scanned_total.inc(candidates)
    match_results_returned.observe(results)
    match_search_duration_seconds.observe(duration)
