"""Order aggregated words by frequency and keep the top entries."""

from typing import Dict, List

from vid2words.constants import TOP_K
from vid2words.models import WordFrequency, WordStat


def rank(stats: Dict[str, WordStat], top_k: int = TOP_K) -> List[WordFrequency]:
    """
    Rank words by descending count.

    Equal counts keep the mapping's order (first occurrence for aggregate()
    output), so identical input always ranks identically.

    Args:
        stats: Mapping of word to WordStat
        top_k: Maximum number of words returned

    Returns:
        At most top_k WordFrequency records; empty if stats is empty

    Raises:
        ValueError: If top_k is not a non-negative integer
    """
    if isinstance(top_k, bool) or not isinstance(top_k, int) or top_k < 0:
        raise ValueError(f"top_k must be a non-negative integer, got {top_k!r}")

    ordered = sorted(stats.items(), key=lambda item: item[1].count, reverse=True)
    return [
        WordFrequency(word=word, count=stat.count, timestamps=tuple(sorted(stat.timestamps)))
        for word, stat in ordered[:top_k]
    ]
