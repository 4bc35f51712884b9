"""Count significant words and collect the offsets they are spoken at."""

from typing import Dict, Iterable

from vid2words.constants import STOP_WORDS
from vid2words.models import Token, WordStat


def is_significant(word: str, stop_words: frozenset = STOP_WORDS) -> bool:
    """Return False for empty tokens, pure numerals and stop words."""
    if not word:
        return False
    if word.isdigit():
        return False
    return word not in stop_words


def aggregate(tokens: Iterable[Token], stop_words: Iterable[str] = STOP_WORDS) -> Dict[str, WordStat]:
    """
    Build per-word counts and offset sets from tokenizer output.

    A word repeated at the same offset counts every time but adds the
    offset only once. Keys are in first-occurrence order.

    Args:
        tokens: (word, offset) tokens as produced by tokenize()
        stop_words: Collection of words to exclude, compared case-insensitively

    Returns:
        Mapping of word to WordStat

    Raises:
        TypeError: If stop_words is a single string rather than a collection
    """
    if isinstance(stop_words, str):
        raise TypeError("stop_words must be a collection of words, not a string")
    excluded = frozenset(word.lower() for word in stop_words)
    stats: Dict[str, WordStat] = {}
    for word, offset in tokens:
        word = word.lower()
        if not is_significant(word, excluded):
            continue
        stat = stats.setdefault(word, WordStat())
        stat.count += 1
        stat.timestamps.add(offset)
    return stats
