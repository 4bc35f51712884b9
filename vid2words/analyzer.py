"""Word frequency analysis of timestamped transcripts."""

import logging
from typing import Any, Iterable, List, Optional

from vid2words.aggregator import aggregate
from vid2words.constants import STOP_WORDS, TOP_K
from vid2words.models import AnalysisResult, RoastContext, WordEntry, WordFrequency
from vid2words.ranker import rank
from vid2words.tokenizer import coerce_entries, tokenize
from vid2words.writers.txt_writer import format_seconds

logger = logging.getLogger(__name__)


def get_transcript_text(transcript: Any) -> str:
    """
    Convert a transcript of either shape into a single text string.

    Args:
        transcript: Timestamped transcript string or sequence of entries

    Returns:
        Full transcript text; strings are returned unchanged
    """
    if isinstance(transcript, str):
        return transcript

    lines = []
    words = []
    for entry in coerce_entries(transcript):
        if isinstance(entry, WordEntry):
            words.append(entry.word)
            continue
        if words:
            lines.append(" ".join(words))
            words = []
        lines.append(f"[{format_seconds(entry.time)}] {entry.text}")
    if words:
        lines.append(" ".join(words))
    return "\n".join(lines)


def rank_words(
    transcript: Any,
    stop_words: Iterable[str] = STOP_WORDS,
    top_k: int = TOP_K
) -> List[WordFrequency]:
    """
    Run the tokenize, aggregate and rank stages over a transcript.

    Args:
        transcript: Timestamped transcript string or sequence of entries
        stop_words: Words excluded from the ranking
        top_k: Maximum number of words returned

    Returns:
        Most frequent significant words, most frequent first
    """
    tokens = tokenize(transcript)
    stats = aggregate(tokens, stop_words)
    logger.debug("%d tokens, %d distinct significant words", len(tokens), len(stats))
    return rank(stats, top_k)


def analyze_transcript(
    transcript: Any,
    stop_words: Iterable[str] = STOP_WORDS,
    top_k: int = TOP_K
) -> AnalysisResult:
    """
    Analyze a transcript and keep it alongside the ranking.

    The transcript is passed through unmodified so it can be handed to
    downstream consumers together with the ranked words.
    """
    return AnalysisResult(
        transcript=transcript,
        word_frequencies=rank_words(transcript, stop_words, top_k),
    )


def build_roast_context(result: AnalysisResult) -> Optional[RoastContext]:
    """Pair the top word with the full transcript, or None if nothing was ranked."""
    if result.is_empty:
        return None
    return RoastContext(word=result.top_word, transcript=result.transcript)
