"""Split transcripts of either shape into normalized, timestamped words."""

import logging
import math
import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from vid2words.errors import InvalidInputError
from vid2words.models import LineEntry, Token, TranscriptEntry, WordEntry

logger = logging.getLogger(__name__)

# [HH:MM:SS] at the start of a line, the rest of the line is spoken text
TIMESTAMP_LINE = re.compile(r"^\s*\[(\d{2}):(\d{2}):(\d{2})\]\s*(.*)$")

# Alphanumeric run with at most one embedded apostrophe
WORD_PATTERN = re.compile(r"[^\W_]+(?:'[^\W_]+)?")

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})


def normalize_words(text: str) -> List[str]:
    """
    Extract lowercase word tokens from free text.

    Args:
        text: Any spoken text

    Returns:
        Tokens in reading order; punctuation-only runs yield nothing
    """
    return WORD_PATTERN.findall(text.translate(_APOSTROPHES).lower())


def parse_timestamped_transcript(text: str) -> List[LineEntry]:
    """
    Parse a transcript whose lines carry [HH:MM:SS] prefixes.

    Lines without a valid prefix are ignored, text included.
    """
    entries = []
    for line in text.splitlines():
        match = TIMESTAMP_LINE.match(line)
        if not match:
            if line.strip():
                logger.debug("Skipping line without timestamp: %r", line)
            continue
        hours, minutes, seconds, spoken = match.groups()
        offset = int(hours) * 3600 + int(minutes) * 60 + int(seconds)
        entries.append(LineEntry(time=float(offset), text=spoken))
    return entries


def _offset(value: Any) -> Optional[float]:
    """Return a usable offset in seconds, or None if the value is malformed."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    offset = float(value)
    if math.isnan(offset) or math.isinf(offset) or offset < 0:
        return None
    return offset


def _first_present(item: Mapping, *keys: str) -> Any:
    for key in keys:
        if key in item:
            return item[key]
    return None


def _coerce_entry(item: Any) -> Optional[TranscriptEntry]:
    if isinstance(item, LineEntry):
        time, text = _offset(item.time), item.text
        if time is None or not isinstance(text, str):
            return None
        return item
    if isinstance(item, WordEntry):
        if _offset(item.start_time) is None or not isinstance(item.word, str):
            return None
        return item
    if not isinstance(item, Mapping):
        return None

    if "word" in item:
        word = item["word"]
        start = _offset(_first_present(item, "startTime", "start_time"))
        if start is None or not isinstance(word, str):
            return None
        end = _offset(_first_present(item, "endTime", "end_time"))
        return WordEntry(word=word, start_time=start, end_time=end)

    if "text" in item:
        text = item["text"]
        time = _offset(_first_present(item, "time", "start"))
        if time is None or not isinstance(text, str):
            return None
        return LineEntry(time=time, text=text)

    return None


def coerce_entries(transcript: Any) -> List[TranscriptEntry]:
    """
    Turn either supported input shape into a list of transcript entries.

    Args:
        transcript: A [HH:MM:SS]-prefixed transcript string, or a sequence of
            LineEntry/WordEntry objects or equivalent mappings

    Returns:
        Entries in input order, malformed ones dropped

    Raises:
        InvalidInputError: If the input is neither a string nor a sequence
    """
    if isinstance(transcript, str):
        return parse_timestamped_transcript(transcript)

    if isinstance(transcript, (bytes, bytearray, Mapping)) or not isinstance(transcript, Sequence):
        raise InvalidInputError(
            f"Expected a transcript string or a sequence of entries, got {type(transcript).__name__}"
        )

    entries = []
    for index, item in enumerate(transcript):
        entry = _coerce_entry(item)
        if entry is None:
            logger.debug("Skipping malformed transcript entry %d: %r", index, item)
            continue
        entries.append(entry)
    return entries


def tokenize(transcript: Any) -> List[Token]:
    """
    Produce the flat, ordered list of (word, offset) tokens for a transcript.

    Line-level words share their line's time; word-level entries use their
    start time. Numerals are kept here and dropped during aggregation.
    """
    tokens = []
    for entry in coerce_entries(transcript):
        if isinstance(entry, WordEntry):
            text, offset = entry.word, float(entry.start_time)
        else:
            text, offset = entry.text, float(entry.time)
        tokens.extend(Token(word, offset) for word in normalize_words(text))
    return tokens
