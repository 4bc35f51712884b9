"""Data models for transcript entries and word frequency rankings."""

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional, Union


@dataclass(frozen=True)
class LineEntry:
    """One utterance with a single timestamp covering all of its words."""
    time: float  # Offset in seconds from video start
    text: str


@dataclass(frozen=True)
class WordEntry:
    """A single spoken word with its own timing."""
    word: str
    start_time: float  # Start time in seconds
    end_time: Optional[float] = None  # Kept for playback windows, not ranked


TranscriptEntry = Union[LineEntry, WordEntry]


class Token(NamedTuple):
    """A normalized word and the offset it was spoken at."""

    word: str
    offset: float


@dataclass
class WordStat:
    """Running aggregate for one word."""
    count: int = 0
    timestamps: set = field(default_factory=set)


@dataclass(frozen=True)
class WordFrequency:
    """A ranked word with every distinct offset it occurs at."""
    word: str
    count: int
    timestamps: tuple  # Ascending seconds

    def to_dict(self) -> dict:
        return {
            'word': self.word,
            'count': self.count,
            'timestamps': list(self.timestamps),
        }


@dataclass(frozen=True)
class RoastContext:
    """Top word paired with the full transcript for the generation step."""
    word: str
    transcript: Any


@dataclass(frozen=True)
class AnalysisResult:
    """Ranking for one transcript, plus the transcript itself untouched."""
    transcript: Any
    word_frequencies: list

    @property
    def is_empty(self) -> bool:
        """True when no significant words were spoken."""
        return not self.word_frequencies

    @property
    def top_word(self) -> Optional[str]:
        if self.is_empty:
            return None
        return self.word_frequencies[0].word

    def timestamps_for(self, word: str) -> tuple:
        """
        Look up the offsets of a ranked word.

        Args:
            word: Word in any case

        Returns:
            Ascending offsets, or an empty tuple if the word is not ranked
        """
        wanted = word.strip().lower()
        for frequency in self.word_frequencies:
            if frequency.word == wanted:
                return frequency.timestamps
        return ()
