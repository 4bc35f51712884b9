"""Command-line entry point for transcript word frequency analysis."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple
from tqdm import tqdm

from vid2words.analyzer import analyze_transcript, build_roast_context
from vid2words.config import Config
from vid2words.errors import InvalidInputError
from vid2words.logger import get_logger
from vid2words.models import AnalysisResult
from vid2words.writers.json_writer import write_json
from vid2words.writers.txt_writer import format_seconds, write_txt

NO_WORDS_MESSAGE = "No significant words found (video too short or silent?)"


def load_transcript(path: Path) -> Any:
    """
    Read a transcript file.

    JSON files hold word-level entries, either as a list or under a
    "words", "segments" or "transcript" key. Anything else is read as
    [HH:MM:SS]-prefixed text.

    Args:
        path: Transcript file

    Returns:
        Transcript string or list of entry mappings
    """
    with open(path, 'r', encoding='utf-8') as f:
        if path.suffix.lower() != ".json":
            return f.read()
        data = json.load(f)

    if isinstance(data, dict):
        for key in ("words", "segments", "transcript"):
            if key in data:
                return data[key]
        raise InvalidInputError(f"{path.name} has no words, segments or transcript key")
    return data


def process_transcript(path: Path, out_dir: Path) -> Tuple[Path, AnalysisResult]:
    """
    Analyze a single transcript file and write the ranking outputs.

    Args:
        path: Transcript file
        out_dir: Base output directory, a subdirectory per transcript is created

    Returns:
        Tuple of (output_dir, result)
    """
    transcript = load_transcript(path)
    result = analyze_transcript(transcript)

    output_dir = out_dir / path.stem
    output_dir.mkdir(parents=True, exist_ok=True)
    write_json(result, output_dir / "word_frequencies.json")
    write_txt(result, output_dir / "word_frequencies.txt")
    return output_dir, result


def print_result(path: Path, output_dir: Path, result: AnalysisResult) -> None:
    """Print the ranking for one transcript."""
    print()
    print("=" * 60)
    print(f"TOP WORDS: {path.name}")
    print("=" * 60)
    if result.is_empty:
        print(NO_WORDS_MESSAGE)
    for rank, frequency in enumerate(result.word_frequencies, start=1):
        times = ", ".join(format_seconds(t) for t in frequency.timestamps)
        print(f"{rank:2d}. {frequency.word:<20} x{frequency.count:<4} {times}")

    context = build_roast_context(result)
    if context:
        print(f"Top word for roasting: {context.word}")
    print(f"Files saved to: {output_dir}")


def run(paths: List[Path]) -> int:
    """
    Process several transcripts, continuing past failures.

    Returns:
        Number of transcripts that failed
    """
    Config.OUT_DIR.mkdir(parents=True, exist_ok=True)
    failures = 0
    results = []

    for path in tqdm(paths, desc="Analyzing", unit="file", ncols=80, leave=False, disable=len(paths) < 2):
        try:
            output_dir, result = process_transcript(path, Config.OUT_DIR)
            results.append((path, output_dir, result))
        except (OSError, ValueError) as e:
            failures += 1
            print(f"✗ Failed to analyze {path}: {str(e)}", file=sys.stderr)

    for path, output_dir, result in results:
        print_result(path, output_dir, result)
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """Analyze the transcripts named on the command line, or prompt for one."""
    try:
        Config.validate()
    except ValueError as e:
        print(f"✗ Configuration Error: {str(e)}", file=sys.stderr)
        return 1
    logger = get_logger(__name__, Config.LOG_LEVEL)
    logging.getLogger().setLevel(Config.LOG_LEVEL)
    logger.debug("Log level set to %s", Config.LOG_LEVEL)

    args = sys.argv[1:] if argv is None else argv
    if args:
        return 1 if run([Path(arg) for arg in args]) else 0

    print("=" * 60)
    print("Transcript Word Frequency Analyzer")
    print("=" * 60)

    failures = 0
    while True:
        print()
        entered = input("Path of the transcript to analyze (empty to quit): ").strip()
        if not entered:
            break
        failures += run([Path(entered)])

    print()
    print("Thank you for using the word frequency analyzer!")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
