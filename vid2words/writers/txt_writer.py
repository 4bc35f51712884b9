"""Writer for the plain-text word ranking."""

from pathlib import Path


def format_seconds(seconds: float) -> str:
    """Format seconds as HH:MM:SS."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def write_txt(result, output_path: Path) -> None:
    """
    Write the ranking to a TXT file.
    
    Format: N. word (count) - HH:MM:SS, HH:MM:SS, ...
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        if result.is_empty:
            f.write("No significant words found (video too short or silent?)\n")
            return
        for rank, frequency in enumerate(result.word_frequencies, start=1):
            times = ", ".join(format_seconds(t) for t in frequency.timestamps)
            f.write(f"{rank}. {frequency.word} ({frequency.count}) - {times}\n")
