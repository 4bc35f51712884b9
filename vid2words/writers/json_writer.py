"""Writer for JSON format."""

import json
from pathlib import Path
from vid2words.analyzer import get_transcript_text
from vid2words.models import AnalysisResult


def write_json(result: AnalysisResult, output_path: Path) -> None:
    """Write the ranking and the transcript text to a JSON file."""
    data = {
        'transcript': get_transcript_text(result.transcript),
        'word_frequencies': [
            frequency.to_dict()
            for frequency in result.word_frequencies
        ]
    }
    
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
