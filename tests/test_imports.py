"""Importing the engine must not touch the environment or logging setup."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _run_in(cwd: Path, code: str) -> str:
    env = {key: value for key, value in os.environ.items() if key != "VID2WORDS_SECRET"}
    env["PYTHONPATH"] = str(PROJECT_ROOT)
    completed = subprocess.run(
        [sys.executable, "-c", code],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout.strip()


@pytest.mark.parametrize(
    "module", ["vid2words.ranker", "vid2words.aggregator", "vid2words.analyzer"]
)
def test_engine_import_ignores_dotenv(tmp_path: Path, module: str) -> None:
    """A .env file in the working directory should not leak into os.environ."""
    (tmp_path / ".env").write_text("VID2WORDS_SECRET=leaked\n", encoding="utf-8")

    output = _run_in(
        tmp_path,
        f"import os, sys, {module}; "
        "print(os.environ.get('VID2WORDS_SECRET'), 'vid2words.config' in sys.modules)",
    )

    assert output == "None False"


def test_engine_import_leaves_root_logger_unconfigured(tmp_path: Path) -> None:
    """Embedding applications should keep control of root logging."""
    output = _run_in(
        tmp_path,
        "import logging, vid2words.analyzer, vid2words.tokenizer; "
        "print(len(logging.getLogger().handlers))",
    )

    assert output == "0"
