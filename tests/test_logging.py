"""
Library use stays silent until the application configures logging.

Each case runs in a fresh interpreter, so the logging configuration done
by the API tests in this process cannot leak in.
"""

import subprocess
import sys
from pathlib import Path

BACKEND = Path(__file__).parent.parent / "backend"


def run_snippet(code: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=BACKEND,
        capture_output=True,
        text=True,
        timeout=60,
    )


class TestLibraryIsQuiet:
    def test_import_and_convert_write_nothing(self):
        proc = run_snippet(
            "from numerals import get_engine\n"
            "print(get_engine('en_US').to_words(5), end='')\n"
        )
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout == "five"

    def test_rejected_input_writes_nothing(self):
        proc = run_snippet(
            "from numerals import NotAnIntegerError, get_engine\n"
            "try:\n"
            "    get_engine('ru_RU').to_words(1.5)\n"
            "except NotAnIntegerError:\n"
            "    pass\n"
        )
        assert proc.returncode == 0, proc.stderr
        assert proc.stdout == ""

    def test_configure_logging_takes_over(self):
        proc = run_snippet(
            "from core.logging import configure_logging\n"
            "configure_logging(level='DEBUG')\n"
            "from numerals import get_engine\n"
            "get_engine('de_DE').to_words(21)\n"
        )
        assert proc.returncode == 0, proc.stderr
        assert "numerals_rendered" in proc.stdout
