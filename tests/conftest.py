"""Pytest configuration: ensures the backend source root is importable."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))
