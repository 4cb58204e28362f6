"""Pytest configuration shared by all test suites"""

import sys
from pathlib import Path

# Add src/ to path so tests run from a plain checkout (no install needed)
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))
