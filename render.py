#!/usr/bin/env python3
"""
medq-text - render AI-generated study text

Simple usage:
    python render.py answer.txt                  # Formatted output in the terminal
    python render.py answer.txt --format json    # Document as JSON
    python render.py answer.txt -o answer.md     # Normalized markdown file
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from medq_text.cli import app

if __name__ == "__main__":
    app()
