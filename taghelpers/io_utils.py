"""Utility helpers for CLI output."""

from __future__ import annotations

import sys
from pathlib import Path


def write_output(path: Path | None, text: str) -> None:
    """Write rendered text to ``path``, or to stdout when no path is given."""

    if path is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
