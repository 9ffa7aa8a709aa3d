from __future__ import annotations

import sys
from pathlib import Path

STDIN_PATH = Path("-")


def load_raw_bin(path: Path) -> bytes:
    """Read the whole input; ``-`` means standard input."""
    if path == STDIN_PATH:
        return sys.stdin.buffer.read()
    return path.read_bytes()
