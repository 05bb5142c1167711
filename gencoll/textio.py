"""Line reading helpers for text streams."""

from __future__ import annotations

from typing import IO, Optional


def getline(stream: IO) -> Optional[str]:
    """Read one whole line, keeping its line feed; None at end of input."""
    line = stream.readline()
    if not line:
        return None
    return line


def remove_tail_lf(s: Optional[str]) -> Optional[str]:
    """Drop a single trailing line feed, if there is one."""
    if s is None:
        return None
    if s.endswith("\n"):
        return s[:-1]
    return s