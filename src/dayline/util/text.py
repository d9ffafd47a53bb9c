"""
Text-related helpers.
"""

from __future__ import annotations

_ESCAPED_NEWLINE = "\\n"


def repair_escaped_newlines(value: str) -> str:
    """
    Turn literal backslash-n pairs (as emitted by the feed API) into real line breaks.
    """
    return value.replace(_ESCAPED_NEWLINE, "\n")
