"""Removal of ``&``-style inline formatting codes."""

from __future__ import annotations

import re

FORMAT_CODE_RE = re.compile(r"&[0-9a-fk-or]", re.IGNORECASE)


def strip_markup(text: str) -> str:
    """Return ``text`` without any ``&`` + colour/style code pairs.

    Removing one pair can join its neighbours into a new pair (``"&&aa"``),
    so substitution repeats until the text is stable.
    """
    stripped = FORMAT_CODE_RE.sub("", text)
    while stripped != text:
        text = stripped
        stripped = FORMAT_CODE_RE.sub("", text)
    return stripped
