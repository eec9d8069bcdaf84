"""
Hashtag extraction.
"""

from __future__ import annotations

import re

# A run of `#` collapses onto the word that follows: only the last `#`
# starts the match, so "##yes" yields "yes".
_HASHTAG_RE = re.compile(r"#(\w+)", re.ASCII)


def normalize(token: str) -> str:
    return (token or "").lower().lstrip("#")


def extract_tags(text: str | None = None) -> list[str]:
    """
    Return the hashtags of `text`, normalized, in order of appearance.
    Duplicates are kept.
    """
    if not text:
        return []
    return [normalize(match) for match in _HASHTAG_RE.findall(text)]
