from __future__ import annotations

import re


_WHITESPACE_RE = re.compile(r"\s+")
_APOSTROPHES = ("'", "’")

IGNORABLE_TITLE_MARKERS = ("wip", "dont merge", "do not merge", "blocked")
IGNORABLE_LABEL_MARKERS = ("wip", "blocked", "dontmerge", "donotmerge")


def normalize(text: str | None) -> str:
    return (text or "").strip().lower()


def normalize_marker(text: str | None, *, compact: bool = False) -> str:
    """
    Normalize a title or label for marker detection.

    Lowercases, trims, drops enclosing brackets and apostrophes so that
    "[Don't Merge]" and "dont merge" compare equal. With ``compact`` all
    whitespace is removed as well ("do not merge" -> "donotmerge").
    """
    value = normalize(text)
    if value.startswith("[") and "]" in value:
        value = value[1:].replace("]", "", 1).strip()
    for mark in _APOSTROPHES:
        value = value.replace(mark, "")
    if compact:
        return _WHITESPACE_RE.sub("", value)
    return _WHITESPACE_RE.sub(" ", value)


def is_ignorable_title(title: str | None) -> bool:
    hay = normalize_marker(title)
    return any(marker in hay for marker in IGNORABLE_TITLE_MARKERS)


def is_ignorable_label(name: str | None) -> bool:
    hay = normalize_marker(name, compact=True)
    return any(marker in hay for marker in IGNORABLE_LABEL_MARKERS)
