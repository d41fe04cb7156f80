"""
title_cleaner.py - Regex cleanup of scraped titles before export
"""

import re
from dataclasses import replace
from typing import Iterable, List

from models import Listing

_BRACKETS = (
    ("•", "|"),
    ("【", "["),
    ("】", "] "),
)
_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s|\[\]\-%+&.,:/]")
_MULTI_SPACE = re.compile(r"\s\s+")


def clean_title(title: str) -> str:
    """Drop emoji and decorative glyphs, keeping plain ASCII text and separators."""
    for old, new in _BRACKETS:
        title = title.replace(old, new)
    title = _DISALLOWED.sub("", title)
    return _MULTI_SPACE.sub(" ", title).strip()


def clean_listings(listings: Iterable[Listing]) -> List[Listing]:
    return [replace(listing, title=clean_title(listing.title)) for listing in listings]
