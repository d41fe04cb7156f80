"""
listing_filters.py - Noise filtering and de-duplication of scraped listings
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import config
from models import Listing


def is_noise(listing: Listing, prefixes: Sequence[str], min_length: int) -> bool:
    """True when the title is a known placeholder offer or too short to be real."""
    title = listing.title
    starts_with_prefix = any(title.startswith(prefix) for prefix in prefixes)
    is_too_short = len(title) < min_length
    return starts_with_prefix or is_too_short


def filter_listings(
    listings: Iterable[Listing],
    prefixes: Optional[Sequence[str]] = None,
    min_length: Optional[int] = None,
) -> Tuple[List[Listing], List[Listing]]:
    """
    Split listings into (kept, removed), preserving order in both.

    Prefix matching is literal and case-sensitive.
    """
    if prefixes is None:
        prefixes = config.TITLE_PREFIXES_TO_FILTER
    if min_length is None:
        min_length = config.MIN_TITLE_LENGTH

    kept, removed = [], []
    for listing in listings:
        if is_noise(listing, prefixes, min_length):
            removed.append(listing)
        else:
            kept.append(listing)
    return kept, removed


def dedupe_listings(listings: Iterable[Listing]) -> Tuple[List[Listing], List[Listing]]:
    """
    Split listings into (unique, duplicates) by exact title.

    The first listing with a given title wins; price, currency and platform
    are not part of the key.
    """
    seen_titles = set()
    unique, duplicates = [], []
    for listing in listings:
        if listing.title in seen_titles:
            duplicates.append(listing)
        else:
            seen_titles.add(listing.title)
            unique.append(listing)
    return unique, duplicates
