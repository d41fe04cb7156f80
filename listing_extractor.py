"""
listing_extractor.py - Pulls raw listing records out of marketplace HTML

Known page layouts are described as plain LayoutStrategy records and tried in
priority order. The first strategy whose container selector matches anything
is used on its own; the others are never consulted for that document.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from models import Listing, ParseError, NO_CURRENCY
from utils_logging import log_event

NO_TITLE = "No Title Found"

# Checked in this order; matches are joined with "/".
PLATFORM_KEYWORDS = (
    ("PC", ("pc",)),
    ("XBOX", ("xbox",)),
    ("PS", ("psn", "ps")),
)

# Same leading-number rule a browser's parseFloat uses: "12.50 USD" -> 12.5
_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


@dataclass(frozen=True)
class LayoutStrategy:
    name: str
    container: str
    builder: str                        # "priced" or "review"
    title: Optional[str] = None
    title_attr: Optional[str] = None    # used when the title element has no text
    price: Optional[str] = None
    currency: Optional[str] = None
    platform: Optional[str] = None
    default_currency: str = NO_CURRENCY


STRATEGIES: Tuple[LayoutStrategy, ...] = (
    # Original card grid
    LayoutStrategy(
        name="grid_cards",
        container=".col-sm-6.col-md-3.col-xs-12",
        builder="priced",
        title=".text-body1.text-word-break span",
        price=".text-body1.text-weight-medium",
        currency=".text-caption.q-ml-xs",
    ),
    # Newer tabbed offer list
    LayoutStrategy(
        name="tab_items",
        container="a.tab1-item",
        builder="priced",
        title=".el-text.is-line-clamp",
        title_attr="title",
        price=".item-money p:first-child",
        currency=".item-money p:nth-child(2)",
        platform=".item-tag div:first-child",
        default_currency="USD",
    ),
    # Seller reviews: product title only, no price
    LayoutStrategy(
        name="reviews",
        container="div.tab2-item",
        builder="review",
    ),
)


def parse_price(text: Optional[str]) -> Optional[float]:
    """
    Parse a price string the way the storefronts render it.

    Returns 0.0 for an empty string, None when there is no leading number.
    """
    text = (text or "").strip()
    if not text:
        return 0.0
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    return float(match.group(0))


def detect_platform(title: str) -> Optional[str]:
    """Infer a platform label from free text, e.g. 'PC/XBOX'."""
    lower_title = title.lower()
    platforms = [
        label for label, keywords in PLATFORM_KEYWORDS
        if any(keyword in lower_title for keyword in keywords)
    ]
    return "/".join(platforms) if platforms else None


def _text(element) -> str:
    return element.get_text().strip() if element is not None else ""


def _build_priced(container, strategy: LayoutStrategy) -> Optional[Listing]:
    title_el = container.select_one(strategy.title)
    price_el = container.select_one(strategy.price)
    if title_el is None or price_el is None:
        return None

    title = _text(title_el)
    if not title and strategy.title_attr:
        title = (title_el.get(strategy.title_attr) or "").strip()
    title = title or NO_TITLE

    price = parse_price(_text(price_el))
    if price is None or price < 0:
        return None

    currency = _text(container.select_one(strategy.currency)) if strategy.currency else ""
    platform = _text(container.select_one(strategy.platform)) if strategy.platform else ""

    return Listing(
        title=title,
        price=price,
        currency=currency or strategy.default_currency,
        platform=platform or None,
    )


def _build_review(container, strategy: LayoutStrategy) -> Optional[Listing]:
    paragraphs = container.find_all("p")
    # The reviewed product is the last <p>; a lone <p> is just the review text.
    if len(paragraphs) < 2:
        return None

    title = _text(paragraphs[-1]) or NO_TITLE
    return Listing(
        title=title,
        price=0.0,
        currency=strategy.default_currency,
        platform=detect_platform(title),
    )


BUILDERS = {
    "priced": _build_priced,
    "review": _build_review,
}


def parse_document(html_text) -> BeautifulSoup:
    """Parse HTML into a soup, raising ParseError when that is impossible."""
    if not isinstance(html_text, (str, bytes)):
        raise ParseError(f"Failed to parse HTML content: expected text, got {type(html_text).__name__}")
    try:
        return BeautifulSoup(html_text, "lxml")
    except Exception as e:
        raise ParseError(f"Failed to parse HTML content: {e}") from e


def select_strategy(soup: BeautifulSoup) -> Tuple[Optional[LayoutStrategy], list]:
    """Return the first strategy with at least one container, plus its containers."""
    for strategy in STRATEGIES:
        containers = soup.select(strategy.container)
        if containers:
            return strategy, containers
    return None, []


def extract_listings(html_text) -> List[Listing]:
    """
    Extract raw listings from an HTML document.

    Args:
        html_text: The HTML source as a string

    Returns:
        Listings in document order. Candidates whose price cannot be parsed
        are dropped here and never reach any later bucket.
    """
    soup = parse_document(html_text)
    strategy, containers = select_strategy(soup)

    if strategy is None:
        log_event("   ⚠️  No known listing layout found in document", "warning")
        return []

    build = BUILDERS[strategy.builder]
    listings = []
    for container in containers:
        listing = build(container, strategy)
        if listing is not None:
            listings.append(listing)

    dropped = len(containers) - len(listings)
    log_event(f"   🧩 Layout '{strategy.name}': {len(containers)} containers, {len(listings)} listings"
              + (f" ({dropped} unusable)" if dropped else ""))
    return listings
