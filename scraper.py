"""
scraper.py - HTML to clean product list

Extraction -> noise filter -> de-duplication, returned as one ExtractionResult.
"""

from typing import Callable, List, Optional

from listing_extractor import extract_listings
from listing_filters import dedupe_listings, filter_listings
from models import EmptyInput, ExtractionResult, Listing
from utils_logging import log_event

Extractor = Callable[[str], List[Listing]]


def build_result(raw_products: List[Listing]) -> ExtractionResult:
    """Run the filter and dedup stages over already-extracted listings."""
    kept, filtered_out = filter_listings(raw_products)
    unique, duplicates = dedupe_listings(kept)
    return ExtractionResult(
        products=tuple(unique),
        removed_duplicates=tuple(duplicates),
        filtered_out_products=tuple(filtered_out),
    )


def scrape_products_from_html(html: str, extractor: Optional[Extractor] = None) -> ExtractionResult:
    """
    Scrape a product list out of one HTML document.

    Args:
        html: Raw HTML source
        extractor: Any callable honoring the extract_listings contract
            (defaults to the rule-based extractor)

    Returns:
        ExtractionResult. An empty product list is a valid result.

    Raises:
        EmptyInput: the HTML is blank
        ParseError: the HTML could not be parsed at all
    """
    if not html or not html.strip():
        raise EmptyInput("HTML content cannot be empty.")

    extractor = extractor or extract_listings
    raw_products = extractor(html)
    result = build_result(raw_products)

    log_event(f"   📦 {result.product_count} products "
              f"({result.filtered_out_count} filtered, {result.duplicates_removed_count} duplicates)")
    if result.is_empty:
        log_event("   ⚠️  No products found. Please check your HTML source.", "warning")

    return result
