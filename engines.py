"""
engines.py - Interchangeable extraction / rewrite backends

"rules" is the deterministic implementation, "gemini" the AI collaborator.
Both sides of each pair share one contract so callers never care which runs.
"""

from typing import Callable, Dict, List

from gemini_extractor import rewrite_titles_with_gemini, scrape_products_with_gemini
from listing_extractor import extract_listings
from models import EmptyInput, ExtractionResult, Listing
from scraper import scrape_products_from_html
from title_optimizer import optimize_titles, split_titles

EXTRACTION_ENGINES: Dict[str, Callable[[str], List[Listing]]] = {
    "rules": extract_listings,
    "gemini": scrape_products_with_gemini,
}

REWRITE_ENGINES: Dict[str, Callable[[List[str]], List[str]]] = {
    "rules": optimize_titles,
    "gemini": rewrite_titles_with_gemini,
}


def _lookup(table: dict, name: str, kind: str):
    try:
        return table[name]
    except KeyError:
        raise ValueError(f"Unknown {kind} engine '{name}' (choose from: {', '.join(table)})") from None


def get_extractor(name: str = "rules"):
    return _lookup(EXTRACTION_ENGINES, name, "extraction")


def get_rewriter(name: str = "rules"):
    return _lookup(REWRITE_ENGINES, name, "rewrite")


def scrape(html: str, engine: str = "rules") -> ExtractionResult:
    """Scrape with the chosen engine; filtering and dedup always run locally."""
    return scrape_products_from_html(html, extractor=get_extractor(engine))


def beautify_titles(titles, engine: str = "rules") -> List[str]:
    """
    Rewrite a batch of titles (a newline separated string or a list).

    Raises:
        EmptyInput: nothing but blank lines was given
    """
    valid_titles = split_titles(titles)
    if not valid_titles:
        raise EmptyInput("Please enter at least one title.")
    return get_rewriter(engine)(valid_titles)
