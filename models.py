"""
models.py - Listing records, extraction results and the error taxonomy
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


NO_CURRENCY = "N/A"


class ScraperError(Exception):
    """Base class for every error raised by the scraper."""


class ParseError(ScraperError):
    """The input could not be read as an HTML document at all."""


class EmptyInput(ScraperError):
    """Blank HTML or a blank title list was handed to an entry point."""


class AIResponseError(ScraperError):
    """The AI service answered, but not in the shape we asked for."""


@dataclass(frozen=True)
class Listing:
    title: str
    price: float
    currency: str = NO_CURRENCY
    platform: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"title": self.title, "price": self.price, "currency": self.currency}
        if self.platform:
            data["platform"] = self.platform
        return data


@dataclass(frozen=True)
class ExtractionResult:
    """
    Output of one scrape run.

    The three buckets are disjoint. Counts are always derived from the
    sequences so they can never drift from the data.
    """
    products: Tuple[Listing, ...] = field(default_factory=tuple)
    removed_duplicates: Tuple[Listing, ...] = field(default_factory=tuple)
    filtered_out_products: Tuple[Listing, ...] = field(default_factory=tuple)

    @property
    def product_count(self) -> int:
        return len(self.products)

    @property
    def duplicates_removed_count(self) -> int:
        return len(self.removed_duplicates)

    @property
    def filtered_out_count(self) -> int:
        return len(self.filtered_out_products)

    @property
    def is_empty(self) -> bool:
        return not self.products and not self.filtered_out_products and not self.removed_duplicates

    def summary(self) -> str:
        messages = []
        if self.filtered_out_count > 0:
            messages.append(f"{self.filtered_out_count} generic items removed.")
        if self.duplicates_removed_count > 0:
            messages.append(f"{self.duplicates_removed_count} duplicates removed.")
        return " ".join(messages)
