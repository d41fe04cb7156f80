"""
reporter.py - Generates TSV and JSON output files from an extraction result
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import config
from models import ExtractionResult, Listing
from utils_logging import log_event

TSV_HEADER = "Title\tPlatform\tPrice\n"

_WHITESPACE = re.compile(r"\s+")


def listing_to_tsv_row(listing: Listing) -> str:
    title = _WHITESPACE.sub(" ", listing.title)
    return f"{title}\t{listing.platform or ''}\t{listing.price:.2f}"


def products_to_tsv(products: Iterable[Listing]) -> str:
    """
    Serialize products for pasting into a spreadsheet.

    Header line, then one row per product joined by newlines (no trailing
    newline). Returns an empty string when there is nothing to export.
    """
    rows = [listing_to_tsv_row(p) for p in products]
    if not rows:
        return ""
    return TSV_HEADER + "\n".join(rows)


def generate_json_output(result: ExtractionResult, original_filename: str, timestamp: str,
                         engine: str = "rules") -> dict:
    """Generate structured JSON output."""
    return {
        "meta": {
            "timestamp": timestamp,
            "original_file": original_filename,
            "engine": engine,
            "product_count": result.product_count,
            "filtered_out_count": result.filtered_out_count,
            "duplicates_removed_count": result.duplicates_removed_count,
        },
        "products": [p.to_dict() for p in result.products],
        "removed_duplicates": [p.to_dict() for p in result.removed_duplicates],
        "filtered_out_products": [p.to_dict() for p in result.filtered_out_products],
    }


def generate_filename(original_filename: str, timestamp: str) -> str:
    """
    Format: <source-stem>-<YYYYMMDD-HHMM>, stem sanitized and capped at 60 chars.
    """
    stem = Path(original_filename).stem
    stem = re.sub(r"[^a-zA-Z0-9_-]+", "-", stem).strip("-")[:60]
    return f"{stem or 'listings'}-{timestamp}"


def generate_reports(
    result: ExtractionResult,
    original_filename: str,
    engine: str = "rules",
    output_dir: Optional[Path] = None,
) -> tuple:
    """
    Write the TSV export and the JSON dump of all three buckets.

    Returns:
        tuple: (tsv_path, json_path)
    """
    log_event("📊 Generating Reports...")

    output_dir = Path(output_dir or config.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d-%H%M")
    base_name = generate_filename(original_filename, timestamp)

    tsv_path = output_dir / f"{base_name}.tsv"
    json_path = output_dir / f"{base_name}.json"

    tsv_path.write_text(products_to_tsv(result.products), encoding="utf-8")

    json_content = generate_json_output(result, original_filename, timestamp, engine)
    json_path.write_text(json.dumps(json_content, indent=2, ensure_ascii=False), encoding="utf-8")

    log_event(f"   📄 Generated reports:")
    log_event(f"      - {tsv_path.name}")
    log_event(f"      - {json_path.name}")

    return (tsv_path, json_path)
