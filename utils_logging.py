import csv
import logging
from datetime import datetime
from config import LOG_FILE, CSV_LOG_FILE, PRICING

# File log for everything; console gets the same lines with a level tag
logging.basicConfig(
    filename=LOG_FILE,
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("listing_scraper")

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

USAGE_COLUMNS = ["Timestamp", "Task", "Model", "Input_Tokens", "Output_Tokens", "Cost_USD"]


def log_event(msg: str, level: str = "info"):
    """Write one line to the scraper log and echo it on the console."""
    print(f"[{level.upper()}] {msg}")
    logger.log(LEVELS.get(level, logging.INFO), msg)


def log_banner(title: str, width: int = 80):
    """Section header used around each processed file."""
    log_event("=" * width)
    log_event(title)
    log_event("=" * width)


def estimate_cost(model: str, in_tok: int, out_tok: int) -> float:
    """USD cost of one Gemini call; unknown models cost 0."""
    rates = PRICING.get(model, {})
    return (in_tok / 1_000_000) * rates.get("input", 0) + (out_tok / 1_000_000) * rates.get("output", 0)


def log_token_usage(task: str, model: str, in_tok: int, out_tok: int) -> float:
    """
    Append one row to the token usage CSV (header on first write).

    Returns:
        float: cost of the call in USD
    """
    cost = estimate_cost(model, in_tok, out_tok)
    new_file = not CSV_LOG_FILE.exists()

    with open(CSV_LOG_FILE, mode='a', newline='') as f:
        writer = csv.writer(f)
        if new_file:
            writer.writerow(USAGE_COLUMNS)
        writer.writerow([datetime.now().isoformat(), task, model, in_tok, out_tok, f"${cost:.6f}"])

    log_event(f"   💰 {task}: ${cost:.4f} ({in_tok:,} in, {out_tok:,} out)")
    return cost
