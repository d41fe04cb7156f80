import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# --- Paths ---
BASE_DIR = Path(__file__).resolve().parent
INBOX_DIR = Path(os.getenv("SCRAPER_INBOX_DIR", BASE_DIR / "Listing_Inbox"))

QUEUE_DIR = INBOX_DIR / "Scrape_Queue"
ARCHIVE_DIR = INBOX_DIR / "Processed_Archive"
ERROR_DIR = INBOX_DIR / "Errors"
OUTPUT_DIR = INBOX_DIR / "Output"

LOG_FILE = Path(os.getenv("SCRAPER_LOG_FILE", BASE_DIR / "listing_scraper.log"))
CSV_LOG_FILE = Path(os.getenv("SCRAPER_TOKEN_LOG", BASE_DIR / "token_usage_log.csv"))

# --- API Keys ---
# Only the Gemini engines need it; checked when a client is first created.
GOOGLE_API_KEY = os.getenv("GOOGLEAISTUDIO_API_KEY")

# --- Models ---
MODEL_EXTRACTION = os.getenv("MODEL_EXTRACTION", "gemini-2.5-flash")  # big context for raw HTML
MODEL_REWRITE = os.getenv("MODEL_REWRITE", "gemini-2.5-flash")        # flash is fast enough for text

PRICING = {
    # Google Gemini pricing (per 1M tokens)
    # Source: https://ai.google.dev/pricing
    "gemini-1.5-flash": {"input": 0.075, "output": 0.30},
    "gemini-1.5-pro": {"input": 1.25, "output": 5.00},
    "gemini-2.5-flash": {"input": 0.075, "output": 0.30},
    "gemini-2.5-pro": {"input": 1.25, "output": 5.00},
    "gemini-2.0-flash": {"input": 0.075, "output": 0.30},
    "gemini-flash-latest": {"input": 0.075, "output": 0.30}
}

# --- Noise Filter ---
# Boilerplate / placeholder offers that are never real listings.
# Matched as case-sensitive literal prefixes.
DEFAULT_TITLE_PREFIXES = [
    '20 Accounts with 100+ Skins',
    '20 Accounts with 50+ Skins',
    'Fortnite - Surprise Account',
    'Fortnite [300+ 5x and 500+ 1x]',
    'Fortnite Account | Platforms - Available',
    'Fortnite account [20+ Skins]',
    'Individual offer for a personal order',
    'NEW 100+ 20x Price for one',
    'NEW 20+ 20x Price for one',
    'NEW 200+ 10x Price for one',
    'NEW 200+ 20x Price for one',
    'NEW 50+ 20x Price for one',
    'Total 120x Accounts',
    'Unchained Ramirez - Fortnite',
    'OFFER: 25x [LA] 10+ Skins',
    'OFFER: 20x [EU] 10+ Skins',
    'OFFER: 20x [EU] 20+ Skins',
    '10x [EUW 30+ LVL] 10+ Skins',
    '10x [EUW 30+ LVL] 25+ Skins',
    '10x [EUW 30+ LVL] 50+ Skins',
    '10x [EUW 30+ LVL] 100+ Skins',
    '10x [NA 30+ LVL] 10+ Skins',
    '10x [NA 30+ LVL] 25+ Skins',
    '10x [EUNE 30+ LVL] 10+ Skins',
    '10x [EUNE 30+ LVL] 25+ Skins',
    '10x [EUNE 30+ LVL] 50+ Skins',
    '10x [EUNE 30+ LVL] 100+ Skins',
]

# One prefix per line; blank lines and lines starting with '#' are ignored.
TITLE_FILTER_FILE = Path(os.getenv("TITLE_FILTER_FILE", BASE_DIR / "title_filters.txt"))
MIN_TITLE_LENGTH = int(os.getenv("MIN_TITLE_LENGTH", "14"))


def load_title_prefixes(path: Path = None) -> list:
    """
    Load the title prefix denylist.

    Reads `path` (defaults to TITLE_FILTER_FILE) when it exists, otherwise
    falls back to DEFAULT_TITLE_PREFIXES. Lines are kept verbatim apart from
    the trailing newline so that prefixes with trailing spaces still work.
    """
    path = Path(path) if path else TITLE_FILTER_FILE
    if not path.exists():
        return list(DEFAULT_TITLE_PREFIXES)

    prefixes = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        prefixes.append(line)
    return prefixes


TITLE_PREFIXES_TO_FILTER = load_title_prefixes()

# --- Title Optimizer ---
TITLE_LENGTH_BUDGET = 130   # "Instant Delivery" suffix only fits below this
TITLE_SOFT_LIMIT = 150      # advisory target for the AI rewriter prompt

# --- System Settings ---
FILE_STABILIZATION_CHECKS = 3
FILE_TRANSFER_MAX_WAIT = 30
