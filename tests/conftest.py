import os
import sys
import tempfile
from pathlib import Path

# Keep test runs from writing logs into the repo.
_LOG_DIR = Path(tempfile.gettempdir()) / "listing_scraper_tests"
_LOG_DIR.mkdir(exist_ok=True)
os.environ.setdefault("SCRAPER_LOG_FILE", str(_LOG_DIR / "listing_scraper.log"))
os.environ.setdefault("SCRAPER_TOKEN_LOG", str(_LOG_DIR / "token_usage_log.csv"))

sys.path.insert(0, str(Path(__file__).parent.parent))
