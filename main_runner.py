"""
main_runner.py - Listing scraper and title optimizer entry point

Commands:
  scrape FILE      Extract clean products from one saved HTML page, print TSV
  beautify [FILE]  Rewrite titles (one per line, file or stdin) into the sales format
  watch            Watch the queue folder and process every HTML file dropped in
"""

import argparse
import sys
import time
import traceback
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

import config
import reporter
from engines import beautify_titles, scrape
from models import ScraperError
from title_cleaner import clean_listings
from utils_logging import log_banner, log_event


def read_html(file_path: Path) -> str:
    try:
        html_content = file_path.read_text(encoding='utf-8')
        log_event(f"   ✅ Read {len(html_content):,} characters from file")
    except UnicodeDecodeError:
        log_event(f"   ⚠️  UTF-8 decode failed, trying latin-1...", "warning")
        html_content = file_path.read_text(encoding='latin-1')
        log_event(f"   ✅ Read {len(html_content):,} characters with latin-1 encoding")
    return html_content


class HTMLFileHandler(FileSystemEventHandler):
    """Watches for new HTML files in the queue directory."""

    def __init__(self, engine: str = "rules"):
        self.engine = engine
        self.processing = set()

    def on_created(self, event):
        if event.is_directory:
            return

        file_path = Path(event.src_path)

        # Skip macOS metadata files
        if file_path.name.startswith('._'):
            log_event(f"   ⏭️  Skipping macOS metadata file: {file_path.name}")
            return

        if file_path.suffix.lower() not in ['.html', '.htm']:
            return
        if file_path in self.processing or not file_path.exists():
            return

        log_event(f"\n📥 New file detected: {file_path.name}")
        if not wait_for_transfer(file_path):
            return

        self.processing.add(file_path)
        try:
            process_file_safely(file_path, self.engine)
        finally:
            self.processing.discard(file_path)


def wait_for_transfer(file_path: Path) -> bool:
    """Wait until the file size stops changing. False if the file vanished."""
    log_event(f"   ⏳ Waiting for file transfer to complete...")
    last_size = -1
    stable_count = 0

    for _ in range(config.FILE_TRANSFER_MAX_WAIT):
        time.sleep(1)
        if not file_path.exists():
            return False

        current_size = file_path.stat().st_size
        if current_size == last_size:
            stable_count += 1
            if stable_count >= config.FILE_STABILIZATION_CHECKS:
                log_event(f"   ✅ Transfer complete: {current_size / 1024:.1f} KB")
                break
        else:
            stable_count = 0
            last_size = current_size

    return file_path.exists()


def process_file_safely(file_path: Path, engine: str = "rules"):
    """
    Scrape one queued file, write reports, then archive it (or move it to errors).
    """
    try:
        log_banner(f"🚀 Processing: {file_path.name} (engine: {engine})")

        html_content = read_html(file_path)
        result = scrape(html_content, engine=engine)
        reporter.generate_reports(result, file_path.name, engine=engine)

        config.ARCHIVE_DIR.mkdir(parents=True, exist_ok=True)
        file_path.rename(config.ARCHIVE_DIR / file_path.name)
        log_event(f"✅ SUCCESS - Archived: {file_path.name}")

    except Exception as e:
        log_event(f"\n❌ CRITICAL ERROR: {e}", "error")
        log_event(f"Traceback:\n{traceback.format_exc()}", "error")

        try:
            if file_path.exists():
                config.ERROR_DIR.mkdir(parents=True, exist_ok=True)
                error_path = config.ERROR_DIR / file_path.name
                file_path.rename(error_path)
                log_event(f"Moved to error directory: {error_path}", "error")
        except Exception as move_error:
            log_event(f"Failed to move file: {move_error}", "error")


def cmd_scrape(args) -> int:
    html_content = read_html(Path(args.file))
    result = scrape(html_content, engine=args.engine)

    summary = result.summary()
    if summary:
        log_event(f"   ℹ️  {summary}")

    products = clean_listings(result.products) if args.clean else list(result.products)
    tsv = reporter.products_to_tsv(products)
    if tsv:
        print(tsv)

    if args.save:
        reporter.generate_reports(result, Path(args.file).name, engine=args.engine)
    return 0


def cmd_beautify(args) -> int:
    if args.file:
        text = Path(args.file).read_text(encoding='utf-8')
    else:
        text = sys.stdin.read()

    for title in beautify_titles(text, engine=args.engine):
        print(title)
    return 0


def cmd_watch(args) -> int:
    for directory in (config.QUEUE_DIR, config.ARCHIVE_DIR, config.ERROR_DIR, config.OUTPUT_DIR):
        directory.mkdir(parents=True, exist_ok=True)

    log_banner("🚀 LISTING SCRAPER - STARTED")
    log_event(f"📂 Monitoring: {config.QUEUE_DIR}")
    log_event(f"🔧 Engine: {args.engine}")
    log_event(f"\n⏳ Waiting for HTML files...")

    event_handler = HTMLFileHandler(engine=args.engine)
    observer = Observer()
    observer.schedule(event_handler, str(config.QUEUE_DIR), recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        log_event("\n🛑 Shutting down gracefully...")
        observer.stop()

    observer.join()
    log_event("👋 Watcher stopped.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape marketplace listings and optimize their titles.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_scrape = sub.add_parser("scrape", help="Extract products from a saved HTML page")
    p_scrape.add_argument("file", help="Path to the HTML file")
    p_scrape.add_argument("--engine", choices=["rules", "gemini"], default="rules")
    p_scrape.add_argument("--clean", action="store_true", help="Regex-clean titles before printing")
    p_scrape.add_argument("--save", action="store_true", help="Also write TSV/JSON reports to the output folder")
    p_scrape.set_defaults(func=cmd_scrape)

    p_beautify = sub.add_parser("beautify", help="Rewrite titles into the sales format")
    p_beautify.add_argument("file", nargs="?", help="Text file with one title per line (default: stdin)")
    p_beautify.add_argument("--engine", choices=["rules", "gemini"], default="rules")
    p_beautify.set_defaults(func=cmd_beautify)

    p_watch = sub.add_parser("watch", help="Process HTML files dropped into the queue folder")
    p_watch.add_argument("--engine", choices=["rules", "gemini"], default="rules")
    p_watch.set_defaults(func=cmd_watch)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except ScraperError as e:
        log_event(f"❌ {e}", "error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
