from bs4 import BeautifulSoup, Comment

from models import ParseError
from utils_logging import log_event


def clean_html_for_ai(html_content: str) -> str:
    """
    Strip everything the AI extractor does not need from a listing page.

    Args:
        html_content: The actual HTML string content (NOT a file path!)

    Removes scripts, styles, inline SVG and comments, and replaces Base64
    images (100KB+ of gibberish each) with a marker. Listing markup and its
    classes are kept untouched so the model can still see the layout.
    """
    if not isinstance(html_content, str):
        raise ParseError(f"Expected string, got {type(html_content).__name__}")

    log_event(f"   📄 Processing HTML: {len(html_content):,} characters ({len(html_content) / 1024:.1f} KB)")

    try:
        soup = BeautifulSoup(html_content, "lxml")
    except Exception as e:
        raise ParseError(f"Failed to parse HTML content: {e}") from e

    # --- STEP 1: CLEAN THE NOISE ---
    removed_tags = 0
    for tag in soup(["script", "style", "svg", "path", "noscript", "iframe", "meta", "link"]):
        tag.decompose()
        removed_tags += 1

    comment_count = 0
    for element in soup(string=lambda text: isinstance(text, Comment)):
        element.extract()
        comment_count += 1

    if removed_tags > 0:
        log_event(f"   🗑️  Removed {removed_tags} non-content tags")
    if comment_count > 0:
        log_event(f"   🗑️  Removed {comment_count} HTML comments")

    # --- STEP 2: BASE64 STRIPPING ---
    base64_removed = 0
    for img in soup.find_all("img"):
        src = img.get("src", "")
        if src.startswith("data:image"):
            img["src"] = "[BASE64_REMOVED]"
            base64_removed += 1

    if base64_removed > 0:
        log_event(f"   🖼️  Removed {base64_removed} Base64 inline images")

    # --- STEP 3: SERIALIZE ---
    clean_html = str(soup.body) if soup.body else str(soup)

    original_size_kb = len(html_content) / 1024
    cleaned_size_kb = len(clean_html) / 1024
    reduction_pct = ((original_size_kb - cleaned_size_kb) / original_size_kb) * 100 if original_size_kb > 0 else 0

    log_event(f"   ✅ Cleaning complete: {original_size_kb:.1f}KB → {cleaned_size_kb:.1f}KB ({reduction_pct:.1f}% reduction)")

    return clean_html
