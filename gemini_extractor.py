"""
gemini_extractor.py - Gemini-backed listing extraction and title rewriting

Same contracts as the rule-based engines:
- scrape_products_with_gemini(html) -> list[Listing]
- rewrite_titles_with_gemini(titles) -> list[str], same length and order
"""

import json
from typing import List

from google import genai

import config
from html_brief import clean_html_for_ai
from models import AIResponseError, EmptyInput, Listing, NO_CURRENCY
from title_optimizer import split_titles
from utils_logging import log_event, log_token_usage

_client = None


def get_client():
    """Create the Gemini client on first use so the rule engines never need a key."""
    global _client
    if _client is None:
        if not config.GOOGLE_API_KEY:
            raise ValueError("GOOGLEAISTUDIO_API_KEY not found in .env file")
        _client = genai.Client(api_key=config.GOOGLE_API_KEY)
    return _client


PRODUCTS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "products": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "title": {"type": "STRING", "description": "The full title of the product."},
                    "price": {"type": "NUMBER", "description": "The price of the product as a number."},
                    "currency": {"type": "STRING", "description": "The currency of the price (e.g., USD)."},
                    "platform": {
                        "type": "STRING",
                        "description": "The gaming platform, if specified (e.g., PC, XBOX, PSN). Optional.",
                    },
                },
                "required": ["title", "price", "currency"],
            },
        },
    },
    "required": ["products"],
}

REWRITE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "rewrittenTitles": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["rewrittenTitles"],
}

EXTRACTION_PROMPT = """Analyze the following HTML to extract product information. The HTML could contain either direct product listings or a list of seller reviews that mention products.

From each item, extract the following details:
- title: The full title of the product. For review items, this is the title of the product being reviewed.
- price: The numerical price. If no price is found (like in a review item), use 0.
- currency: The currency code (e.g., USD). If no currency is found, use "N/A".
- platform: The gaming platform if specified (e.g., PC, XBOX, PS, PSN). This may be in a dedicated tag or part of the title. If not found, omit this field.

Pay attention to two main structures:
1. Product listings, often in 'a.tab1-item' elements. These will have titles, prices, and platforms.
2. Review listings, often in 'div.tab2-item' elements. These will have a product title (usually the last <p> tag) but no price.

Return the data as a JSON object with a single "products" key, which is an array of product objects.
"""

REWRITE_PROMPT = f"""You are a Title Optimizer for gaming accounts. Your goal is to rewrite raw titles into a specific sales format while retaining MAXIMUM information from the user's input.

### 1. THE FORMAT STRUCTURE
"[Full Access] ✅ [HERO_SKIN] + [TOTAL_COUNT] ✨ [ALL_OTHER_SKINS]" (+ Optional Delivery Suffix)

### 2. CRITICAL RULES

**RULE A: The "Anchor" is Mandatory**
* ALWAYS start with: `[Full Access] ✅`
* Remove "Full Access", "FA", "Access" from the rest of the text to save space.

**RULE B: The "Hero" Comes First**
* Identify the Best Skin (e.g., Deadpool, The Reaper, Black Knight) OR the Total Skin Count.
* Place this immediately after the ✅.
* Format: `[Best Skin] + [Total Skins]` (e.g., "Deadpool + 57 Skins").

**RULE C: Maximize Skin Retention (High Priority)**
* After the Hero and the ✨ separator, list as many remaining skins from the input as possible.
* **DO NOT CUT SKINS** unless you absolutely hit the {config.TITLE_SOFT_LIMIT}-character limit.
* Use `|` to separate skins.

**RULE D: The Delivery Suffix is OPTIONAL (Low Priority)**
* Only add `⚡️ Instant Delivery` at the end **IF** the total stays below {config.TITLE_LENGTH_BUDGET} chars.
* **NEVER** delete a skin name just to fit "Instant Delivery".

### 3. EXAMPLES

Input: 57 SKINS | Catalyst | Snap | Deadpool | Hybrid | Sparkle Supreme | X-Lord | Fusion
Output: [Full Access] ✅ Deadpool + 57 Skins ✨ Catalyst | Snap | Hybrid | Sparkle Supreme | X-Lord | Fusion ⚡️ Instant Delivery

Input: 208 SKINS | The Reaper | Take The L | Mako Glider | Leviathan Axe | Elite Agent | Trinity Trooper | Major Glory | Blue Squire
Output: [Full Access] ✅ The Reaper + 208 Skins ✨ Take The L | Mako Glider | Leviathan Axe | Elite Agent | Trinity Trooper | Major Glory | Blue Squire

Return exactly one rewritten title per input title, in the same order, as JSON: {{"rewrittenTitles": [...]}}
"""


def _log_usage(task: str, model: str, response, prompt_chars: int, content: str):
    usage = getattr(response, "usage_metadata", None)
    if usage is not None and usage.prompt_token_count is not None:
        log_token_usage(task, model, usage.prompt_token_count, usage.candidates_token_count or 0)
    else:
        # Fallback estimation (1 token ≈ 4 chars)
        log_token_usage(task, model, prompt_chars // 4, len(content) // 4)


def _generate_json(task: str, model: str, contents: str, schema: dict) -> dict:
    response = get_client().models.generate_content(
        model=model,
        contents=contents,
        config={
            "temperature": 0.1,
            "response_mime_type": "application/json",
            "response_schema": schema,
        },
    )

    content = (response.text or "").strip()
    _log_usage(task, model, response, len(contents), content)

    if not content:
        return {}

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        log_event(f"❌ Failed to parse Gemini response as JSON: {e}", "error")
        log_event(f"   Raw response: {content[:500]}...", "error")
        raise AIResponseError(f"Gemini returned invalid JSON: {e}") from e


def _to_listing(item: dict) -> Listing:
    title = str(item.get("title") or "").strip()
    if not title:
        raise AIResponseError(f"Product without a title in AI response: {item}")
    try:
        price = float(item.get("price") or 0)
    except (TypeError, ValueError) as e:
        raise AIResponseError(f"Non-numeric price in AI response: {item.get('price')!r}") from e

    platform = str(item.get("platform") or "").strip() or None
    currency = str(item.get("currency") or "").strip() or NO_CURRENCY
    return Listing(title=title, price=max(price, 0.0), currency=currency, platform=platform)


def scrape_products_with_gemini(html: str) -> List[Listing]:
    """
    Gemini reads the cleaned page and returns the listings it finds.

    Args:
        html: Raw HTML source

    Returns:
        list of Listing, in the order the model reported them
    """
    if not html or not html.strip():
        raise EmptyInput("HTML content cannot be empty.")

    log_event(f"⚡ Extracting listings (Gemini {config.MODEL_EXTRACTION})...")
    clean_html = clean_html_for_ai(html)

    try:
        parsed = _generate_json(
            "Extraction",
            config.MODEL_EXTRACTION,
            f"{EXTRACTION_PROMPT}\nHere is the HTML content:\n{clean_html}",
            PRODUCTS_SCHEMA,
        )
    except AIResponseError:
        raise
    except Exception as e:
        log_event(f"❌ Extraction failed: {e}", "error")
        raise

    if not parsed:
        log_event("   ⚠️  Gemini API returned an empty response.", "warning")
        return []

    products = parsed.get("products") if isinstance(parsed, dict) else None
    if not isinstance(products, list):
        log_event(f"   ⚠️  Unexpected extraction format: {str(parsed)[:200]}", "warning")
        raise AIResponseError("Failed to parse products from AI response. The structure was incorrect.")

    listings = [_to_listing(item) for item in products if isinstance(item, dict)]
    log_event(f"   📦 Extracted {len(listings)} items")
    return listings


def rewrite_titles_with_gemini(titles) -> List[str]:
    """
    Gemini rewrites a batch of titles into the sales format.

    Blank titles are dropped first; the result has one entry per remaining
    title, in the same order.
    """
    valid_titles = split_titles(titles)
    if not valid_titles:
        raise EmptyInput("Please enter at least one title.")

    log_event(f"✨ Rewriting {len(valid_titles)} titles (Gemini {config.MODEL_REWRITE})...")

    try:
        parsed = _generate_json(
            "Title Rewrite",
            config.MODEL_REWRITE,
            f"{REWRITE_PROMPT}\nInput Titles:\n{json.dumps(valid_titles, ensure_ascii=False)}",
            REWRITE_SCHEMA,
        )
    except AIResponseError:
        raise
    except Exception as e:
        log_event(f"❌ Title rewrite failed: {e}", "error")
        raise

    rewritten = parsed.get("rewrittenTitles") if isinstance(parsed, dict) else None
    if not isinstance(rewritten, list) or len(rewritten) != len(valid_titles):
        got = len(rewritten) if isinstance(rewritten, list) else "no"
        raise AIResponseError(f"Expected {len(valid_titles)} rewritten titles, got {got}")

    return [str(title).strip() for title in rewritten]
