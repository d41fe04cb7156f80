"""
title_optimizer.py - Rule-based rewrite of raw listing titles into the sales format

    [Full Access] ✅ <Hero> + <Detail> ✨ <Everything Else> ⚡️ Instant Delivery

Value ranking for the hero slot: rare item > special metric > rank > generic count.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from config import TITLE_LENGTH_BUDGET
from title_dictionaries import (
    COUNT_PATTERN,
    HIGH_VALUE_ITEMS,
    METRIC_PATTERNS,
    PLACEHOLDER_DETAILS,
    RANKS,
    REMOVAL_KEYWORDS,
    UPPER_ACRONYMS,
)

PREFIX = "[Full Access] ✅ "
SEPARATOR = " ✨ "
DELIVERY_SUFFIX = " ⚡️ Instant Delivery"
FALLBACK_DESCRIPTION = "Instant Delivery"
FALLBACK_HERO = "High Value Account"

_WORD = re.compile(r"\w\S*")
_DELIMITERS = re.compile(r"[|,\-/_+]")
_WHITESPACE = re.compile(r"\s+")
_AMOUNT = re.compile(r"^(\d[\d.,]*)k", re.IGNORECASE)

# Built once; rank lookups are whole-word, removal keywords too.
_RANK_PATTERNS = tuple(
    (rank, re.compile(rf"\b{re.escape(rank.lower())}\b")) for rank in RANKS
)
_REMOVAL_PATTERNS = tuple(
    re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE) for word in REMOVAL_KEYWORDS
)


def to_title_case(text: str) -> str:
    """Title case each word, keeping known acronyms upper-case."""
    def fix(match):
        word = match.group(0)
        upper = word.upper()
        if upper in UPPER_ACRONYMS:
            return upper
        return word[0].upper() + word[1:].lower()

    return _WORD.sub(fix, text)


def _render_compact(text: str) -> str:
    return _WHITESPACE.sub("", text).upper()


def _render_amount(text: str) -> str:
    return _AMOUNT.sub(lambda m: m.group(1) + "K", to_title_case(text))


METRIC_RENDERERS = {
    "compact": _render_compact,
    "title": to_title_case,
    "amount": _render_amount,
}


@dataclass
class TitleFacts:
    """What the classifier found in one title. `*_raw` is the matched source text."""
    hero_item: Optional[str] = None
    metric: Optional[str] = None
    metric_raw: Optional[str] = None
    rank: Optional[str] = None
    count: Optional[str] = None
    count_raw: Optional[str] = None


@dataclass
class Anchor:
    hero: str
    detail: str
    used_terms: List[str] = field(default_factory=list)

    def render(self) -> str:
        if self.detail in PLACEHOLDER_DETAILS:
            return self.hero
        return f"{self.hero} + {self.detail}"


def find_count(lower_title: str):
    match = COUNT_PATTERN.search(lower_title)
    if not match:
        return None, None
    return to_title_case(match.group(0)), match.group(0)


def find_rank(lower_title: str) -> Optional[str]:
    for rank, pattern in _RANK_PATTERNS:
        if pattern.search(lower_title):
            return rank
    return None


def find_hero_item(lower_title: str) -> Optional[str]:
    for item in HIGH_VALUE_ITEMS:
        if item.lower() in lower_title:
            return item
    return None


def find_metric(lower_title: str):
    for _label, pattern, style in METRIC_PATTERNS:
        match = pattern.search(lower_title)
        if match:
            return METRIC_RENDERERS[style](match.group(0)), match.group(0)
    return None, None


def classify_title(raw_title: str) -> TitleFacts:
    """Step 1: every lookup runs independently over the lower-cased title."""
    lower_title = raw_title.lower()
    count, count_raw = find_count(lower_title)
    metric, metric_raw = find_metric(lower_title)
    return TitleFacts(
        hero_item=find_hero_item(lower_title),
        metric=metric,
        metric_raw=metric_raw,
        rank=find_rank(lower_title),
        count=count,
        count_raw=count_raw,
    )


def build_anchor(facts: TitleFacts) -> Anchor:
    """Step 2: pick the hero and its detail, remembering what was consumed."""
    if facts.hero_item:
        anchor = Anchor(facts.hero_item, "Rare", [facts.hero_item])
        if facts.metric:
            anchor.detail = facts.metric
            anchor.used_terms.append(facts.metric_raw)
        elif facts.rank:
            anchor.detail = f"{facts.rank} Rank"
            anchor.used_terms.append(facts.rank)
        elif facts.count:
            anchor.detail = facts.count
            anchor.used_terms.append(facts.count_raw)
        return anchor

    if facts.metric:
        anchor = Anchor(facts.metric, "Maxed", [facts.metric_raw])
        if facts.rank:
            anchor.detail = facts.rank
            anchor.used_terms.append(facts.rank)
        elif facts.count:
            anchor.detail = facts.count
            anchor.used_terms.append(facts.count_raw)
        return anchor

    if facts.rank:
        anchor = Anchor(f"{facts.rank} Rank", "Full Access", [facts.rank])
        if facts.count:
            anchor.detail = facts.count
            anchor.used_terms.append(facts.count_raw)
        return anchor

    if facts.count:
        return Anchor(facts.count, "Full Access", [facts.count_raw])

    return Anchor(FALLBACK_HERO, "Full Access")


def build_description(raw_title: str, used_terms: Iterable[str]) -> str:
    """Step 3: whatever the anchor did not consume, as pipe separated segments."""
    description = raw_title

    for term in used_terms:
        description = re.sub(re.escape(term), "", description, flags=re.IGNORECASE)

    for pattern in _REMOVAL_PATTERNS:
        description = pattern.sub("", description)

    description = _DELIMITERS.sub("|", description)
    segments = [_WHITESPACE.sub(" ", segment).strip() for segment in description.split("|")]
    segments = [segment for segment in segments if segment]
    description = " | ".join(segments)

    if len(description) < 3:
        return FALLBACK_DESCRIPTION
    return " | ".join(to_title_case(segment) for segment in segments)


def assemble_title(anchor_text: str, description: str) -> str:
    """Step 4: the delivery suffix only goes on when it fits and is not redundant."""
    output = f"{PREFIX}{anchor_text}{SEPARATOR}{description}"

    lower_description = description.lower()
    has_instant = "instant" in lower_description or "delivery" in lower_description
    if len(output) < TITLE_LENGTH_BUDGET and not has_instant:
        output += DELIVERY_SUFFIX

    return output


def optimize_title(raw_title: str) -> str:
    """
    Rewrite one raw title into the hero-first sales format.

    Never raises on string input; an empty title degrades to
    "[Full Access] ✅ High Value Account ✨ Instant Delivery".
    """
    facts = classify_title(raw_title)
    anchor = build_anchor(facts)
    description = build_description(raw_title, anchor.used_terms)
    return assemble_title(anchor.render(), description)


def split_titles(titles: Union[str, Iterable[str]]) -> List[str]:
    """Split batch input on line breaks and drop blank lines."""
    if isinstance(titles, str):
        titles = titles.splitlines()
    return [title for title in titles if title.strip()]


def optimize_titles(titles: Union[str, Iterable[str]]) -> List[str]:
    """Batch version of optimize_title; output order matches input order."""
    return [optimize_title(title) for title in split_titles(titles)]
