"""Keyword extraction from job postings - tags first, then weighted term frequency."""
import logging
import re
from collections import Counter

from bs4 import BeautifulSoup

from talent_agent.collectors.base import JobPosting

logger = logging.getLogger(__name__)

# Articles, prepositions, pronouns and the boilerplate verbs every posting uses.
STOP_WORDS = frozenset({
    "a", "about", "across", "all", "also", "an", "and", "any", "are", "as", "at",
    "be", "been", "but", "by", "can", "for", "from", "has", "have", "in", "into",
    "is", "it", "its", "may", "more", "must", "not", "of", "on", "or", "our",
    "ours", "over", "per", "such", "than", "that", "the", "their", "them", "then",
    "there", "these", "this", "those", "through", "to", "under", "upon", "via",
    "was", "we", "were", "what", "when", "where", "which", "who", "will", "with",
    "within", "would", "you", "your", "yours",
    "seeking", "looking", "join", "role", "position", "opportunity", "candidate",
    "ideal", "including", "required", "preferred", "plus", "etc",
})

# Derived tokens shorter than this are dropped (tags are exempt).
MIN_TOKEN_LENGTH = 3

# Each title occurrence counts this many times; description occurrences count once.
TITLE_WEIGHT = 2

# Upper bound on the keyword list handed downstream.
MAX_KEYWORDS = 12

# Unicode letters/digits ("résumé", "naïve"), keeping inner hyphens and trailing +/#
# so "six-sigma", "c++", "c#" survive.
_TOKEN_RE = re.compile(r"[^\W_]+(?:-[^\W_]+)*[+#]*")


def strip_markup(text: str) -> str:
    """Return the visible text of an HTML fragment."""
    if not text:
        return ""
    # Entities ("&amp;", "&nbsp;") need decoding even without tags
    if "<" not in text and "&" not in text:
        return text
    soup = BeautifulSoup(text, "html.parser")
    return soup.get_text(separator=" ", strip=True)


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens with stop words and short tokens removed."""
    return [
        token
        for token in _TOKEN_RE.findall(text.lower())
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def extract_keywords(
    job: JobPosting,
    max_keywords: int = MAX_KEYWORDS,
    title_weight: int = TITLE_WEIGHT,
) -> list[str]:
    """
    Derive the ranked keyword list for a posting.

    Tags come first in the posting's own order and keep their casing.
    Derived tokens follow, ranked by weighted frequency with ties kept in
    first-seen order (title before description). Duplicates are resolved
    case-insensitively in favour of the tag.

    Args:
        job: Posting to analyse
        max_keywords: Maximum number of keywords returned
        title_weight: Weight of a title occurrence relative to a body one

    Returns:
        Distinct keywords, most relevant first
    """
    keywords: list[str] = []
    seen: set[str] = set()

    for tag in job.tags:
        tag = tag.strip()
        if tag and tag.lower() not in seen:
            seen.add(tag.lower())
            keywords.append(tag)

    title_tokens = tokenize(job.title or "")
    body_tokens = tokenize(strip_markup(job.description or ""))

    counts: Counter[str] = Counter()
    first_seen: dict[str, int] = {}
    for weight, tokens in ((title_weight, title_tokens), (1, body_tokens)):
        for token in tokens:
            counts[token] += weight
            first_seen.setdefault(token, len(first_seen))

    ranked = sorted(counts, key=lambda t: (-counts[t], first_seen[t]))
    for token in ranked:
        if token not in seen:
            seen.add(token)
            keywords.append(token)

    logger.debug(
        "Extracted %d keywords (%d tags) for '%s'",
        min(len(keywords), max_keywords), len(job.tags), job.title,
    )
    return keywords[:max(0, max_keywords)]
