"""Relevance scoring of candidate lines against posting keywords."""
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Sequence


@dataclass(frozen=True)
class LineScore:
    """A candidate text line with its keyword matches."""

    text: str
    score: int
    matched_keywords: tuple[str, ...] = field(default_factory=tuple)


@lru_cache(maxsize=1024)
def _keyword_pattern(keyword: str) -> re.Pattern:
    """Compile a case-insensitive pattern bounded by non-letters/digits (Unicode-aware).

    Plain \\b fails for keywords that end in symbols ("c++"), so the
    boundary is spelled out with lookarounds.
    """
    return re.compile(
        rf"(?<![^\W_]){re.escape(keyword)}(?![^\W_])",
        re.IGNORECASE,
    )


def score_line(line: str, keywords: Sequence[str]) -> LineScore:
    """
    Score one line by the number of distinct keywords it contains.

    Args:
        line: Skill phrase, experience line or achievement line
        keywords: Ranked keywords from the posting

    Returns:
        LineScore with matched keywords in keyword order
    """
    matched = []
    seen: set[str] = set()
    for keyword in keywords:
        key = keyword.strip().lower()
        if not key or key in seen:
            continue
        if _keyword_pattern(keyword.strip()).search(line):
            seen.add(key)
            matched.append(keyword)
    return LineScore(text=line, score=len(matched), matched_keywords=tuple(matched))


def rank_lines(lines: Sequence[str], keywords: Sequence[str]) -> list[LineScore]:
    """Score lines and order them by descending score.

    The sort is stable: equally scored lines, including the unmatched ones
    at the end, keep their input order. Nothing is dropped.
    """
    scored = [score_line(line, keywords) for line in lines]
    return sorted(scored, key=lambda s: s.score, reverse=True)
