"""Keyword extraction and relevance scoring."""
from .keyword_extractor import extract_keywords
from .relevance import LineScore, rank_lines, score_line

__all__ = ["extract_keywords", "LineScore", "rank_lines", "score_line"]
