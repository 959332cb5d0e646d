from .matcher import KeywordMatcher, find_matches
from .phrase import parse_keyword, parse_keywords

__all__ = [
    "KeywordMatcher",
    "find_matches",
    "parse_keyword",
    "parse_keywords",
]
