# src/chunk_tagger/keywords/matcher.py

from collections.abc import Iterable

from chunk_tagger.errors import ConfigurationError
from chunk_tagger.models import KeywordPhrase, MatchSpan, Sentence


class KeywordMatcher:
    """
    Multi-token keyword search over normalized token forms.

    - Tokens are compared by `normalized_form` only
    - Every match is reported, overlapping and nested ones included
    - Results are ordered by start index, then by keyword order
    - Holds no per-call state; safe to share between threads
    """

    def __init__(self, keywords: Iterable[KeywordPhrase]) -> None:
        self._keywords = tuple(keywords)
        if not self._keywords:
            raise ConfigurationError("Keyword list must not be empty")

        by_first_term: dict[str, list[KeywordPhrase]] = {}
        for keyword in self._keywords:
            if len(keyword) == 0:
                raise ConfigurationError("Keyword phrase must have at least one term")
            by_first_term.setdefault(keyword.terms[0], []).append(keyword)

        self._by_first_term = {
            term: tuple(phrases) for term, phrases in by_first_term.items()
        }

    @property
    def keywords(self) -> tuple[KeywordPhrase, ...]:
        return self._keywords

    def find_matches(self, sentence: Sentence) -> list[MatchSpan]:
        forms = [token.normalized_form for token in sentence]
        matches: list[MatchSpan] = []

        for start, form in enumerate(forms):
            for keyword in self._by_first_term.get(form, ()):
                end = start + len(keyword)
                if end > len(forms):
                    continue
                if tuple(forms[start:end]) == keyword.terms:
                    matches.append(MatchSpan(start=start, end=end, keyword=keyword))

        return matches


def find_matches(
    sentence: Sentence, keywords: Iterable[KeywordPhrase]
) -> list[MatchSpan]:
    """One-shot form of `KeywordMatcher.find_matches`."""
    return KeywordMatcher(keywords).find_matches(sentence)
