# src/chunk_tagger/keywords/phrase.py

import logging
from collections.abc import Iterable

from chunk_tagger.errors import ConfigurationError
from chunk_tagger.models import KeywordPhrase
from chunk_tagger.normalization import Normalizer, normalize

logger = logging.getLogger(__name__)


def parse_keyword(
    raw: str | KeywordPhrase, normalizer: Normalizer = normalize
) -> KeywordPhrase:
    """Split a whitespace-joined phrase and normalize each term.

    A `KeywordPhrase` is taken term by term instead of being split.

    Raises:
        ConfigurationError: If the phrase is not a string, has no terms,
            or a term normalizes to the empty string.
    """
    if isinstance(raw, KeywordPhrase):
        words = raw.terms
    elif isinstance(raw, str):
        words = tuple(raw.split())
    else:
        raise ConfigurationError(f"Keyword phrase must be a string: {raw!r}")

    if not all(isinstance(word, str) for word in words):
        raise ConfigurationError(f"Keyword terms must be strings: {raw!r}")
    if not words:
        raise ConfigurationError(f"Keyword phrase has no terms: {raw!r}")

    terms = tuple(normalizer(word) for word in words)
    if not all(terms):
        raise ConfigurationError(f"Keyword phrase normalizes to an empty term: {raw!r}")

    return KeywordPhrase(terms=terms)


def parse_keywords(
    raw: Iterable[str | KeywordPhrase], normalizer: Normalizer = normalize
) -> tuple[KeywordPhrase, ...]:
    """Parse phrase strings into a de-duplicated keyword tuple.

    Order of first occurrence is kept. An empty result is an error.
    """
    if isinstance(raw, str):
        raise ConfigurationError("Keywords must be a list of phrases, not a string")
    if not isinstance(raw, Iterable):
        raise ConfigurationError(f"Keywords must be a list of phrases, got {raw!r}")

    phrases: dict[KeywordPhrase, None] = {}
    for item in raw:
        phrase = parse_keyword(item, normalizer)
        if phrase in phrases:
            logger.debug("Dropping duplicate keyword: %s", phrase.text)
            continue
        phrases[phrase] = None

    if not phrases:
        raise ConfigurationError("Keyword list must not be empty")

    return tuple(phrases)
