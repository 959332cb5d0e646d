# src/chunk_tagger/taggers/base.py

import logging
from collections.abc import Iterable
from typing import Protocol

from chunk_tagger.errors import ConfigurationError
from chunk_tagger.keywords import KeywordMatcher, parse_keywords
from chunk_tagger.models import KeywordPhrase, Sentence, TaggedType
from chunk_tagger.normalization import Normalizer
from chunk_tagger.observability import names
from chunk_tagger.observability.base import MetricsHook

logger = logging.getLogger(__name__)


class Tagger(Protocol):
    """Protocol for taggers.

    Design principles:
    - Immutable: configuration is fixed at construction
    - Pure: `find_tags` never mutates the sentence
    - No per-call state: one instance serves many sentences and threads
    """

    name: str
    metrics_hook: MetricsHook

    def find_tags(self, sentence: Sentence) -> list[TaggedType]: ...


def build_matcher(
    name: str,
    keywords: Iterable[str | KeywordPhrase],
    normalizer: Normalizer,
) -> KeywordMatcher:
    """Validate tagger configuration and build its keyword matcher.

    Raises:
        ConfigurationError: If the name is blank or the keywords are
            empty or malformed.
    """
    if not isinstance(name, str) or not name.strip():
        logger.error("Rejected tagger with empty name")
        raise ConfigurationError("Tagger name must not be empty")

    try:
        phrases = parse_keywords(keywords, normalizer)
    except ConfigurationError as error:
        logger.error("Rejected tagger %s: %s", name, error)
        raise

    return KeywordMatcher(phrases)


def record_tagging(
    metrics_hook: MetricsHook,
    name: str,
    sentence: Sentence,
    elapsed_ms: float,
    matches: int,
    tags: list[TaggedType],
) -> None:
    """Report one `find_tags` call. Widened tags are those wider than their match."""
    labels = {"tagger": name}
    expanded = sum(
        1 for tag in tags if tag.interval != (tag.source.start, tag.source.end)
    )
    metrics_hook.record_latency(names.TAGGING_DURATION, elapsed_ms, labels)
    metrics_hook.record_gauge(names.TAGGING_SENTENCE_LENGTH, len(sentence), labels)
    metrics_hook.increment(names.TAGGING_CALLS_TOTAL, labels=labels)
    metrics_hook.increment(names.TAGGING_MATCHES_TOTAL, matches, labels)
    metrics_hook.increment(names.TAGGING_TAGS_TOTAL, len(tags), labels)
    metrics_hook.increment(names.TAGGING_EXPANSIONS_TOTAL, expanded, labels)
