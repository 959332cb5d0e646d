# src/chunk_tagger/taggers/keyword_tagger.py

import logging
from collections.abc import Iterable
from time import monotonic

from chunk_tagger.keywords import KeywordMatcher
from chunk_tagger.models import KeywordPhrase, Sentence, TaggedType, span_text
from chunk_tagger.normalization import Normalizer, normalize
from chunk_tagger.observability.base import MetricsHook, NoOpMetricsHook

from .base import Tagger, build_matcher, record_tagging

logger = logging.getLogger(__name__)


class NormalizedKeywordTagger(Tagger):
    """Tags every occurrence of a normalized keyword phrase, unwidened."""

    def __init__(
        self,
        name: str,
        keywords: Iterable[str | KeywordPhrase],
        *,
        normalizer: Normalizer = normalize,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._matcher: KeywordMatcher = build_matcher(name, keywords, normalizer)
        self.name = name
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized NormalizedKeywordTagger name=%s with %d keywords",
            name,
            len(self._matcher.keywords),
        )

    @property
    def keywords(self) -> tuple[KeywordPhrase, ...]:
        return self._matcher.keywords

    def find_tags(self, sentence: Sentence) -> list[TaggedType]:
        start = monotonic()
        matches = self._matcher.find_matches(sentence)
        tags = [
            TaggedType(
                start=match.start,
                end=match.end,
                name=self.name,
                source=match,
                text=span_text(sentence, match.start, match.end),
            )
            for match in matches
        ]

        elapsed_ms = 1000 * (monotonic() - start)
        record_tagging(
            self.metrics_hook, self.name, sentence, elapsed_ms, len(matches), tags
        )
        logger.debug("Tagger %s found %d tags", self.name, len(tags))
        return tags

    def __repr__(self) -> str:
        return (
            f"NormalizedKeywordTagger(name={self.name!r}, "
            f"keywords={len(self.keywords)})"
        )
