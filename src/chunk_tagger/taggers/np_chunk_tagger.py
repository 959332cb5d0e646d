# src/chunk_tagger/taggers/np_chunk_tagger.py

import logging
from collections.abc import Iterable, Sequence
from time import monotonic

from chunk_tagger.chunks import DEFAULT_CHUNK_TYPES, ChunkExpander
from chunk_tagger.keywords import KeywordMatcher
from chunk_tagger.models import KeywordPhrase, Sentence, TaggedType
from chunk_tagger.normalization import Normalizer, normalize
from chunk_tagger.observability.base import MetricsHook, NoOpMetricsHook

from .base import Tagger, build_matcher, record_tagging

logger = logging.getLogger(__name__)


class NormalizedNpChunkTagger(Tagger):
    """
    Searches for normalized keywords and tags the chunk containing each match.

    - Matching and widening are separate collaborators, run in that order
    - A match spanning several chunks, or touching a token outside a
      chunk, is tagged as matched
    - Two matches widening to the same chunk yield two tags
    """

    def __init__(
        self,
        name: str,
        keywords: Iterable[str | KeywordPhrase],
        *,
        normalizer: Normalizer = normalize,
        chunk_types: Sequence[str] = DEFAULT_CHUNK_TYPES,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._matcher: KeywordMatcher = build_matcher(name, keywords, normalizer)
        self._expander = ChunkExpander(chunk_types)
        self.name = name
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized NormalizedNpChunkTagger name=%s with %d keywords, chunk_types=%s",
            name,
            len(self._matcher.keywords),
            sorted(self._expander.chunk_types),
        )

    @property
    def keywords(self) -> tuple[KeywordPhrase, ...]:
        return self._matcher.keywords

    @property
    def matcher(self) -> KeywordMatcher:
        return self._matcher

    @property
    def expander(self) -> ChunkExpander:
        return self._expander

    def find_tags(self, sentence: Sentence) -> list[TaggedType]:
        start = monotonic()
        matches = self._matcher.find_matches(sentence)
        tags = self._expander.expand(matches, sentence, self.name)

        elapsed_ms = 1000 * (monotonic() - start)
        record_tagging(
            self.metrics_hook, self.name, sentence, elapsed_ms, len(matches), tags
        )
        logger.debug(
            "Tagger %s found %d matches, %d tags", self.name, len(matches), len(tags)
        )
        return tags

    def __repr__(self) -> str:
        return (
            f"NormalizedNpChunkTagger(name={self.name!r}, "
            f"keywords={len(self.keywords)})"
        )
