# src/chunk_tagger/chunks/expander.py

import logging
from collections.abc import Iterable, Sequence

from chunk_tagger.errors import ConfigurationError
from chunk_tagger.models import MatchSpan, Sentence, TaggedType, span_text

from .labels import continues_run, parse_label

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_TYPES = ("NP",)


class ChunkExpander:
    """
    Widens match spans to the chunk run that encloses them.

    - A span is widened only when all of its tokens sit in one run of an
      accepted chunk type; otherwise it is returned unchanged
    - Spans are handled independently, no merging or deduplication
    - Pure: output depends only on the span and the chunk labels
    """

    def __init__(self, chunk_types: Sequence[str] = DEFAULT_CHUNK_TYPES) -> None:
        if isinstance(chunk_types, str):
            raise ConfigurationError(
                f"chunk_types must be a list of chunk types, not {chunk_types!r}"
            )
        self._chunk_types = frozenset(
            chunk_type.strip().upper() for chunk_type in chunk_types
        )
        if not self._chunk_types or not all(self._chunk_types):
            raise ConfigurationError("chunk_types must name at least one chunk type")

    @property
    def chunk_types(self) -> frozenset[str]:
        return self._chunk_types

    def expand_span(self, span: MatchSpan, sentence: Sentence) -> tuple[int, int]:
        start, end = span.start, span.end

        first = parse_label(sentence[start].chunk_label)
        if first is None or first.chunk_type not in self._chunk_types:
            return start, end
        if not all(continues_run(sentence, i) for i in range(start + 1, end)):
            return start, end

        while start > 0 and continues_run(sentence, start):
            start -= 1
        while end < len(sentence) and continues_run(sentence, end):
            end += 1

        return start, end

    def expand(
        self, spans: Iterable[MatchSpan], sentence: Sentence, name: str
    ) -> list[TaggedType]:
        tags: list[TaggedType] = []
        for span in spans:
            start, end = self.expand_span(span, sentence)
            if (start, end) != (span.start, span.end):
                logger.debug(
                    "Expanded %r from [%d, %d) to [%d, %d)",
                    span.keyword.text,
                    span.start,
                    span.end,
                    start,
                    end,
                )
            tags.append(
                TaggedType(
                    start=start,
                    end=end,
                    name=name,
                    source=span,
                    text=span_text(sentence, start, end),
                )
            )
        return tags
