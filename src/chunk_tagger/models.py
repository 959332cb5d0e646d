# src/chunk_tagger/models.py

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Token:
    """A lemmatized, chunked token.

    Produced by the external lemmatizer/chunker pipeline. The tagger
    only reads `normalized_form` and `chunk_label`; `surface_form` is
    carried through to the emitted tag text.
    """

    surface_form: str
    normalized_form: str
    chunk_label: str

    @classmethod
    def of(cls, surface_form: str, normalized_form: str, chunk_label: str) -> "Token":
        return cls(
            surface_form=surface_form,
            normalized_form=normalized_form,
            chunk_label=chunk_label,
        )


Sentence: TypeAlias = Sequence[Token]


@dataclass(frozen=True)
class KeywordPhrase:
    """An ordered, non-empty run of normalized terms."""

    terms: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.terms)

    @property
    def text(self) -> str:
        return " ".join(self.terms)


@dataclass(frozen=True)
class MatchSpan:
    """Raw keyword hit over the half-open token interval [start, end)."""

    start: int
    end: int
    keyword: KeywordPhrase

    @property
    def width(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class TaggedType:
    """A tag emitted by a tagger.

    Never narrower than `source`. Created per tagging call.
    """

    start: int
    end: int
    name: str
    source: MatchSpan
    text: str

    @property
    def interval(self) -> tuple[int, int]:
        return (self.start, self.end)


def span_text(sentence: Sentence, start: int, end: int) -> str:
    return " ".join(token.surface_form for token in sentence[start:end])
