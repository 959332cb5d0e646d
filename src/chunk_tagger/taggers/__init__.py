# src/chunk_tagger/taggers/__init__.py

"""Taggers for chunk-tagger.

A tagger turns a lemmatized, chunked sentence into a list of tags.

Example:
    >>> from chunk_tagger.models import Token
    >>> from chunk_tagger.taggers import NormalizedNpChunkTagger
    >>>
    >>> tagger = NormalizedNpChunkTagger("Animal", ["dog"])
    >>> sentence = [
    ...     Token.of("The", "the", "O"),
    ...     Token.of("big", "big", "B-NP"),
    ...     Token.of("dog", "dog", "I-NP"),
    ... ]
    >>> [tag.text for tag in tagger.find_tags(sentence)]
    ['big dog']
"""

from .base import Tagger
from .config import TaggerConfig
from .factory import create_tagger, default_registry
from .keyword_tagger import NormalizedKeywordTagger
from .np_chunk_tagger import NormalizedNpChunkTagger
from .registry import TaggerConstructor, TaggerRegistry

__all__ = [
    # Factory
    "create_tagger",
    "default_registry",
    # Protocol
    "Tagger",
    # Config
    "TaggerConfig",
    # Taggers
    "NormalizedKeywordTagger",
    "NormalizedNpChunkTagger",
    # Registry
    "TaggerConstructor",
    "TaggerRegistry",
]
