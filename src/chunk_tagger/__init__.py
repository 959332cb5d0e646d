# Chunks
from .chunks import ChunkExpander

# Errors
from .errors import ConfigurationError

# Keywords
from .keywords import KeywordMatcher, find_matches, parse_keywords

# Models
from .models import KeywordPhrase, MatchSpan, Sentence, TaggedType, Token

# Normalization
from .normalization import Normalizer, normalize

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Taggers
from .taggers import (
    NormalizedKeywordTagger,
    NormalizedNpChunkTagger,
    Tagger,
    TaggerConfig,
    TaggerRegistry,
    create_tagger,
    default_registry,
)

__all__ = [
    # Chunks
    "ChunkExpander",
    # Errors
    "ConfigurationError",
    # Keywords
    "KeywordMatcher",
    "find_matches",
    "parse_keywords",
    # Models
    "KeywordPhrase",
    "MatchSpan",
    "Sentence",
    "TaggedType",
    "Token",
    # Normalization
    "Normalizer",
    "normalize",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Taggers
    "NormalizedKeywordTagger",
    "NormalizedNpChunkTagger",
    "Tagger",
    "TaggerConfig",
    "TaggerRegistry",
    "create_tagger",
    "default_registry",
]
