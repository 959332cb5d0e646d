from .expander import DEFAULT_CHUNK_TYPES, ChunkExpander
from .labels import ChunkLabel, continues_run, parse_label

__all__ = [
    "DEFAULT_CHUNK_TYPES",
    "ChunkExpander",
    "ChunkLabel",
    "continues_run",
    "parse_label",
]
