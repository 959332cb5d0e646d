# src/chunk_tagger/chunks/labels.py

"""Begin/inside/outside chunk labels.

Labels look like `B-NP`, `I-NP` or `O`. The BIOES prefixes `E` (end)
and `S` (single) are read as well. Anything else is treated as outside
any chunk.
"""

from dataclasses import dataclass

from chunk_tagger.models import Sentence

BEGIN = "B"
INSIDE = "I"
END = "E"
SINGLE = "S"

_PREFIXES = frozenset({BEGIN, INSIDE, END, SINGLE})


@dataclass(frozen=True)
class ChunkLabel:
    prefix: str
    chunk_type: str


def parse_label(label: str) -> ChunkLabel | None:
    """Return the parsed label, or None when the token is outside any chunk."""
    prefix, sep, chunk_type = label.partition("-")
    if not sep or not chunk_type or prefix.upper() not in _PREFIXES:
        return None
    return ChunkLabel(prefix=prefix.upper(), chunk_type=chunk_type.upper())


def continues_run(sentence: Sentence, index: int) -> bool:
    """True if token `index` belongs to the same chunk run as token `index - 1`.

    An `I` or `E` token continues the run only when the previous token is
    an open `B` or `I` of the same type. An orphan `I` starts a new run.
    """
    if index <= 0 or index >= len(sentence):
        return False

    current = parse_label(sentence[index].chunk_label)
    previous = parse_label(sentence[index - 1].chunk_label)
    if current is None or previous is None:
        return False
    if current.prefix not in (INSIDE, END) or previous.prefix not in (BEGIN, INSIDE):
        return False
    return current.chunk_type == previous.chunk_type
