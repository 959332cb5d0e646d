# src/chunk_tagger/normalization.py

"""Term normalization.

The lemmatizer that produces `Token.normalized_form` lives outside this
package. Whatever it does, keyword terms must be folded by the same
function, so taggers take the normalizer as a plain callable.
"""

from collections.abc import Callable
from typing import TypeAlias

Normalizer: TypeAlias = Callable[[str], str]


def normalize(term: str) -> str:
    """Default normalizer: strip and case-fold. No lemmatization."""
    return term.strip().casefold()
