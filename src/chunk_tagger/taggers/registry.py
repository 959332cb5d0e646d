# src/chunk_tagger/taggers/registry.py

import logging
from collections.abc import Callable, Sequence
from typing import TypeAlias

from chunk_tagger.errors import ConfigurationError

from .base import Tagger

logger = logging.getLogger(__name__)

TaggerConstructor: TypeAlias = Callable[[str, Sequence[str]], Tagger]


class TaggerRegistry:
    """Maps tagger type names to constructors taking (name, args)."""

    def __init__(self) -> None:
        self._constructors: dict[str, TaggerConstructor] = {}

    def register(self, type_name: str, constructor: TaggerConstructor) -> None:
        if type_name in self._constructors:
            raise ValueError(f"Tagger type '{type_name}' already registered")

        self._constructors[type_name] = constructor
        logger.debug("Registered tagger type: %s", type_name)

    def get(self, type_name: str) -> TaggerConstructor:
        try:
            return self._constructors[type_name]
        except KeyError:
            logger.error("Tagger type not found: %s", type_name)
            raise KeyError(f"Tagger type '{type_name}' not found")

    def create(self, type_name: str, name: str, args: Sequence[str]) -> Tagger:
        if isinstance(args, str):
            logger.error("Rejected string args for tagger %s", name)
            raise ConfigurationError(
                f"Tagger args must be a list of strings, not {args!r}"
            )

        constructor = self.get(type_name)
        logger.debug("Creating tagger %s of type %s", name, type_name)
        return constructor(name, list(args))

    def list(self) -> dict[str, TaggerConstructor]:
        # return a shallow copy to avoid mutation
        return dict(self._constructors)
