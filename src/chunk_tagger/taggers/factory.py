# src/chunk_tagger/taggers/factory.py

from collections.abc import Sequence

from chunk_tagger.observability import names
from chunk_tagger.observability.base import MetricsHook, NoOpMetricsHook

from .base import Tagger
from .config import TaggerConfig
from .keyword_tagger import NormalizedKeywordTagger
from .np_chunk_tagger import NormalizedNpChunkTagger
from .registry import TaggerRegistry


def default_registry(
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> TaggerRegistry:
    """Registry with the built-in taggers, keyed by class name."""
    registry = TaggerRegistry()

    def keyword_tagger(name: str, args: Sequence[str]) -> Tagger:
        return NormalizedKeywordTagger(name, args, metrics_hook=metrics_hook)

    def np_chunk_tagger(name: str, args: Sequence[str]) -> Tagger:
        return NormalizedNpChunkTagger(name, args, metrics_hook=metrics_hook)

    registry.register(NormalizedKeywordTagger.__name__, keyword_tagger)
    registry.register(NormalizedNpChunkTagger.__name__, np_chunk_tagger)
    return registry


def create_tagger(
    config: TaggerConfig,
    registry: TaggerRegistry | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Tagger:
    """Create a tagger from config.

    Args:
        config: Tagger type, name and arguments.
        registry: Registry to resolve `config.type` in. Defaults to the
            built-in taggers wired to `metrics_hook`.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured Tagger implementation.

    Raises:
        KeyError: If the tagger type is unknown.
        ConfigurationError: If the name or arguments are invalid.

    Example:
        >>> config = TaggerConfig(
        ...     type="NormalizedNpChunkTagger", name="Animal", args=["dog", "cat"]
        ... )
        >>> tagger = create_tagger(config)
        >>> tags = tagger.find_tags(sentence)
    """
    if registry is None:
        registry = default_registry(metrics_hook)

    tagger = registry.create(config.type, config.name, config.args)
    metrics_hook.increment(names.TAGGERS_CREATED_TOTAL, labels={"type": config.type})
    return tagger
