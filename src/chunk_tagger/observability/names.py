# src/chunk_tagger/observability/names.py

"""Standard metric names for chunk-tagger observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Tagging Metrics
# ============================================================================

# Duration
TAGGING_DURATION = "tagging_duration"

# Counters
TAGGING_CALLS_TOTAL = "tagging_calls_total"
TAGGING_MATCHES_TOTAL = "tagging_matches_total"
TAGGING_TAGS_TOTAL = "tagging_tags_total"

# Gauges
TAGGING_SENTENCE_LENGTH = "tagging_sentence_length"

# Counters (spans actually widened to their chunk)
TAGGING_EXPANSIONS_TOTAL = "tagging_expansions_total"


# ============================================================================
# Registry Metrics
# ============================================================================

# Counters
TAGGERS_CREATED_TOTAL = "taggers_created_total"
