# src/chunk_tagger/errors.py


class ConfigurationError(ValueError):
    """Raised when a tagger is built from an invalid name or keyword list.

    The tagger object is never returned when this is raised.
    """
