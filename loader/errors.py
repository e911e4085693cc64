from __future__ import annotations


class LoaderError(ValueError):
    """A data file could not be turned into records."""
