"""docindex: content-addressed text store with semantic search."""

__version__ = "0.1.0"
