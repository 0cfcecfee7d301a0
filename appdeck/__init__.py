"""Desktop application indexing, fuzzy ranking and launching."""

from .plugin import PluginState, initialize, metadata, query, select

__all__ = ["PluginState", "initialize", "metadata", "query", "select"]
