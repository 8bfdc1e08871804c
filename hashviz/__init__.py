"""A chained hash map with cursors, and a force-directed graph layout."""

__version__ = "0.1.0"