"""ugraph — in-memory undirected weighted graphs."""

__version__ = "0.1.0"
