"""In-memory task dashboard: reducer-driven task store with multi-field filtering."""

__version__ = "0.1.0"
