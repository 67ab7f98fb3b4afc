"""zhttp — run a single HTTP request out of a .http file."""

__version__ = "0.1.0"
