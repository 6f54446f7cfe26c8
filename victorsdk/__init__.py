"""HTTP client for a Victor vector search server, with its request, reply, statistics and error-code types."""

__version__ = "0.1.0"
__all__ = ["client", "commands", "errors", "routes", "stats", "usage"]