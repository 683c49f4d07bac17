"""HTTP clients."""

from cursus_graph.clients.http import HTTPClient

__all__ = ["HTTPClient"]
