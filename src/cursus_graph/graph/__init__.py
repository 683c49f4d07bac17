"""Dependency resolution and rendering."""

from cursus_graph.graph.identifiers import assign_identifiers, node_id
from cursus_graph.graph.mermaid import MermaidRenderer
from cursus_graph.graph.resolver import resolve_dependencies

__all__ = ["MermaidRenderer", "assign_identifiers", "node_id", "resolve_dependencies"]
