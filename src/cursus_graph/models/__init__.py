"""Data models for curricula."""

from cursus_graph.models.concept import Concept, ConceptRegistry
from cursus_graph.models.course import Course
from cursus_graph.models.graph import DependencyGraph, Edge

__all__ = [
    "Concept",
    "ConceptRegistry",
    "Course",
    "DependencyGraph",
    "Edge",
]
