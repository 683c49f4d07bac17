"""Enumerations for cursus-graph."""

from cursus_graph.enums.semester import Semester

__all__ = ["Semester"]
