"""Utility functions for cursus-graph."""

from cursus_graph.utils.grouping import group_concepts_by_semester, group_courses_by_semester
from cursus_graph.utils.parsers import CursusParser
from cursus_graph.utils.validators import (
    Diagnostic,
    DiagnosticKind,
    check_dependencies_exist,
    check_single_introduction,
    validate,
)

__all__ = [
    "CursusParser",
    "Diagnostic",
    "DiagnosticKind",
    "check_dependencies_exist",
    "check_single_introduction",
    "group_concepts_by_semester",
    "group_courses_by_semester",
    "validate",
]
