"""Stable identifiers for rendering courses."""

from typing import Dict, Sequence

from cursus_graph.models import Course


def assign_identifiers(courses: Sequence[Course]) -> Dict[Course, int]:
    """Number courses 0, 1, 2, ... in input order."""
    return {course: index for index, course in enumerate(courses)}


def node_id(course: Course, identifiers: Dict[Course, int]) -> str:
    """Diagram node name of a course, e.g. ``id3``."""
    return f"id{identifiers[course]}"
