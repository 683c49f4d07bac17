"""Dependency graph between courses."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from cursus_graph.models.concept import Concept
from cursus_graph.models.course import Course


@dataclass(frozen=True)
class Edge:
    """A prerequisite relation between two courses.

    Attributes:
        prerequisite: Course that introduces the concepts
        dependent: Course that requires them
        concepts: Concepts justifying the edge, in the order they were resolved
    """

    prerequisite: Course
    dependent: Course
    concepts: Tuple[Concept, ...]

    @property
    def label(self) -> str:
        """Comma-joined concept names, e.g. ``sorting,graphs``."""
        return ",".join(concept.name for concept in self.concepts)

    def __str__(self) -> str:
        names = ", ".join(concept.name for concept in self.concepts)
        return f"{self.prerequisite.label} --> {self.dependent.label} with [{names}]"


class DependencyGraph:
    """For every course, the courses it depends on and why.

    Each course maps to an insertion-ordered mapping from prerequisite course
    to the concepts that prerequisite satisfies. Several concepts satisfied by
    the same prerequisite share one edge. Concept order within an edge
    follows resolution order and each concept is kept once.

    The resolver is the only writer; everything else reads.
    """

    def __init__(self):
        self._prerequisites: Dict[Course, Dict[Course, Dict[Concept, None]]] = {}

    def add_course(self, course: Course) -> None:
        """Register ``course`` as a node, even if it ends up with no prerequisites."""
        self._prerequisites.setdefault(course, {})

    def add_dependency(self, course: Course, prerequisite: Course, concept: Concept) -> None:
        """Record that ``course`` needs ``concept`` from ``prerequisite``."""
        edges = self._prerequisites.setdefault(course, {})
        edges.setdefault(prerequisite, {})[concept] = None

    @property
    def courses(self) -> List[Course]:
        """Courses of the graph, in resolution order."""
        return list(self._prerequisites)

    def prerequisites(self, course: Course) -> Dict[Course, Tuple[Concept, ...]]:
        """Prerequisite courses of ``course`` with the concepts each one provides.

        Raises:
            KeyError: If the course is not part of the graph
        """
        return {
            prerequisite: tuple(concepts)
            for prerequisite, concepts in self._prerequisites[course].items()
        }

    def dependents(self, course: Course) -> List[Course]:
        """Courses that list ``course`` among their prerequisites."""
        return [
            dependent
            for dependent, edges in self._prerequisites.items()
            if course in edges
        ]

    def edges(self) -> Iterator[Edge]:
        """Iterate over every edge, grouped by dependent course in resolution order."""
        for dependent, edges in self._prerequisites.items():
            for prerequisite, concepts in edges.items():
                yield Edge(prerequisite, dependent, tuple(concepts))

    def __contains__(self, course: object) -> bool:
        return course in self._prerequisites

    def __len__(self) -> int:
        return len(self._prerequisites)

    def __iter__(self) -> Iterator[Course]:
        return iter(self._prerequisites)
