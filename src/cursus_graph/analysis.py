"""Curriculum analysis pipeline."""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from cursus_graph.enums import Semester
from cursus_graph.graph.identifiers import assign_identifiers
from cursus_graph.graph.resolver import resolve_dependencies
from cursus_graph.logging import get_logger
from cursus_graph.models import Concept, Course, DependencyGraph
from cursus_graph.utils import (
    Diagnostic,
    group_concepts_by_semester,
    group_courses_by_semester,
    validate,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class CursusAnalysis:
    """Everything derived from a list of courses.

    Attributes:
        courses: Input courses, in document order
        courses_by_semester: Courses grouped by semester
        concepts_by_semester: Introduced concepts per semester with their courses
        graph: Course dependency graph
        identifiers: Rendering identifier of each course
        diagnostics: Consistency issues found in the input
    """

    courses: Tuple[Course, ...]
    courses_by_semester: Dict[Semester, List[Course]]
    concepts_by_semester: Dict[Semester, Dict[Concept, List[Course]]]
    graph: DependencyGraph
    identifiers: Dict[Course, int]
    diagnostics: Tuple[Diagnostic, ...]

    @property
    def has_issues(self) -> bool:
        """Check if the consistency checks reported anything."""
        return len(self.diagnostics) > 0


def analyze(courses: Sequence[Course]) -> CursusAnalysis:
    """Validate a curriculum and compute its dependency graph.

    Validation only reports: the graph is computed from the courses as given,
    whatever the diagnostics say.

    Args:
        courses: Courses in document order

    Returns:
        CursusAnalysis with the graph, identifiers and diagnostics

    Example:
        >>> analysis = analyze(CursusLoader().load_file("cursus.xml"))
        >>> for edge in analysis.graph.edges():
        ...     print(edge)
        Programming[S1] --> Algorithms[S2] with [recursion]
    """
    courses = tuple(courses)
    logger.info("Analyzing curriculum", courses=len(courses))

    diagnostics = validate(courses)

    courses_by_semester = group_courses_by_semester(courses)
    concepts_by_semester = group_concepts_by_semester(courses_by_semester)
    graph = resolve_dependencies(courses_by_semester, concepts_by_semester)

    analysis = CursusAnalysis(
        courses=courses,
        courses_by_semester=courses_by_semester,
        concepts_by_semester=concepts_by_semester,
        graph=graph,
        identifiers=assign_identifiers(courses),
        diagnostics=tuple(diagnostics),
    )
    logger.info(
        "Curriculum analyzed",
        semesters=len(courses_by_semester),
        edges=sum(1 for _ in graph.edges()),
        issues=len(diagnostics),
    )
    return analysis
