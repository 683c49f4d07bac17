"""Resolution of course dependencies from required concepts."""

from typing import Dict, List

from cursus_graph.enums import Semester
from cursus_graph.logging import get_logger
from cursus_graph.models import Concept, Course, DependencyGraph

logger = get_logger(__name__)


def resolve_dependencies(
    courses_by_semester: Dict[Semester, List[Course]],
    concepts_by_semester: Dict[Semester, Dict[Concept, List[Course]]],
) -> DependencyGraph:
    """Find, for every course, the courses that teach the concepts it requires.

    Each required concept is looked up in the semesters before the course's
    own, nearest first. The first semester introducing it wins: every course
    introducing it there becomes a prerequisite, and older semesters are not
    considered. If no earlier semester introduces the concept, the courses of
    the same semester introducing it are used instead (the course itself
    included). A concept found nowhere, or only in later semesters, is left
    unresolved and produces no edge.

    Args:
        courses_by_semester: Output of ``group_courses_by_semester``
        concepts_by_semester: Output of ``group_concepts_by_semester``

    Returns:
        DependencyGraph holding every course, in semester order

    Example:
        >>> graph = resolve_dependencies(courses_by_semester, concepts_by_semester)
        >>> graph.prerequisites(algorithms)
        {Programming[S1]: (Concept(name='recursion'),)}
    """
    graph = DependencyGraph()
    unresolved = 0

    for semester, courses in courses_by_semester.items():
        for course in courses:
            graph.add_course(course)
            for concept in course.dependencies:
                if _resolve_in_previous_semesters(
                    graph, course, concept, semester, concepts_by_semester
                ):
                    continue
                if not _resolve_in_semester(graph, course, concept, courses):
                    unresolved += 1
                    logger.debug(
                        "Concept left unresolved", course=course.label, concept=concept.name
                    )

    logger.debug("Dependencies resolved", courses=len(graph), unresolved=unresolved)
    return graph


def _resolve_in_previous_semesters(
    graph: DependencyGraph,
    course: Course,
    concept: Concept,
    semester: Semester,
    concepts_by_semester: Dict[Semester, Dict[Concept, List[Course]]],
) -> bool:
    for previous in semester.previous():
        sources = concepts_by_semester.get(previous, {}).get(concept)
        if sources:
            for source in sources:
                graph.add_dependency(course, source, concept)
            return True
    return False


def _resolve_in_semester(
    graph: DependencyGraph, course: Course, concept: Concept, courses: List[Course]
) -> bool:
    # Linear scan over the semester, not indexed
    found = False
    for candidate in courses:
        if candidate.introduces(concept):
            graph.add_dependency(course, candidate, concept)
            found = True
    return found
