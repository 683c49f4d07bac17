"""Grouping utilities: courses and introduced concepts per semester."""

from typing import Dict, List, Sequence

from cursus_graph.enums import Semester
from cursus_graph.models import Concept, Course


def group_courses_by_semester(courses: Sequence[Course]) -> Dict[Semester, List[Course]]:
    """Group courses by semester.

    Only semesters that hold at least one course appear. Keys follow the
    semester order, courses keep their input order inside each group.

    Args:
        courses: Courses in document order

    Returns:
        Dictionary mapping semester to its courses

    Example:
        >>> groups = group_courses_by_semester(courses)
        >>> list(groups)
        [<Semester.S1: 1>, <Semester.S3: 3>]
    """
    groups: Dict[Semester, List[Course]] = {}
    for course in courses:
        groups.setdefault(course.semester, []).append(course)

    return {semester: groups[semester] for semester in sorted(groups)}


def group_concepts_by_semester(
    courses_by_semester: Dict[Semester, List[Course]],
) -> Dict[Semester, Dict[Concept, List[Course]]]:
    """Map, for every semester, each introduced concept to the courses introducing it.

    Only ``new_concepts`` count: a concept exists in a semester where it is
    taught, not where it is merely required.

    Args:
        courses_by_semester: Output of ``group_courses_by_semester``

    Returns:
        Dictionary mapping semester to (concept -> introducing courses)
    """
    concepts_by_semester: Dict[Semester, Dict[Concept, List[Course]]] = {}
    for semester, courses in courses_by_semester.items():
        concept_map: Dict[Concept, List[Course]] = {}
        for course in courses:
            for concept in course.new_concepts:
                concept_map.setdefault(concept, []).append(course)
        concepts_by_semester[semester] = concept_map

    return concepts_by_semester
