"""Consistency checks over a list of courses.

The checks only report problems. They never raise, never drop or fix data,
and their results are not used by the dependency resolution.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from cursus_graph.models import Concept, Course
from cursus_graph.utils.custom_logger import get_logger

logger = get_logger(__name__)


class DiagnosticKind(Enum):
    """Kinds of consistency issues."""

    DUPLICATE_INTRODUCTION = "duplicate_introduction"
    UNDEFINED_DEPENDENCY = "undefined_dependency"


@dataclass(frozen=True)
class Diagnostic:
    """A consistency issue found in a curriculum.

    Attributes:
        kind: Kind of issue
        concept: Concept the issue is about
        courses: Courses involved (the conflicting introducers, or the
            single course with the undefined dependency)
    """

    kind: DiagnosticKind
    concept: Concept
    courses: Tuple[Course, ...]

    @property
    def message(self) -> str:
        """Human-readable description of the issue."""
        if self.kind is DiagnosticKind.DUPLICATE_INTRODUCTION:
            names = ", ".join(course.label for course in self.courses)
            return f"concept {self.concept} is declared as new by [{names}]"
        return f"no concept {self.concept} defined for {self.courses[0].label}"

    def __str__(self) -> str:
        return self.message


def _report(diagnostic: Diagnostic) -> Diagnostic:
    logger.warning(diagnostic.message, kind=diagnostic.kind.value)
    return diagnostic


def check_single_introduction(courses: Sequence[Course]) -> List[Diagnostic]:
    """Check that every concept is introduced by a single course.

    A course that lists a concept both as new and as a dependency re-exports
    it rather than originating it, so it is left out of the count.

    Args:
        courses: Courses in document order

    Returns:
        One diagnostic per concept still introduced by several courses
    """
    introducers: Dict[Concept, List[Course]] = {}
    for course in courses:
        for concept in course.new_concepts:
            owners = introducers.setdefault(concept, [])
            if course not in owners:
                owners.append(course)

    diagnostics: List[Diagnostic] = []
    for concept, owners in introducers.items():
        originals = [course for course in owners if not course.requires(concept)]
        if len(originals) > 1:
            diagnostics.append(
                _report(
                    Diagnostic(DiagnosticKind.DUPLICATE_INTRODUCTION, concept, tuple(originals))
                )
            )

    return diagnostics


def check_dependencies_exist(courses: Sequence[Course]) -> List[Diagnostic]:
    """Check that every required concept is introduced somewhere.

    This is a global existence check: a concept introduced only after the
    course that needs it passes here.

    Args:
        courses: Courses in document order

    Returns:
        One diagnostic per (course, missing concept) occurrence
    """
    introduced = {concept for course in courses for concept in course.new_concepts}

    diagnostics: List[Diagnostic] = []
    for course in courses:
        for concept in course.dependencies:
            if concept not in introduced:
                diagnostics.append(
                    _report(Diagnostic(DiagnosticKind.UNDEFINED_DEPENDENCY, concept, (course,)))
                )

    return diagnostics


def validate(courses: Sequence[Course]) -> List[Diagnostic]:
    """Run every consistency check.

    Args:
        courses: Courses in document order

    Returns:
        Diagnostics of all checks, duplicate introductions first
    """
    diagnostics = check_single_introduction(courses) + check_dependencies_exist(courses)
    logger.debug("Consistency checks completed", courses=len(courses), issues=len(diagnostics))
    return diagnostics
