"""Course data model."""

from dataclasses import dataclass
from typing import Tuple

from cursus_graph.enums import Semester
from cursus_graph.exceptions import MissingFieldError
from cursus_graph.models.concept import Concept


@dataclass(frozen=True, eq=False)
class Course:
    """A course of the curriculum.

    Courses are compared and hashed by identity: a curriculum may hold two
    courses with the same title (or even the same fields), and they must stay
    distinct nodes of the dependency graph.

    Attributes:
        title: Course title, used for display only
        semester: Semester in which the course is taught
        new_concepts: Concepts introduced by the course, in declaration order
        dependencies: Concepts the course requires, in declaration order

    Example:
        >>> registry = ConceptRegistry()
        >>> course = Course(
        ...     title="Algorithms",
        ...     semester=Semester.S2,
        ...     new_concepts=(registry.intern("sorting"),),
        ...     dependencies=(registry.intern("recursion"),),
        ... )
        >>> course.label
        'Algorithms[S2]'
    """

    title: str
    semester: Semester
    new_concepts: Tuple[Concept, ...]
    dependencies: Tuple[Concept, ...]

    def __post_init__(self):
        if self.title is None:
            raise MissingFieldError("title")
        if self.semester is None:
            raise MissingFieldError("semester", self.title)
        if self.new_concepts is None:
            raise MissingFieldError("new-concept", self.title)
        if self.dependencies is None:
            raise MissingFieldError("dependency-concept", self.title)

        # Accept any sequence but store tuples so the record stays immutable
        object.__setattr__(self, "new_concepts", tuple(self.new_concepts))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))

    @property
    def label(self) -> str:
        """Title followed by semester, e.g. ``Algorithms[S2]``."""
        return f"{self.title}[{self.semester}]"

    def introduces(self, concept: Concept) -> bool:
        """Check if the course lists ``concept`` among its new concepts."""
        return concept in self.new_concepts

    def requires(self, concept: Concept) -> bool:
        """Check if the course lists ``concept`` among its dependencies."""
        return concept in self.dependencies

    def __str__(self) -> str:
        return self.label
