"""Parsing utilities for cursus documents."""

from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

from cursus_graph.enums import Semester
from cursus_graph.exceptions import InvalidSemesterError, MissingFieldError, UnknownElementError
from cursus_graph.models import Concept, ConceptRegistry, Course
from cursus_graph.utils.custom_logger import get_logger

logger = get_logger(__name__)


class CursusParser:
    """Parser turning a cursus document into courses.

    Expected document structure::

        <cursus>
          <course title="Algorithms">
            <semester>S2</semester>
            <new-concept>sorting, graphs</new-concept>
            <dependency-concept>recursion</dependency-concept>
          </course>
        </cursus>

    Concept names are interned through the parser's registry, so the same
    name always maps to the same Concept for every course of the document.
    """

    ELEMENTS = {"cursus", "course", "semester", "new-concept", "dependency-concept"}
    CONCEPT_SEPARATOR = ","

    def __init__(self, registry: Optional[ConceptRegistry] = None):
        """Initialize the parser.

        Args:
            registry: Concept registry to intern names into. A new one is
                created if None.
        """
        self.registry = registry if registry is not None else ConceptRegistry()

    def parse(self, markup: Union[str, bytes], source: str = "<document>") -> List[Course]:
        """Parse a cursus document.

        Args:
            markup: Document content
            source: Name of the document, used in error messages

        Returns:
            Courses in document order

        Raises:
            UnknownElementError: If an element outside the cursus vocabulary is found
            InvalidSemesterError: If a semester token is not one of S1..S9
            MissingFieldError: If a course lacks its title or one of its fields
        """
        # Element and attribute names are case-sensitive
        soup = BeautifulSoup(markup, "xml")

        for element in soup.find_all(True):
            if element.name not in self.ELEMENTS:
                raise UnknownElementError(element.name, source)

        courses = [self._parse_course(element, source) for element in soup.find_all("course")]
        logger.debug("Document parsed", source=source, courses=len(courses))
        return courses

    def _parse_course(self, element: Tag, source: str) -> Course:
        """Parse a single <course> element."""
        title = element.get("title")
        if title is None:
            raise MissingFieldError("title", source=source)

        semester_text = self._field_text(element, "semester", title, source)
        new_concepts_text = self._field_text(element, "new-concept", title, source)
        dependencies_text = self._field_text(element, "dependency-concept", title, source)

        try:
            semester = Semester.from_token(semester_text)
        except InvalidSemesterError as e:
            raise InvalidSemesterError(e.token, e.supported_tokens, source) from None

        return Course(
            title=title,
            semester=semester,
            new_concepts=self.parse_concepts(new_concepts_text),
            dependencies=self.parse_concepts(dependencies_text),
        )

    @staticmethod
    def _field_text(element: Tag, name: str, title: str, source: str) -> str:
        field = element.find(name, recursive=False)
        if field is None:
            raise MissingFieldError(name, title, source)
        return field.get_text().strip()

    def parse_concepts(self, text: str) -> List[Concept]:
        """Split a comma-separated concept field into interned concepts.

        Args:
            text: Field content, e.g. "sorting, graphs"

        Returns:
            Concepts in declaration order; empty list for an empty field

        Example:
            >>> CursusParser().parse_concepts(" sorting ,graphs")
            [Concept(name='sorting'), Concept(name='graphs')]
        """
        text = text.strip()
        if not text:
            return []

        concepts: List[Concept] = []
        for name in text.split(self.CONCEPT_SEPARATOR):
            name = name.strip()
            if not name:
                logger.debug("Skipping blank concept name", field=text)
                continue
            concepts.append(self.registry.intern(name))
        return concepts
