"""Semester enumeration."""

from enum import Enum
from functools import total_ordering
from typing import List

from cursus_graph.exceptions import InvalidSemesterError


@total_ordering
class Semester(Enum):
    """Semesters of a curriculum, in teaching order.

    The sequence is fixed: a document can only place courses in one of
    these nine semesters. Values are the 1-based position in the sequence.
    """

    S1 = 1
    S2 = 2
    S3 = 3
    S4 = 4
    S5 = 5
    S6 = 6
    S7 = 7
    S8 = 8
    S9 = 9

    @property
    def ordinal(self) -> int:
        """0-based position of the semester in the sequence."""
        return self.value - 1

    def previous(self) -> List["Semester"]:
        """Semesters strictly before this one, nearest first.

        Example:
            >>> Semester.S3.previous()
            [<Semester.S2: 2>, <Semester.S1: 1>]
        """
        return [semester for semester in reversed(list(Semester)) if semester.value < self.value]

    @classmethod
    def from_token(cls, token: str) -> "Semester":
        """Get Semester from its document token.

        Args:
            token: Semester name as written in a cursus document (e.g. "S2")

        Returns:
            Semester enum value

        Raises:
            InvalidSemesterError: If the token is not one of S1..S9
        """
        name = token.strip()
        try:
            return cls[name]
        except KeyError:
            raise InvalidSemesterError(name, [semester.name for semester in cls]) from None

    def __lt__(self, other):
        if isinstance(other, Semester):
            return self.value < other.value
        return NotImplemented

    def __str__(self) -> str:
        return self.name
