"""Custom exceptions for cursus-graph."""

from __future__ import annotations

from typing import List, Optional


class CursusGraphError(Exception):
    """Base exception for all cursus-graph errors."""

    pass


class IngestionError(CursusGraphError):
    """Raised when a curriculum document cannot be turned into courses.

    Ingestion errors abort the run before any dependency is resolved.

    Attributes:
        source: Path, URL or description of the document being read
        reason: The reason for the failure
    """

    def __init__(self, source: str, reason: Optional[str] = None):
        """Initialize the exception.

        Args:
            source: The document that failed
            reason: Optional reason for the failure
        """
        self.source = source
        self.reason = reason

        message = f"Failed to read {source}"
        if reason:
            message += f": {reason}"

        super().__init__(message)


class UnknownElementError(IngestionError):
    """Raised when the document contains an element outside the cursus vocabulary.

    Attributes:
        element: Name of the unexpected element
    """

    def __init__(self, element: str, source: str = "<document>"):
        self.element = element
        super().__init__(source, f"unknown element {element}")


class InvalidSemesterError(IngestionError):
    """Raised when a semester token does not name one of the fixed semesters.

    Attributes:
        token: The token that was read
        supported_tokens: List of accepted semester names
    """

    def __init__(
        self,
        token: str,
        supported_tokens: Optional[List[str]] = None,
        source: str = "<document>",
    ):
        self.token = token
        self.supported_tokens = supported_tokens or []

        reason = f"invalid semester '{token}'"
        if self.supported_tokens:
            reason += f", expected one of: {', '.join(self.supported_tokens)}"
        super().__init__(source, reason)


class MissingFieldError(IngestionError):
    """Raised when a course is built without one of its required fields.

    Attributes:
        field: Name of the missing field
        title: Title of the course, if known
    """

    def __init__(self, field: str, title: Optional[str] = None, source: str = "<document>"):
        self.field = field
        self.title = title

        reason = f"{field} is missing"
        if title is not None:
            reason += f" for {title}"
        super().__init__(source, reason)
