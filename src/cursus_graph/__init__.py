"""cursus-graph - course prerequisite graphs from curriculum documents."""

from cursus_graph.analysis import CursusAnalysis, analyze
from cursus_graph.clients import HTTPClient
from cursus_graph.enums import Semester
from cursus_graph.exceptions import (
    CursusGraphError,
    IngestionError,
    InvalidSemesterError,
    MissingFieldError,
    UnknownElementError,
)
from cursus_graph.graph import MermaidRenderer, assign_identifiers, resolve_dependencies
from cursus_graph.loaders import CursusLoader
from cursus_graph.logging import setup_logging
from cursus_graph.models import Concept, ConceptRegistry, Course, DependencyGraph, Edge
from cursus_graph.utils import Diagnostic, DiagnosticKind, validate

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Concept",
    "ConceptRegistry",
    "Course",
    "CursusAnalysis",
    "CursusLoader",
    "DependencyGraph",
    "Diagnostic",
    "DiagnosticKind",
    "Edge",
    "HTTPClient",
    "MermaidRenderer",
    "Semester",
    "analyze",
    "assign_identifiers",
    "resolve_dependencies",
    "setup_logging",
    "validate",
    "CursusGraphError",
    "IngestionError",
    "InvalidSemesterError",
    "MissingFieldError",
    "UnknownElementError",
]
