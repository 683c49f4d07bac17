"""Concept data model and registry."""

from dataclasses import dataclass
from typing import Dict, Iterator


@dataclass(frozen=True)
class Concept:
    """A named notion taught by one course and required by others.

    Concepts are compared by name. Within one run they are created through a
    ``ConceptRegistry`` so equal names also share a single instance.

    Attributes:
        name: Concept name (e.g., "recursion")
    """

    name: str

    def __post_init__(self):
        if self.name is None or not self.name.strip():
            raise ValueError("concept name must be a non-empty string")

    def __str__(self) -> str:
        return self.name


class ConceptRegistry:
    """Interns concept names so identical names resolve to one Concept.

    Example:
        >>> registry = ConceptRegistry()
        >>> registry.intern("graphs") is registry.intern("graphs")
        True
    """

    def __init__(self):
        self._concepts: Dict[str, Concept] = {}

    def intern(self, name: str) -> Concept:
        """Return the Concept for ``name``, creating it on first use."""
        concept = self._concepts.get(name)
        if concept is None:
            concept = Concept(name)
            self._concepts[name] = concept
        return concept

    def __contains__(self, name: object) -> bool:
        return name in self._concepts

    def __len__(self) -> int:
        return len(self._concepts)

    def __iter__(self) -> Iterator[Concept]:
        return iter(self._concepts.values())
