"""Mermaid flowchart rendering of a curriculum analysis."""

import re
from typing import TYPE_CHECKING, List

from cursus_graph.graph.identifiers import node_id

if TYPE_CHECKING:
    from cursus_graph.analysis import CursusAnalysis


class MermaidRenderer:
    """Render the dependency graph as a Mermaid flowchart.

    Each semester becomes a subgraph holding its courses, and each
    prerequisite relation an arrow from the prerequisite to the dependent
    course, labelled with the concepts it carries.

    Example output::

        flowchart LR
        subgraph S1
          id0("Programming")
        end S1
        subgraph S2
          id1("Algorithms")
        end S2

        id0 --recursion--> id1
    """

    DEFAULT_DIRECTION = "LR"
    DIRECTIONS = ("LR", "RL", "TB", "BT", "TD")
    # Characters with a meaning in node shapes or edge syntax, as Mermaid entity codes
    ENTITIES = {
        '"': "#quot;",
        "|": "#124;",
        "(": "#40;",
        ")": "#41;",
        "[": "#91;",
        "]": "#93;",
        "{": "#123;",
        "}": "#125;",
        "<": "#60;",
        ">": "#62;",
    }
    _DASH_RUN = re.compile(r"-(?=-)")

    def __init__(self, direction: str = DEFAULT_DIRECTION):
        """Initialize the renderer.

        Args:
            direction: Flowchart orientation (LR, RL, TB, BT or TD)

        Raises:
            ValueError: If the direction is not supported by Mermaid
        """
        direction = direction.upper()
        if direction not in self.DIRECTIONS:
            raise ValueError(
                f"Unsupported direction: '{direction}'. "
                f"Supported directions are: {', '.join(self.DIRECTIONS)}"
            )
        self.direction = direction

    @classmethod
    def _escape(cls, text: str) -> str:
        """Replace Mermaid syntax characters and dash runs with entity codes."""
        text = "".join(cls.ENTITIES.get(char, char) for char in text)
        return cls._DASH_RUN.sub("#45;", text)

    def render(self, analysis: "CursusAnalysis") -> str:
        """Render an analysis to Mermaid text.

        Args:
            analysis: Result of ``analyze``

        Returns:
            Flowchart source, newline terminated
        """
        identifiers = analysis.identifiers
        lines: List[str] = [f"flowchart {self.direction}"]

        for semester, courses in analysis.courses_by_semester.items():
            lines.append(f"subgraph {semester}")
            for course in courses:
                lines.append(f'  {node_id(course, identifiers)}("{self._escape(course.title)}")')
            lines.append(f"end {semester}")
        lines.append("")

        for edge in analysis.graph.edges():
            source = node_id(edge.prerequisite, identifiers)
            target = node_id(edge.dependent, identifiers)
            lines.append(f"{source} --{self._escape(edge.label)}--> {target}")

        return "\n".join(lines) + "\n"
