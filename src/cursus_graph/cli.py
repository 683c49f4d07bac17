"""Command line entry point: cursus document in, Mermaid flowchart out."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from cursus_graph.analysis import analyze
from cursus_graph.exceptions import CursusGraphError
from cursus_graph.graph import MermaidRenderer
from cursus_graph.loaders import CursusLoader
from cursus_graph.logging import get_logger, setup_logging
from cursus_graph.models import Course

DEFAULT_INPUT = "cursus.xml"
DEFAULT_OUTPUT = "cursus.mmd"
DEFAULT_LOG_LEVEL = "WARNING"

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cursus-graph",
        description="Derive course prerequisites from a cursus document and draw them",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Cursus document path or http(s) URL (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Mermaid file to write (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--direction",
        default=MermaidRenderer.DEFAULT_DIRECTION,
        choices=MermaidRenderer.DIRECTIONS,
        help="Flowchart orientation",
    )
    parser.add_argument(
        "--print-edges",
        action="store_true",
        help="Also print every prerequisite relation on stdout",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Log level of diagnostics written to stderr (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


async def _fetch(url: str) -> List[Course]:
    async with CursusLoader() as loader:
        return await loader.fetch(url)


def load_courses(location: str) -> List[Course]:
    """Load courses from a local path or a remote URL."""
    if _is_url(location):
        return asyncio.run(_fetch(location))
    return CursusLoader().load_file(location)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        courses = load_courses(args.input)
    except CursusGraphError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    analysis = analyze(courses)

    if args.print_edges:
        for edge in analysis.graph.edges():
            print(edge)

    output = Path(args.output)
    output.write_text(MermaidRenderer(args.direction).render(analysis), encoding="utf-8")
    logger.info("Diagram written", path=output)
    print(f"{output} generated")
    return 0
