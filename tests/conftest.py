"""Shared fixtures for cursus-graph tests."""

import logging

import pytest

from cursus_graph import ConceptRegistry, Course, Semester


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any setup_logging call made by a test (the CLI installs a handler)."""
    logger = logging.getLogger("cursus_graph")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def registry():
    return ConceptRegistry()


@pytest.fixture
def make_course(registry):
    """Build a course from plain strings, interning concepts through one registry."""

    def _make(title, semester, new="", deps=""):
        def concepts(text):
            return [registry.intern(name.strip()) for name in text.split(",") if name.strip()]

        if isinstance(semester, str):
            semester = Semester[semester]
        return Course(title, semester, concepts(new), concepts(deps))

    return _make


SAMPLE_CURSUS = """<?xml version="1.0" encoding="UTF-8"?>
<cursus>
  <course title="Programming">
    <semester>S1</semester>
    <new-concept>variables, loops, recursion</new-concept>
    <dependency-concept></dependency-concept>
  </course>
  <course title="Discrete Maths">
    <semester>S1</semester>
    <new-concept>sets, induction</new-concept>
    <dependency-concept/>
  </course>
  <course title="Algorithms">
    <semester>S2</semester>
    <new-concept>sorting, graphs</new-concept>
    <dependency-concept>recursion, induction</dependency-concept>
  </course>
  <course title="Networks">
    <semester>S3</semester>
    <new-concept>routing</new-concept>
    <dependency-concept>graphs, loops</dependency-concept>
  </course>
</cursus>
"""


@pytest.fixture
def sample_cursus():
    return SAMPLE_CURSUS
