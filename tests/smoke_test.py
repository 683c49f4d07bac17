#!/usr/bin/env python3
"""Smoke test to verify basic package functionality across Python versions."""

import sys


def test_imports():
    """Test that all main package imports work."""
    print("Testing imports...")

    import cursus_graph

    assert hasattr(cursus_graph, "__version__")
    print(f"  ✓ Package version: {cursus_graph.__version__}")

    from cursus_graph import (
        ConceptRegistry,
        Course,
        CursusLoader,
        HTTPClient,
        MermaidRenderer,
        Semester,
        analyze,
        setup_logging,
    )

    print("  ✓ All public imports successful")

    from cursus_graph.exceptions import (
        CursusGraphError,
        IngestionError,
        InvalidSemesterError,
        MissingFieldError,
        UnknownElementError,
    )

    assert issubclass(UnknownElementError, IngestionError)
    assert issubclass(IngestionError, CursusGraphError)
    print("  ✓ Exception imports successful")


def test_enums():
    """Test that the semester enum is properly defined."""
    print("\nTesting enums...")

    from cursus_graph import Semester

    assert len(Semester) == 9
    assert Semester.S1 < Semester.S9
    assert Semester.from_token("S4") is Semester.S4
    print("  ✓ Semester enum works")


def test_models():
    """Test that model classes can be instantiated."""
    print("\nTesting model creation...")

    from cursus_graph import ConceptRegistry, Course, Semester

    registry = ConceptRegistry()
    course = Course(
        title="Test Course",
        semester=Semester.S1,
        new_concepts=[registry.intern("testing")],
        dependencies=[],
    )
    assert course.label == "Test Course[S1]"
    assert course.new_concepts[0] is registry.intern("testing")
    print("  ✓ Course model created")


def test_pipeline():
    """Test a tiny document end to end."""
    print("\nTesting pipeline...")

    from cursus_graph import CursusLoader, MermaidRenderer, analyze

    courses = CursusLoader().load_text(
        "<cursus>"
        "<course title='A'><semester>S1</semester>"
        "<new-concept>x</new-concept><dependency-concept/></course>"
        "<course title='B'><semester>S2</semester>"
        "<new-concept/><dependency-concept>x</dependency-concept></course>"
        "</cursus>"
    )
    text = MermaidRenderer().render(analyze(courses))
    assert "id0 --x--> id1" in text
    print("  ✓ Pipeline works")


def test_http_client():
    """Test HTTPClient can be instantiated."""
    print("\nTesting HTTPClient...")

    from cursus_graph import HTTPClient

    client = HTTPClient()
    assert client is not None
    print("  ✓ HTTPClient created")


def main():
    """Run all smoke tests."""
    print("=" * 60)
    print("cursus-graph Smoke Test")
    print("=" * 60)
    print(f"Python version: {sys.version}")
    print(f"Platform: {sys.platform}")
    print("=" * 60)

    tests = [
        test_imports,
        test_enums,
        test_models,
        test_pipeline,
        test_http_client,
    ]

    failed = []

    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"  ✗ {test.__name__} failed: {e}")
            failed.append(test.__name__)

    print("\n" + "=" * 60)
    if failed:
        print(f"FAILED: {len(failed)} test(s) failed:")
        for name in failed:
            print(f"  - {name}")
        sys.exit(1)
    else:
        print("SUCCESS: All smoke tests passed!")
        sys.exit(0)


if __name__ == "__main__":
    main()
