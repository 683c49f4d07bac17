"""Tests for the consistency checks."""

import logging

from cursus_graph.utils import (
    DiagnosticKind,
    check_dependencies_exist,
    check_single_introduction,
    validate,
)


def test_re_export_is_not_a_conflict(make_course):
    a = make_course("A", "S1", new="recursion")
    b = make_course("B", "S2", new="recursion", deps="recursion")

    assert check_single_introduction([a, b]) == []


def test_conflict_names_only_original_introducers(make_course):
    a = make_course("A", "S1", new="recursion")
    b = make_course("B", "S2", new="recursion", deps="recursion")
    c = make_course("C", "S3", new="recursion")

    diagnostics = check_single_introduction([a, b, c])

    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.kind is DiagnosticKind.DUPLICATE_INTRODUCTION
    assert diagnostic.concept.name == "recursion"
    assert diagnostic.courses == (a, c)
    assert diagnostic.message == "concept recursion is declared as new by [A[S1], C[S3]]"


def test_concept_repeated_in_one_course_is_not_a_conflict(make_course):
    a = make_course("A", "S1", new="sets, sets")

    assert check_single_introduction([a]) == []


def test_same_title_courses_are_both_reported(make_course):
    first = make_course("Lab", "S1", new="git")
    second = make_course("Lab", "S1", new="git")

    diagnostics = check_single_introduction([first, second])

    assert diagnostics[0].courses == (first, second)


def test_dangling_dependency_reported_once(make_course):
    a = make_course("A", "S1", new="sets")
    b = make_course("B", "S2", deps="sets, topology")

    diagnostics = check_dependencies_exist([a, b])

    assert len(diagnostics) == 1
    assert diagnostics[0].kind is DiagnosticKind.UNDEFINED_DEPENDENCY
    assert diagnostics[0].courses == (b,)
    assert str(diagnostics[0]) == "no concept topology defined for B[S2]"


def test_later_introduction_passes_existence_check(make_course):
    early = make_course("Early", "S1", deps="graphs")
    late = make_course("Late", "S4", new="graphs")

    assert check_dependencies_exist([early, late]) == []


def test_validate_logs_each_issue_without_touching_input(make_course, caplog):
    a = make_course("A", "S1", new="sets")
    b = make_course("B", "S1", new="sets")
    c = make_course("C", "S2", deps="logic")
    courses = [a, b, c]

    with caplog.at_level(logging.WARNING, logger="cursus_graph"):
        diagnostics = validate(courses)

    assert [d.kind for d in diagnostics] == [
        DiagnosticKind.DUPLICATE_INTRODUCTION,
        DiagnosticKind.UNDEFINED_DEPENDENCY,
    ]
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert 'msg="concept sets is declared as new by [A[S1], B[S1]]"' in warnings[0]
    assert 'kind="undefined_dependency"' in warnings[1]
    assert courses == [a, b, c]
