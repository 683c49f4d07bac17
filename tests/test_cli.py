"""Tests for the command line entry point."""

from cursus_graph.cli import DEFAULT_INPUT, DEFAULT_OUTPUT, build_parser, main


def test_defaults():
    args = build_parser().parse_args([])

    assert args.input == DEFAULT_INPUT == "cursus.xml"
    assert args.output == DEFAULT_OUTPUT == "cursus.mmd"
    assert args.direction == "LR"
    assert not args.print_edges


def test_writes_diagram(tmp_path, sample_cursus, capsys):
    source = tmp_path / "cursus.xml"
    source.write_text(sample_cursus, encoding="utf-8")
    output = tmp_path / "cursus.mmd"

    exit_code = main([str(source), "-o", str(output)])

    assert exit_code == 0
    assert output.read_text(encoding="utf-8").startswith("flowchart LR\nsubgraph S1\n")
    assert capsys.readouterr().out == f"{output} generated\n"


def test_print_edges(tmp_path, sample_cursus, capsys):
    source = tmp_path / "cursus.xml"
    source.write_text(sample_cursus, encoding="utf-8")

    main([str(source), "-o", str(tmp_path / "out.mmd"), "--print-edges"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Programming[S1] --> Algorithms[S2] with [recursion]"
    assert len(lines) == 5


def test_warnings_go_to_stderr(tmp_path, capsys):
    source = tmp_path / "cursus.xml"
    source.write_text(
        "<cursus><course title='A'><semester>S1</semester>"
        "<new-concept></new-concept><dependency-concept>ghost</dependency-concept>"
        "</course></cursus>",
        encoding="utf-8",
    )

    exit_code = main([str(source), "-o", str(tmp_path / "out.mmd")])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "no concept ghost defined for A[S1]" in captured.err
    assert (tmp_path / "out.mmd").exists()


def test_ingestion_error_aborts(tmp_path, capsys):
    source = tmp_path / "cursus.xml"
    source.write_text("<cursus><unit/></cursus>", encoding="utf-8")
    output = tmp_path / "out.mmd"

    exit_code = main([str(source), "-o", str(output)])

    assert exit_code == 1
    assert "unknown element unit" in capsys.readouterr().err
    assert not output.exists()


def test_undecodable_file_aborts(tmp_path, capsys):
    source = tmp_path / "cursus.xml"
    source.write_bytes(b"<cursus><course title='\xff'></course></cursus>")

    exit_code = main([str(source), "-o", str(tmp_path / "out.mmd")])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("error: Failed to read")
