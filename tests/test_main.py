import json
import sys

import pytest

import main
from errors import SourceLoadError


def test_process_program_prints_tokens_and_ast(capsys):
    assert main.process_program("devprint 1 + 2;") is True
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "KEYWORD_DEVPRINT devprint" in out
    assert "Parsed AST:" in out
    assert "DEVPRINT\n  PLUS\n    NUMBER 1\n    NUMBER 2" in out


def test_process_program_reports_syntax_errors(capsys):
    assert main.process_program("1 + 2", print_tokens=False) is False
    out = capsys.readouterr().out
    assert out.startswith("Error: ")
    assert "Expected ';'" in out


def test_process_program_reports_lex_errors(capsys):
    assert main.process_program("1 @ 2;") is False
    assert "Unrecognized character: @" in capsys.readouterr().out


def test_process_program_warns_about_trailing_statements(capsys):
    assert main.process_program("1; 2;", print_tokens=False, print_ast=False)
    assert "2 token(s) after the first statement" in capsys.readouterr().out


def test_process_program_dumps_json(tmp_path, capsys):
    path = tmp_path / "ast.json"
    main.process_program("x * 3;", print_tokens=False, dump_ast_path=str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["node_type"] == "MULTIPLY"
    assert f"Wrote AST JSON to {path}" in capsys.readouterr().out


def test_load_source_failure(tmp_path):
    with pytest.raises(SourceLoadError) as excinfo:
        main.load_source(str(tmp_path / "missing.liml"))
    assert not isinstance(excinfo.value, SyntaxError)
    assert "missing.liml" in str(excinfo.value)


def test_main_runs_a_file(tmp_path, capsys):
    src = tmp_path / "prog.liml"
    src.write_text("devprint (a + 1) * 2;\n", encoding="utf-8")
    assert main.main([str(src), "--no-tokens"]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" not in out
    assert "MULTIPLY" in out


def test_main_defaults_to_code_liml(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / main.DEFAULT_SOURCE).write_text("7;", encoding="utf-8")
    assert main.main([]) == 0
    assert "NUMBER 7" in capsys.readouterr().out


def test_main_load_failure_exit_code(tmp_path, capsys):
    assert main.main([str(tmp_path / "nope.liml")]) == 1
    assert "Unable to load file" in capsys.readouterr().out


def test_main_parse_failure_exit_code(tmp_path):
    src = tmp_path / "bad.liml"
    src.write_text("devprint 1", encoding="utf-8")
    assert main.main([str(src)]) == 1


def test_interactive_mode(monkeypatch, capsys):
    lines = iter(["", "1 * 2;", "quit"])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
    main.interactive_mode()
    out = capsys.readouterr().out
    assert "MULTIPLY" in out
    assert "Goodbye!" in out


def test_interactive_mode_stops_at_eof(monkeypatch, capsys):
    def fake_input(_prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    main.interactive_mode()
    assert "Exiting..." in capsys.readouterr().out


def test_process_program_prints_long_chains(capsys):
    count = sys.getrecursionlimit() + 500
    assert main.process_program(" - ".join(["1"] * count) + ";", print_tokens=False)
    out = capsys.readouterr().out
    assert "Parsed AST:" in out
    assert out.count("NUMBER 1") == count


def test_process_program_reports_deep_nesting(capsys):
    depth = sys.getrecursionlimit() + 10
    src = "(" * depth + "1" + ")" * depth + ";"
    assert main.process_program(src, print_tokens=False) is False
    out = capsys.readouterr().out
    assert out.startswith("Error: ")
    assert "nested too deeply" in out
