import builtins

import calc


def write_program(tmp_path, source: str):
    path = tmp_path / "program.calc"
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_run_script_prints_sorted_environment(tmp_path, capsys):
    path = write_program(tmp_path, "BEGIN b := 2; a := b * 3 END.")
    assert calc.main(["calc", path]) == 0
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ["a = 6", "b = 2"]


def test_run_script_reports_error(tmp_path, capsys):
    path = write_program(tmp_path, "BEGIN a := 1; b := c END.")
    assert calc.main(["calc", path]) == 1
    out = capsys.readouterr().out
    assert "a = 1" in out
    assert "UndefinedVariableException:" in out
    assert "Undefined variable 'c'" in out


def test_missing_file(tmp_path, capsys):
    assert calc.main(["calc", str(tmp_path / "missing.calc")]) == 1
    assert "FileNotFoundError:" in capsys.readouterr().out


def test_tokens_flag(tmp_path, capsys):
    path = write_program(tmp_path, "BEGIN END.")
    assert calc.main(["calc", "--tokens", path]) == 0
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured[0].startswith("Token(BEGIN, 'BEGIN'")
    assert captured[-1].startswith("Token(EOF, None")


def test_skip_unknown_flag(tmp_path, capsys):
    path = write_program(tmp_path, "BEGIN a := 1 @ END.")
    assert calc.main(["calc", path]) == 1
    assert "LexException:" in capsys.readouterr().out
    assert calc.main(["calc", "--skip-unknown", path]) == 0
    assert capsys.readouterr().out.strip() == "a = 1"


def test_debug_dump(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("CALCDEBUG", "1")
    path = write_program(tmp_path, "BEGIN a := 1 + 2 END.")
    assert calc.main(["calc", path]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "a := (1 + 2)" in out
    assert out.strip().endswith("a = 3")


def test_repl(capsys, monkeypatch):
    lines = iter([
        "BEGIN",
        "  a := 2;",
        "  b := a * 5",
        "END.",
        "b - a",
        "1 / 0",
        "exit",
    ])
    monkeypatch.setattr(builtins, "input", lambda _prompt: next(lines))
    calc.run_repl()
    out = capsys.readouterr().out.splitlines()
    assert "a = 2" in out
    assert "b = 10" in out
    assert "8" in out
    assert any("DivisionByZeroException:" in line for line in out)


def test_repl_stops_on_eof(capsys, monkeypatch):
    def raise_eof(_prompt):
        raise EOFError

    monkeypatch.setattr(builtins, "input", raise_eof)
    calc.run_repl()
    assert "REPL" in capsys.readouterr().out


def test_repl_interrupt_discards_partial_program(capsys, monkeypatch):
    lines = iter([
        "BEGIN",
        "  a := 1;",
        KeyboardInterrupt,
        "BEGIN b := 2 END.",
        "quit",
    ])

    def fake_input(_prompt):
        line = next(lines)
        if line is KeyboardInterrupt:
            raise KeyboardInterrupt
        return line

    monkeypatch.setattr(builtins, "input", fake_input)
    calc.run_repl()
    out = capsys.readouterr().out.splitlines()
    assert "b = 2" in out
    assert "a = 1" not in out
    assert "Interrupted." not in out
