import io

import pytest

from nock.errors import DomainError, FuelExhausted, NockSyntaxError
from nock.types.noun import Atom, noun
from nock.interpreter import Interpreter, repl, main, bracket_depth

from conftest import DECREMENT_SOURCE


@pytest.mark.parametrize(
    "code,expected",
    [
        ("*[42 [4 0 1]]", Atom(43)),
        ("*[42 4 0 1]", Atom(43)),
        ("+41", Atom(42)),
        ("?[1 2]", Atom(0)),
        ("?1", Atom(1)),
        ("=[1 1]", Atom(0)),
        ("=[1 2]", Atom(1)),
        ("/[3 [1 2]]", Atom(2)),
        ("/[7 [1 2 3]]", Atom(3)),
        ("+*[42 4 0 1]", Atom(44)),
        ("[1 2 3]", noun([1, 2, 3])),
        ("*[77 [2 [1 42] [1 1 153 218]]]", noun([153, 218])),
        (f"*[42 {DECREMENT_SOURCE}]", Atom(41)),
    ],
)
def test_eval(interp, code, expected):
    assert interp.eval(code) == expected


def test_eval_several_and_none(interp):
    assert interp.eval("+1 +2 :: two results") == [Atom(2), Atom(3)]
    assert interp.eval(":: nothing here") is None


def test_errors_propagate(interp):
    with pytest.raises(DomainError):
        interp.eval("+[1 2]")
    with pytest.raises(NockSyntaxError):
        interp.eval("*[1")


def test_fuel():
    with pytest.raises(FuelExhausted):
        Interpreter(fuel=50).eval(f"*[42 {DECREMENT_SOURCE}]")
    assert Interpreter(fuel=10_000).eval(f"*[42 {DECREMENT_SOURCE}]") == 41
    with pytest.raises(ValueError):
        Interpreter(fuel=0)


def test_bracket_depth():
    assert bracket_depth("[1 [2") == 2
    assert bracket_depth("3]] :: [[") == -2


def test_repl_reports_errors_and_continues(interp):
    stdin = io.StringIO("*[42 4 0 1]\n+[1 2]\n[1\n 2 3]\n")
    stdout, stderr = io.StringIO(), io.StringIO()
    failures = repl(interp, stdin=stdin, stdout=stdout, stderr=stderr, prompt=None)
    assert failures == 1
    assert stdout.getvalue().splitlines() == ["43", "[1 2 3]"]
    assert stderr.getvalue().startswith("error: DomainError: ")


def test_repl_prompts(interp):
    stdout = io.StringIO()
    repl(interp, stdin=io.StringIO("[1\n2]\n"), stdout=stdout, stderr=io.StringIO())
    assert stdout.getvalue() == "nock>   ... [1 2]\nnock> "


def test_repl_unterminated_input(interp):
    stderr = io.StringIO()
    failures = repl(interp, stdin=io.StringIO("[1 2\n"), stdout=io.StringIO(), stderr=stderr, prompt=None)
    assert failures == 1
    assert "Unmatched" in stderr.getvalue()


def test_main_evaluates_a_file(tmp_path, capsys):
    source = tmp_path / "program.nock"
    source.write_text(":: decrement\n*[42 " + DECREMENT_SOURCE + "]\n+65.536\n", encoding="utf-8")
    assert main([str(source), "--no-color"]) == 0
    assert capsys.readouterr().out.splitlines() == ["41", "65537"]


def test_main_reports_errors(tmp_path, capsys):
    source = tmp_path / "bad.nock"
    source.write_text("*[1 99 1]\n", encoding="utf-8")
    assert main([str(source), "--no-color"]) == 1
    assert "FormulaError" in capsys.readouterr().err


def test_main_reports_overly_deep_files(tmp_path, capsys):
    source = tmp_path / "deep.nock"
    source.write_text("[" * 30_000 + "1 2" + "]" * 30_000, encoding="utf-8")
    assert main([str(source), "--no-color"]) == 1
    assert "RecursionError" in capsys.readouterr().err


def test_repl_uses_the_current_standard_streams(interp, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("+41\n+[1 2]\n"))
    failures = repl(interp, prompt=None)
    captured = capsys.readouterr()
    assert failures == 1
    assert captured.out == "42\n"
    assert captured.err.startswith("error: DomainError: ")
