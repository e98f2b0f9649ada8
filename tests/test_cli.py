import pytest

from kappa.cli import main
from kappa.types.integer import INT_MAX


def run_main(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_demo_program_by_default(capsys):
    assert run_main([]) == 0
    assert capsys.readouterr().out == "(11 foo)\n"


def test_expression_argument(capsys):
    assert run_main(["-e", "(cons 1 (cons 2 ()))"]) == 0
    assert capsys.readouterr().out == "(1 2)\n"


def test_program_file(tmp_path, capsys):
    program = tmp_path / "prog.kp"
    program.write_text('(define (pair-up a) (cons a "b"))\n(pair-up 1)\n', encoding="utf-8")
    assert run_main([str(program)]) == 0
    assert capsys.readouterr().out == "(1 . b)\n"


def test_missing_file(tmp_path, caplog):
    assert run_main([str(tmp_path / "nope.kp")]) == 1
    assert "Cannot read" in caplog.text


def test_undecodable_file(tmp_path, capsys, caplog):
    program = tmp_path / "latin1.kp"
    program.write_bytes(b"(cons 1 \xff)")
    assert run_main([str(program)]) == 1
    assert capsys.readouterr().out == ""
    assert "Cannot read" in caplog.text


@pytest.mark.parametrize(
    "source, code",
    [
        ("(+ 1", 2),
        ('(+ 1 "x")', 3),
        ("(1 2)", 4),
        ("((lambda (a) a))", 5),
        ("x", 7),
        (f"(+ {INT_MAX} 1)", 8),
    ],
)
def test_error_kinds_map_to_exit_codes(source, code, capsys, caplog):
    assert run_main(["-e", source]) == code
    assert capsys.readouterr().out == ""
    assert [r.levelname for r in caplog.records if r.name == "kappa.cli"] == ["ERROR"]


def test_expression_and_file_are_exclusive(capsys):
    assert run_main(["-e", "1", "prog.kp"]) == 2


def test_deep_cdr_nesting_runs(capsys):
    depth = 3000
    assert run_main(["-e", "(cons 1 " * depth + "()" + ")" * depth]) == 0
    assert capsys.readouterr().out == "(" + " ".join(["1"] * depth) + ")\n"


def test_deep_operator_nesting_is_reported(capsys, caplog):
    depth = 3000
    assert run_main(["-e", "(+ " * depth + "1" + " 1)" * depth]) == 1
    assert capsys.readouterr().out == ""
    assert "KappaNestingError" in caplog.text
