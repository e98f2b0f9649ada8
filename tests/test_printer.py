import pytest

from kappa.errors import KappaTypeError
from kappa.printer import to_str
from kappa.types.closure import ContinuationClosure, Lambda, Primitive
from kappa.types.environment import Environment
from kappa.types.nil import Nil, Undef
from kappa.types.pair import Pair


@pytest.mark.parametrize(
    "value, expected",
    [
        (Undef, "<undefined>"),
        (Nil, "()"),
        (True, "#t"),
        (False, "#f"),
        (0, "0"),
        (-42, "-42"),
        ("foo", "foo"),
        ('say "hi"\n', 'say "hi"\n'),
        ("", ""),
    ],
)
def test_atoms(value, expected):
    assert to_str(value) == expected


def test_closures_print_as_lambda():
    assert to_str(Lambda([], [1], Environment())) == "<lambda>"
    assert to_str(ContinuationClosure(lambda v: v)) == "<lambda>"
    assert to_str(Primitive(abs, 1)) == "<lambda>"


def test_dotted_pair():
    assert to_str(Pair(1, 2)) == "(1 . 2)"


def test_proper_list():
    assert to_str(Pair(1, Pair(2, Nil))) == "(1 2)"


def test_improper_tail_after_several_elements():
    assert to_str(Pair(1, Pair(2, Pair(3, 4)))) == "(1 2 3 . 4)"


def test_nested_lists():
    inner = Pair.from_iterable([2, "x"])
    outer = Pair.from_iterable([1, inner, Pair(True, False), Nil])
    assert to_str(outer) == "(1 (2 x) (#t . #f) ())"


def test_long_list_does_not_recurse_on_cdr():
    n = 50_000
    chain = Pair.from_iterable(range(n))
    text = to_str(chain)
    assert text.startswith("(0 1 2 ")
    assert text.endswith(f" {n - 1})")


def test_deeply_nested_cars_do_not_recurse():
    depth = 10_000
    value = Nil
    for _ in range(depth):
        value = Pair(value, Nil)
    assert to_str(value) == "(" * depth + "()" + ")" * depth


def test_str_of_pair_uses_printer():
    assert str(Pair("a", Nil)) == "(a)"
    assert str(Nil) == "()"
    assert str(Undef) == "<undefined>"


def test_foreign_objects_are_rejected():
    with pytest.raises(KappaTypeError):
        to_str(3.5)
