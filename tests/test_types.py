import pickle

import pytest

from kappa.errors import KappaInvalidSymbol, KappaNameError, KappaTypeError, KappaUnboundSymbol
from kappa.types.environment import Environment
from kappa.types.nil import Nil, NilType, Undef, UndefType
from kappa.types.pair import Pair
from kappa.types.symbol import Symbol


def test_sentinels_are_singletons():
    assert NilType() is Nil
    assert UndefType() is Undef
    assert Nil is not Undef
    assert list(Nil) == []


def test_symbols_are_interned():
    assert Symbol("foo") is Symbol("foo")
    assert Symbol("foo") != Symbol("bar")
    assert str(Symbol("foo")) == "foo"
    assert pickle.loads(pickle.dumps(Symbol("foo"))) is Symbol("foo")


def test_pair_is_immutable():
    p = Pair(1, Nil)
    with pytest.raises(AttributeError):
        p.car = 2
    with pytest.raises(AttributeError):
        del p.cdr


def test_pair_structural_equality():
    assert Pair.from_iterable([1, 2, 3]) == Pair(1, Pair(2, Pair(3, Nil)))
    assert Pair(1, 2) != Pair(1, Nil)
    assert Pair(Pair(1, 2), Nil) == Pair(Pair(1, 2), Nil)
    assert Pair.from_iterable([1, 2]) != Pair.from_iterable([1, 2, 3])
    # #t is not the integer 1
    assert Pair(True, Nil) != Pair(1, Nil)
    assert hash(Pair.from_iterable([1, 2])) == hash(Pair.from_iterable([1, 2]))


def test_deeply_nested_pairs_compare_and_hash():
    def nest(depth, leaf):
        value = leaf
        for _ in range(depth):
            value = Pair(value, Nil)
        return value

    assert nest(10_000, 1) == nest(10_000, 1)
    assert nest(10_000, 1) != nest(10_000, True)
    assert hash(nest(10_000, "a")) == hash(nest(10_000, "a"))


def test_pair_iteration():
    assert list(Pair.from_iterable(["a", "b"])) == ["a", "b"]
    assert Pair.from_iterable([1, 2]).is_proper()
    assert not Pair(1, 2).is_proper()
    with pytest.raises(KappaTypeError):
        list(Pair(1, 2))


def test_from_iterable_with_tail():
    assert Pair.from_iterable([1, 2], tail=3) == Pair(1, Pair(2, 3))
    assert Pair.from_iterable([]) is Nil


def test_environment_define_and_lookup(env):
    env.define(Symbol("x"), 42)
    child = Environment(outer=env)
    child.define(Symbol("y"), 1)
    assert child.lookup(Symbol("x")) == 42
    assert child.lookup(Symbol("y")) == 1
    assert child.find(Symbol("x")) is env
    with pytest.raises(KappaUnboundSymbol):
        env.lookup(Symbol("y"))


def test_environment_slots_are_write_once(env):
    env.define(Symbol("x"), 1)
    with pytest.raises(KappaNameError):
        env.define(Symbol("x"), 2)
    slot = env.reserve(Symbol("y"))
    slot.fill(5)
    with pytest.raises(KappaNameError):
        slot.fill(6)


def test_inner_frame_may_shadow(env):
    env.define(Symbol("x"), 1)
    child = Environment(outer=env)
    child.define(Symbol("x"), 2)
    assert child.lookup(Symbol("x")) == 2
    assert env.lookup(Symbol("x")) == 1


def test_reserved_slot_reads_undef(env):
    env.reserve(Symbol("pending"))
    assert env.lookup(Symbol("pending")) is Undef


def test_release_pending_drops_only_unfilled_slots(env):
    env.define(Symbol("done"), 1)
    env.reserve(Symbol("pending"))
    assert env.release_pending() == [Symbol("pending")]
    assert env.find(Symbol("pending")) is None
    assert env.lookup(Symbol("done")) == 1
    env.define(Symbol("pending"), 2)
    assert env.release_pending() == []


def test_strict_policy_rejects_pending_slot(monkeypatch):
    monkeypatch.setenv("KAPPA_UNDEFINED", "error")
    env = Environment()
    env.reserve(Symbol("pending"))
    with pytest.raises(KappaUnboundSymbol):
        env.lookup(Symbol("pending"))
    # child frames inherit the policy
    assert Environment(outer=env).strict_undefined


def test_define_requires_symbol(env):
    with pytest.raises(KappaInvalidSymbol):
        env.define("x", 1)


def test_environment_str(env):
    env.define(Symbol("x"), 1)
    assert str(env) == "{x: Slot(1)}"
    assert str(Environment(outer=env)) == "{} -> ..."
    assert repr(Environment(outer=env)) == "<Environment chain: {} -> {x: Slot(1)}>"
