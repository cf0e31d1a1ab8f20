import pytest

from egg.errors import EggReferenceError
from egg.types import Environment


def test_lookup_walks_outward():
    root = Environment()
    root.define("x", 1)
    child = Environment(outer=root)
    grandchild = Environment(outer=child)
    assert grandchild.lookup("x") == 1
    assert grandchild.find("x") is root


def test_define_shadows_without_touching_parent():
    root = Environment()
    root.define("x", 1)
    child = Environment(outer=root)
    child.define("x", 2)
    assert child.lookup("x") == 2
    assert root.lookup("x") == 1


def test_set_updates_nearest_binding():
    root = Environment()
    root.define("x", 1)
    middle = Environment(outer=root)
    middle.define("x", 2)
    inner = Environment(outer=middle)
    inner.set("x", 3)
    assert middle.vars["x"] == 3
    assert root.vars["x"] == 1
    assert "x" not in inner.vars


def test_set_reaches_global_scope():
    root = Environment()
    root.define("x", 1)
    inner = Environment(outer=Environment(outer=root))
    inner.set("x", 10)
    assert root.lookup("x") == 10


def test_unbound_names_raise():
    env = Environment(outer=Environment())
    with pytest.raises(EggReferenceError, match="Undefined variable: zzz"):
        env.lookup("zzz")
    with pytest.raises(EggReferenceError):
        env.set("zzz", 1)
    assert "zzz" not in env


def test_update_and_chain():
    root = Environment()
    root.update({"a": 1, "b": 2})
    child = Environment(outer=root)
    assert "a" in child
    assert list(child.chain()) == [child, root]


def test_string_forms():
    root = Environment()
    root.define("a", 1)
    child = Environment(outer=root)
    child.define("b", "s")
    assert str(root) == "{a: 1}"
    assert str(child) == "{b: 's'} -> ..."
    assert repr(child) == "<Environment chain: {b: 's'} -> {a: 1}>"
