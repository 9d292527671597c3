import pytest

from referee.module import Module
from referee.syntax import (
    ExprConstBoolean,
    SpecSteadyState,
    TypeBoolean,
    TypeContext,
    TypeEnum,
    TypeInteger,
    TypeNumber,
    TypeString,
)


@pytest.fixture
def module():
    return Module("test")


def test_builtin_types(module):
    assert module.get_type("boolean") == TypeBoolean()
    assert module.get_type("integer") == TypeInteger()
    assert module.get_type("string") == TypeString()
    assert module.get_type("number") == TypeNumber()
    assert module.type_names == []


def test_time_property_is_predeclared(module):
    assert module.has_data("__time__")
    assert module.get_prop("__time__") == TypeInteger()
    assert module.prop_names == []


def test_add_type_and_lookup(module):
    color = TypeEnum(("red", "green"))
    module.add_type("color", color)
    assert module.has_type("color")
    assert module.get_type("color") is color
    assert module.type_names == ["color"]


def test_duplicate_type_rejected(module):
    with pytest.raises(ValueError):
        module.add_type("boolean", TypeInteger())


def test_props_keep_declaration_order(module):
    module.add_prop("b", TypeBoolean())
    module.add_prop("a", TypeInteger())
    assert module.prop_names == ["b", "a"]
    assert module.get_prop("a") == TypeInteger()


def test_duplicate_prop_rejected(module):
    module.add_prop("x", TypeBoolean())
    with pytest.raises(ValueError):
        module.add_prop("x", TypeBoolean())


def test_conf_is_separate_from_props(module):
    module.add_conf("limit", TypeInteger())
    assert module.has_conf("limit")
    assert not module.has_data("limit")
    assert module.conf_names == ["limit"]
    with pytest.raises(ValueError):
        module.add_conf("limit", TypeNumber())


def test_unknown_lookups_raise(module):
    with pytest.raises(KeyError):
        module.get_type("missing")
    with pytest.raises(KeyError):
        module.get_prop("missing")
    with pytest.raises(KeyError):
        module.get_conf("missing")


def test_context_stack(module):
    assert not module.has_context("s")
    module.push_context("s")
    module.push_context("t")
    assert module.has_context("s") and module.has_context("t")
    module.pop_context()
    assert module.has_context("s")
    assert not module.has_context("t")
    module.pop_context()
    with pytest.raises(IndexError):
        module.pop_context()


def test_exprs_and_specs_are_collected(module):
    e = ExprConstBoolean(True)
    s = SpecSteadyState(e)
    module.add_expr(e)
    module.add_spec(s)
    assert module.exprs == [e]
    assert module.specs == [s]


def test_type_context_uses_module(module):
    module.add_prop("p", TypeBoolean())
    module.add_prop("q", TypeInteger())
    module.add_conf("c", TypeNumber())
    ctx = TypeContext(module)
    assert ctx.member("q") == TypeInteger()
    assert ctx.member("c") == TypeNumber()
    assert ctx.index("q") == 1
    assert ctx.index("c") == 0