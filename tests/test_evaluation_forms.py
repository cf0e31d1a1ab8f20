import pytest

from egg.errors import EggReferenceError, EggSyntaxError
from egg.evaluation.evaluator import evaluate
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.reader.parser import parse
from egg.types import Environment


def run(source, env):
    return evaluate(parse(source), env)


def test_special_form_table_is_read_only():
    assert set(SPECIAL_FORMS) == {"if", "while", "do", "define", "set", "fun"}
    with pytest.raises(TypeError):
        SPECIAL_FORMS["quote"] = None


# ------------------ if ------------------

def test_if_expression(env):
    assert run("if(true, 1, 2)", env) == 1
    assert run("if(false, 1, 2)", env) == 2


@pytest.mark.parametrize("cond", ["0", '""', "1", '"false"', "fun(1)"])
def test_only_false_is_falsy(env, cond):
    assert run(f"if({cond}, 1, 2)", env) == 1


def test_if_evaluates_one_branch(env):
    assert run("do(if(true, define(a, 1), define(b, 2)), a)", env) == 1
    assert "b" not in env


@pytest.mark.parametrize("source", ["if(true, 1)", "if(true)", "if()", "if(true, 1, 2, 3)"])
def test_if_arity(env, source):
    with pytest.raises(EggSyntaxError):
        run(source, env)


# ------------------ while ------------------

def test_while_loop_sums_to_55(env):
    program = """
    do(define(total, 0),
       define(count, 1),
       while(<(count, 11),
             do(define(total, +(total, count)),
                define(count, +(count, 1)))),
       total)
    """
    assert run(program, env) == 55


def test_while_returns_false(env):
    assert run("while(false, 1)", env) is False
    assert run("do(define(i, 0), while(<(i, 3), define(i, +(i, 1))))", env) is False
    assert env.lookup("i") == 3


@pytest.mark.parametrize("source", ["while(true)", "while()", "while(true, 1, 2)"])
def test_while_arity(env, source):
    with pytest.raises(EggSyntaxError):
        run(source, env)


# ------------------ do ------------------

def test_do_sequencing(env):
    assert run("do(define(a, 10), define(b, 20), +(a, b))", env) == 30


def test_empty_do_is_false(env):
    assert run("do()", env) is False


# ------------------ define ------------------

def test_define_returns_value(env):
    assert run("define(x, 5)", env) == 5
    assert env.vars["x"] == 5


def test_define_overwrites_in_same_scope(env):
    assert run("do(define(x, 1), define(x, 2), x)", env) == 2


def test_define_in_function_shadows_global(global_env):
    env = Environment(outer=global_env)
    program = """
    do(define(x, 1),
       define(f, fun(do(define(x, 99), x))),
       define(inner, f()),
       +(*(inner, 1000), x))
    """
    assert run(program, env) == 99001
    assert env.lookup("x") == 1


@pytest.mark.parametrize("source", ["define(x)", "define(x, 1, 2)", "define(1, 2)", 'define("x", 2)', "define(f(x), 2)"])
def test_define_misuse(env, source):
    with pytest.raises(EggSyntaxError, match="Incorrect use of define"):
        run(source, env)


# ------------------ set ------------------

def test_set_mutates_enclosing_binding(env):
    program = """
    do(define(x, 4),
       define(setx, fun(val, set(x, val))),
       setx(50),
       x)
    """
    assert run(program, env) == 50


def test_set_reaches_global(global_env):
    run("set(true, false)", Environment(outer=global_env))
    assert global_env.lookup("true") is False


def test_set_undefined(env):
    with pytest.raises(EggReferenceError):
        run("set(quux, true)", env)


@pytest.mark.parametrize("source", ["set(x)", "set(1, 2)"])
def test_set_misuse(env, source):
    with pytest.raises(EggSyntaxError):
        run(source, env)


# ------------------ fun ------------------

def test_fun_without_parameters(env):
    assert run("fun(7)()", env) == 7


def test_fun_needs_a_body(env):
    with pytest.raises(EggSyntaxError, match="Functions need a body"):
        run("fun()", env)


@pytest.mark.parametrize("source", ["fun(1, a)", 'fun("a", a)', "fun(a, f(b), a)"])
def test_fun_parameters_must_be_words(env, source):
    with pytest.raises(EggSyntaxError, match="Parameter names must be words"):
        run(source, env)


def test_fun_captures_scope_by_reference(env):
    program = """
    do(define(get, fun(late)),
       define(late, "bound after capture"),
       get())
    """
    assert run(program, env) == "bound after capture"
