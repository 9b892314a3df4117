import pytest

from lisper.errors import (
    LisperDuplicateArgument,
    LisperSyntaxError,
    LisperUndefinedPrimitive,
    LisperUndefinedVariable,
    LisperUnspecifiedReturn,
)
from lisper.types.bind import duplicates
from lisper.types.closure import Closure
from lisper.types.nil import Nil
from lisper.types.symbol import Symbol

S = Symbol


# ------------------ quote ------------------

def test_quote(value_of):
    assert value_of("'(1 2 3)") == [1, 2, 3]
    assert value_of("(quote a)") == S("a")
    assert value_of("'(+ 1 2)") == [S("+"), 1, 2]


def test_quote_with_extra_operands_is_a_call(value_of):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of("(quote a b)")
    assert exc.value.name == "quote"


# ------------------ let ------------------

def test_let_binds_for_body(value_of):
    assert value_of("(let ((x 1) (y 2)) (+ x y))") == 3


def test_let_evaluates_all_values_before_binding(value_of):
    assert value_of("(define x 10) (let ((x 1) (y x)) y)") == 10


def test_let_body_definitions_do_not_escape(run):
    value, env = run("(define x 1) (let ((y 0)) (define x 2) x)")
    assert value == 2
    assert env.lookup(S("x")) == 1


def test_let_does_not_change_outer_binding(value_of):
    assert value_of("(define x 1) (let ((x 1)) (define x 2) x) x") == 1


def test_let_with_empty_body_is_nil(value_of):
    assert value_of("(let ((x 1)))") is Nil


@pytest.mark.parametrize("source", ["(let x 1)", "(let ((1 2)) 3)", "(let ((x)) x)", "(let (x) x)"])
def test_let_malformed_bindings(value_of, source):
    with pytest.raises(LisperSyntaxError):
        value_of(source)


def test_let_without_bindings_is_a_call(value_of):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of("(let)")
    assert exc.value.name == "let"


# ------------------ cond ------------------

def test_cond_falls_through_to_else(value_of):
    assert value_of('(cond (#f "a") (else "b"))') == "b"


def test_cond_with_no_clauses_is_nil(value_of):
    assert value_of("(cond)") is Nil


def test_cond_first_truthy_clause_wins(value_of):
    assert value_of('(cond ((eq 1 2) "one") ((eq 1 1) "two") (else "three"))') == "two"


def test_cond_no_match_is_nil(value_of):
    assert value_of('(cond (#f "a") ((eq 1 2) "b"))') is Nil


def test_cond_nil_is_falsy(value_of):
    assert value_of("(define n (cond)) (cond (n 1) (else 2))") == 2


@pytest.mark.parametrize("test_expr", ["0", '""', "'()"])
def test_cond_other_values_are_truthy(value_of, test_expr):
    assert value_of(f"(cond ({test_expr} 1) (else 2))") == 1


def test_cond_rejects_malformed_clause(value_of):
    with pytest.raises(LisperSyntaxError):
        value_of("(cond (1 2 3))")
    with pytest.raises(LisperSyntaxError):
        value_of("(cond (#f 1) 5)")


def test_cond_only_checks_clauses_it_reaches(value_of):
    assert value_of("(cond (else 1) (bad))") == 1


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", 1),
        ("(if #f 1 2)", 2),
        ("(if 0 1 2)", 1),
        ("(if '() 1 2)", 1),
        ("(define n (cond)) (if n 1 2)", 2),
        ("(if (eq 1 1) 5)", 5),
    ],
)
def test_if(value_of, source, expected):
    assert value_of(source) == expected


def test_if_only_evaluates_taken_branch(value_of):
    assert value_of("(if #t 1 (no-such-function))") == 1
    assert value_of("(if #f (no-such-function) 2)") == 2


def test_one_armed_if_with_falsy_predicate_fails(value_of):
    with pytest.raises(LisperUnspecifiedReturn):
        value_of("(if (eq 1 2) 5)")


@pytest.mark.parametrize("source", ["(if)", "(if #t)", "(if #t 1 2 3)"])
def test_if_wrong_shape_is_a_call(value_of, source):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of(source)
    assert exc.value.name == "if"


# ------------------ set! ------------------

def test_set_requires_existing_binding(value_of):
    with pytest.raises(LisperUndefinedVariable) as exc:
        value_of("(set! y 1)")
    assert exc.value.name == "y"


def test_set_checks_binding_before_evaluating_value(value_of):
    with pytest.raises(LisperUndefinedVariable):
        value_of("(set! y (no-such-function))")


def test_set_shadows_and_returns_nil(run):
    value, env = run("(define x 1) (set! x 2)")
    assert value is Nil
    assert env.lookup(S("x")) == 2
    assert [v for k, v in env if k == S("x")] == [2, 1]


def test_set_inside_function_is_local(value_of):
    assert value_of("(define x 1) (define (f) (set! x 5) x) (list (f) x)") == [5, 1]


@pytest.mark.parametrize("source", ["(define x 1) (set! x)", "(set! 1 2)", "(set! x 1 2)"])
def test_set_wrong_shape_is_a_call(value_of, source):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of(source)
    assert exc.value.name == "set!"


# ------------------ define ------------------

def test_define_returns_value(value_of):
    assert value_of("(define x 5)") == 5


def test_redefinition_shadows(run):
    value, env = run("(define x 1) (define x 2) x")
    assert value == 2
    assert len(env) == 2


def test_define_function_returns_named_closure(value_of):
    fn = value_of("(define (square x) (* x x))")
    assert isinstance(fn, Closure)
    assert fn.name == S("square")
    assert fn.formals == [S("x")]
    assert fn.env.lookup(S("square")) is fn


def test_define_function_recursion(value_of):
    source = """
        (define (countdown n)
          (if (eq n 0) "done" (countdown (- n 1))))
        (countdown 10)
    """
    assert value_of(source) == "done"


def test_define_function_factorial(value_of):
    source = "(define (fact n) (if (= n 0) 1 (* n (fact (- n 1))))) (fact 10)"
    assert value_of(source) == 3628800


def test_closure_sees_environment_as_defined(value_of):
    assert value_of("(define x 1) (define (get) x) (define x 2) (get)") == 1


def test_function_cannot_see_later_definitions(value_of):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of("(define (f) (g)) (define (g) 1) (f)")
    assert exc.value.name == "g"


def test_later_function_sees_earlier_one(value_of):
    assert value_of("(define (g) 1) (define (f) (+ (g) 1)) (f)") == 2


def test_define_function_with_empty_body(value_of):
    assert value_of("(define (f)) (f)") is Nil


def test_define_duplicate_arguments(value_of):
    with pytest.raises(LisperDuplicateArgument) as exc:
        value_of("(define (f a b a) a)")
    assert exc.value.names == ["a"]


@pytest.mark.parametrize(
    "source", ["(define)", "(define x)", "(define x 1 2)", "(define 5 1)", "(define () 1)", "(define (5 x) x)"]
)
def test_define_wrong_shape_is_a_call(value_of, source):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of(source)
    assert exc.value.name == "define"


# ------------------ lambda ------------------

def test_lambda_application(value_of):
    assert value_of("((lambda (x y) (+ x y)) 1 2)") == 3


def test_lambda_captures_enclosing_scope(value_of):
    source = """
        (define make-adder (lambda (n) (lambda (x) (+ x n))))
        ((make-adder 3) 4)
    """
    assert value_of(source) == 7


def test_lambda_body_is_a_sequence(value_of):
    assert value_of("((lambda (x) (define y (* x 2)) (+ y 1)) 5)") == 11


def test_lambda_empty_body(value_of):
    assert value_of("((lambda ()))") is Nil


def test_lambda_duplicate_arguments(value_of):
    with pytest.raises(LisperDuplicateArgument) as exc:
        value_of("(lambda (x y x y) x)")
    assert exc.value.names == ["x", "y"]


def test_variadic_lambda_binds_argument_expressions(value_of):
    assert value_of("((lambda args args) 1 (+ 1 1))") == [1, [S("+"), 1, 1]]


def test_variadic_lambda_strict_mode(value_of):
    assert value_of("((lambda args args) 1 (+ 1 1))", strict_variadic=True) == [1, 2]


def test_variadic_lambda_with_no_arguments(value_of):
    assert value_of("((lambda args args))") == []


@pytest.mark.parametrize("source", ["(lambda)", "(lambda 5 1)", "(lambda \"x\" 1)"])
def test_lambda_wrong_shape_is_a_call(value_of, source):
    with pytest.raises(LisperUndefinedPrimitive) as exc:
        value_of(source)
    assert exc.value.name == "lambda"


def test_lambda_literal_formals_are_distinct_by_type():
    assert duplicates([1, True]) == []
    assert duplicates([S("x"), 1, S("x"), 1]) == [S("x"), 1]


def test_lambda_formals_one_and_true_are_not_duplicates(value_of):
    assert isinstance(value_of("(lambda (1 #t) 1)"), Closure)
    with pytest.raises(LisperSyntaxError):
        value_of("((lambda (1 #t) 1) 2 3)")
    with pytest.raises(LisperDuplicateArgument):
        value_of("(lambda (x x) x)")


# ------------------ reserved words as names ------------------

@pytest.mark.parametrize("name", ["quote", "if", "let", "cond", "set!", "define", "lambda"])
def test_reserved_word_outside_head_is_a_variable(value_of, name):
    with pytest.raises(LisperUndefinedVariable) as exc:
        value_of(name)
    assert exc.value.name == name


def test_define_binds_reserved_word(value_of):
    assert value_of("(define if 1) if") == 1


def test_let_binds_reserved_word(value_of):
    assert value_of("(let ((quote 2)) quote)") == 2


def test_set_rebinds_reserved_word(value_of):
    assert value_of("(define cond 1) (set! cond 2) cond") == 2


def test_reserved_word_as_formal(value_of):
    assert value_of("((lambda (if) (+ if 1)) 4)") == 5
    assert value_of("((lambda lambda lambda) 1 2)") == [1, 2]


def test_reserved_head_still_a_special_form_when_bound(value_of):
    assert value_of("(define if 0) (if #f 1 2)") == 2


def test_misshapen_form_applies_bound_head(value_of):
    assert value_of("(define (if) 42) (if)") == 42
    assert value_of("(define (quote a b) (+ a b)) (quote 1 2)") == 3
