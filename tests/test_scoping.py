"""Lexical scoping, closures, and define-vs-let binding semantics."""
import pytest

from lambic.errors import UnboundVariable
from lambic.types import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        # Closures over let bindings are immune to later shadowing.
        ("(let ((x 10)) (let ((f (lambda () x))) (let ((x 20)) (f))))", 10),
        # Parallel let binds y to the pre-let value of x.
        ("(begin (define x 5) (let ((x 10) (y x)) (+ x y)))", 15),
        # Sequential let* binds y to the just-introduced x.
        ("(let* ((x 10) (y x)) (+ x y))", 20),
        # define mutates the enclosing call frame; the closure f observes it.
        ("((lambda (x) (define f (lambda () x)) (define x 20) (f)) 10)", 20),
        # letrec allows mutual recursion.
        ("""(letrec ((even? (lambda (n) (if (= n 0) #t (odd? (- n 1)))))
                     (odd?  (lambda (n) (if (= n 0) #f (even? (- n 1))))))
              (even? 6))""", True),
    ]
)
def test_scoping_properties(run, source, expected):
    assert run(source) == expected


def test_letrec_odd(run):
    source = """
        (letrec ((even? (lambda (n) (if (= n 0) #t (odd? (- n 1)))))
                 (odd?  (lambda (n) (if (= n 0) #f (even? (- n 1))))))
          (odd? 7))
    """
    assert run(source) is True


# -----------------------------------------------------
# let
# -----------------------------------------------------

def test_let_does_not_touch_outer_binding(run, env):
    run("(define x 1)")
    assert run("(let ((x 2)) x)") == 2
    assert env.lookup(Symbol("x")) == 1


def test_let_bindings_cannot_see_siblings(run):
    with pytest.raises(UnboundVariable):
        run("(let ((a 1) (b a)) b)")


def test_let_multiple_body_forms(run):
    assert run("(let ((x 1)) (define y 2) (+ x y))") == 3


def test_let_empty_binding_list(run):
    assert run("(let () 5)") == 5


def test_nested_let_shadowing(run):
    assert run("(let ((x 1)) (+ (let ((x 10)) x) x))") == 11


# -----------------------------------------------------
# let*
# -----------------------------------------------------

def test_let_star_chain(run):
    assert run("(let* ((a 1) (b (+ a 1)) (c (* b 10))) (+ a b c))") == 23


def test_let_star_rebinding_same_name(run):
    assert run("(let* ((x 1) (x (+ x 1))) x)") == 2


def test_let_star_does_not_touch_outer(run, env):
    run("(define x 100)")
    assert run("(let* ((x 1) (y x)) y)") == 1
    assert env.lookup(Symbol("x")) == 100


def test_let_star_closure_sees_earlier_binding(run):
    assert run("(let* ((x 5) (f (lambda () x)) (x 6)) (f))") == 6


# -----------------------------------------------------
# letrec
# -----------------------------------------------------

def test_letrec_self_recursion(run):
    source = """
        (letrec ((fact (lambda (n) (if (= n 0) 1 (* n (fact (- n 1)))))))
          (fact 6))
    """
    assert run(source) == 720


def test_letrec_sequential_plain_values(run):
    assert run("(letrec ((a 1) (b (+ a 1))) b)") == 2


def test_letrec_forward_reference_to_unassigned_fails(run):
    with pytest.raises(UnboundVariable):
        run("(letrec ((a b) (b 1)) a)")


def test_letrec_forward_reference_inside_lambda_is_fine(run):
    assert run("(letrec ((a (lambda () b)) (b 1)) (a))") == 1


def test_letrec_placeholder_shadows_outer_name(run):
    run("(define b 42)")
    with pytest.raises(UnboundVariable):
        run("(letrec ((a b) (b 1)) a)")


def test_letrec_does_not_leak(run):
    run("(letrec ((helper (lambda () 1))) (helper))")
    with pytest.raises(UnboundVariable):
        run("helper")


# -----------------------------------------------------
# define: frame-local redefinition
# -----------------------------------------------------

def test_define_inside_lambda_shadows_global(run, env):
    run("(define x 1)")
    run("(define (f) (define x 2) x)")
    assert run("(f)") == 2
    assert env.lookup(Symbol("x")) == 1


def test_define_inside_let_body_stays_in_let_frame(run, env):
    assert run("(begin (define x 1) (let ((y 2)) (define x 5) x))") == 5
    assert env.lookup(Symbol("x")) == 1


def test_closure_sees_later_global_define(run):
    run("(define (g) y)")
    with pytest.raises(UnboundVariable):
        run("(g)")
    run("(define y 5)")
    assert run("(g)") == 5
    run("(define y 6)")
    assert run("(g)") == 6


def test_redefining_procedure_is_seen_by_callers(run):
    run("(define (helper) 1)")
    run("(define (caller) (helper))")
    assert run("(caller) ") == 1
    run("(define (helper) 2)")
    assert run("(caller)") == 2


def test_each_call_gets_its_own_frame(run):
    run("(define (counter start) (lambda () start))")
    run("(define c1 (counter 1))")
    run("(define c2 (counter 2))")
    assert run("(c1)") == 1
    assert run("(c2)") == 2


def test_parameters_shadow_globals(run, env):
    run("(define x 1)")
    assert run("((lambda (x) (* x 10)) 7)") == 70
    assert env.lookup(Symbol("x")) == 1
