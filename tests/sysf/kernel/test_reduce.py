import pytest

from sysf.kernel.ast import App, Lam, TApp, TArrow, TLam, TVar, Var
from sysf.kernel.context import Context, TermBinding, TermBindingWithTerm, TypeBinding
from sysf.kernel.reduce import normalize
from sysf.kernel.typing import infer_type

ID_A = Lam(TVar(0), Var(0))

# [y : A, A]
Y_A = Context.of(TermBinding(TVar(0), name="y"), TypeBinding("A"))

# [y : A, id := fun x: A. x, A]
WITH_ID = Context.of(
    TermBinding(TVar(1), name="y"),
    TermBindingWithTerm(TArrow(TVar(0), TVar(0)), ID_A, name="id"),
    TypeBinding("A"),
)


def test_free_assumption_is_normal() -> None:
    assert normalize(Var(0), Y_A) == Var(0)


def test_beta_redex() -> None:
    assert normalize(App(Lam(TVar(1), Var(0)), Var(0)), Y_A) == Var(0)


def test_definition_is_unfolded() -> None:
    ctx = Context.of(TermBindingWithTerm(TArrow(TVar(0), TVar(0)), ID_A, name="id"), TypeBinding("A"))
    assert normalize(Var(0), ctx) == Lam(TVar(1), Var(0))


def test_unfolded_definition_is_applied() -> None:
    assert normalize(App(Var(1), Var(0)), WITH_ID) == Var(0)


def test_type_beta() -> None:
    poly_id = TLam(Lam(TVar(0), Var(0)))
    ctx = Context.of(TypeBinding("A"))
    assert normalize(TApp(poly_id, TVar(0)), ctx) == Lam(TVar(0), Var(0))


def test_reduces_under_binders() -> None:
    term = Lam(TVar(0), App(Lam(TVar(1), Var(0)), Var(0)))
    assert normalize(term, Context.of(TypeBinding("A"))) == Lam(TVar(0), Var(0))


def test_stuck_application_keeps_shape() -> None:
    # [f : A -> A, y : A, A]
    ctx = Y_A.push(TermBinding(TArrow(TVar(1), TVar(1)), name="f"))
    term = App(Var(0), App(Lam(TVar(2), Var(0)), Var(1)))
    assert normalize(term, ctx) == App(Var(0), Var(1))


@pytest.mark.parametrize(
    "term",
    [
        App(Var(1), Var(0)),
        App(Lam(TArrow(TVar(2), TVar(2)), App(Var(0), Var(1))), Var(1)),
        TApp(TLam(Lam(TVar(0), Var(0))), TArrow(TVar(2), TVar(2))),
        App(TApp(TLam(Lam(TVar(0), Var(0))), TVar(2)), App(Var(1), Var(0))),
        TLam(Lam(TVar(0), App(Var(3), Var(2)))),
    ],
)
def test_normalization_preserves_type(term) -> None:
    expected = infer_type(term, WITH_ID)
    assert infer_type(normalize(term, WITH_ID), WITH_ID) == expected
