import pytest

from sysf.kernel.ast import App, Lam, TArrow, TForall, TLam, TVar, Var
from sysf.kernel.context import Context, TermBinding, TermBindingWithTerm, TypeBinding
from sysf.kernel.typing import infer_type
from sysf.surface.errors import UnboundNameError
from sysf.surface.parse import parse_term
from sysf.surface.resolve import (
    display_context,
    from_indexed_term,
    from_indexed_type,
    to_indexed_context,
    to_indexed_term,
    to_indexed_type,
)
from sysf.surface.sast import SLam, STLam, STVar, SVar

# Named context [x : A, A]
X_A = Context.empty().push(TypeBinding("A")).push(TermBinding(STVar("A"), name="x"))


def test_free_names_come_from_context() -> None:
    assert to_indexed_term(X_A, SVar("x")) == Var(0)
    assert to_indexed_type(X_A, STVar("A")) == TVar(1)


def test_binders_shift_free_names() -> None:
    assert to_indexed_term(X_A, SLam("y", STVar("A"), SVar("x"))) == Lam(TVar(1), Var(1))
    assert to_indexed_term(X_A, STLam("X", SVar("x"))) == TLam(Var(1))


def test_lookup_is_filtered_by_kind() -> None:
    ctx = Context.empty().push(TypeBinding("x")).push(TermBinding(STVar("x"), name="x"))
    assert to_indexed_type(ctx, STVar("x")) == TVar(1)
    assert to_indexed_term(ctx, SVar("x")) == Var(0)


def test_shadowing_picks_latest_binding() -> None:
    ctx = Context.empty().push_all(
        TypeBinding("A"),
        TypeBinding("B"),
        TermBinding(STVar("A"), name="x"),
        TermBinding(STVar("B"), name="x"),
    )
    ix = to_indexed_context(ctx)

    assert to_indexed_term(ctx, SVar("x")) == Var(0)
    ty = infer_type(Var(0), ix)
    assert ty == TVar(2)
    assert from_indexed_type(ctx, ty) == STVar("B")


def test_unbound_names() -> None:
    with pytest.raises(UnboundNameError, match="unbound variable: y") as info:
        to_indexed_term(X_A, SVar("y"))
    assert info.value.name == "y"
    with pytest.raises(UnboundNameError, match="unbound type variable: B"):
        to_indexed_type(X_A, STVar("B"))
    # A type name does not resolve as a term.
    with pytest.raises(UnboundNameError):
        to_indexed_term(X_A, SVar("A"))


def test_indexed_context_resolves_against_tail() -> None:
    ctx = X_A.push(TermBindingWithTerm(STVar("A"), SVar("x"), name="y"))
    ix = to_indexed_context(ctx)

    assert ix == Context.of(
        TermBindingWithTerm(TVar(1), Var(0), name="y"),
        TermBinding(TVar(0), name="x"),
        TypeBinding("A"),
    )


def test_regenerated_binders_are_named_in_order() -> None:
    term = Lam(TForall(TVar(0)), TLam(Var(1)))
    assert str(from_indexed_term(Context.empty(), term)) == "fun a: forall A. A. fun2 B. a"
    poly_id = TLam(Lam(TVar(0), Var(0)))
    assert str(from_indexed_term(Context.empty(), poly_id)) == "fun2 A. fun a: A. a"


def test_regenerated_binders_avoid_free_names() -> None:
    ctx = Context.empty().push(TypeBinding("A"))
    ty = TForall(TArrow(TVar(0), TVar(1)))
    assert str(from_indexed_type(ctx, ty)) == "forall B. B -> A"
    assert str(from_indexed_term(X_A, Lam(TVar(1), App(Var(1), Var(0))))) == "fun a: A. x a"


@pytest.mark.parametrize(
    "source",
    [
        "fun x: A. x",
        "fun2 A. fun a: A. a",
        "fun2 X, Y. fun a: X, b: Y. a",
        "fun f: A -> A, a: A. f (f a)",
        "fun2 B. fun k: forall C. C -> B. k [A -> B]",
        "fun y: A. x",
    ],
)
def test_round_trip_is_alpha_equivalent(source) -> None:
    indexed = to_indexed_term(X_A, parse_term(source))
    named = from_indexed_term(X_A, indexed)
    assert to_indexed_term(X_A, named) == indexed


def test_display_context_names_anonymous_bindings() -> None:
    ix = Context.of(TermBinding(TVar(1)), TypeBinding(), TypeBinding("A"))
    named = display_context(ix)

    assert named.names() == ("a", "B", "A")
    assert from_indexed_type(named, TVar(1)) == STVar("B")


def test_shadowed_free_names_carry_their_index() -> None:
    ctx = Context.empty().push_all(
        TypeBinding("A"), TermBinding(STVar("A"), name="x"), TypeBinding("A")
    )

    assert str(from_indexed_type(ctx, TArrow(TVar(0), TVar(2)))) == "A -> A#2"
    assert str(from_indexed_term(ctx, Var(1))) == "x"
    shadowed = ctx.push(TermBinding(STVar("A"), name="x"))
    assert str(from_indexed_term(shadowed, Var(2))) == "x#2"
