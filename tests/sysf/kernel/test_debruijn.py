import pytest

from sysf.kernel.ast import App, Lam, TApp, TArrow, TForall, TLam, TVar, Var
from sysf.kernel.debruijn import beta, beta_type, instantiate, shift, subst, subst_type


# ------------- Shift -------------


def test_shift_var_at_or_above_cutoff_is_bumped() -> None:
    assert shift(TVar(0), 1) == TVar(1)
    assert shift(Var(2), 3, cutoff=2) == Var(5)


def test_shift_var_below_cutoff_unchanged() -> None:
    assert shift(TVar(0), 2, cutoff=1) == TVar(0)
    assert shift(Var(1), 2, cutoff=2) == Var(1)


def test_shift_lam_param_type_uses_outer_cutoff() -> None:
    # The parameter type is outside the binder, the body is inside.
    assert shift(Lam(TVar(0), Var(1)), 1) == Lam(TVar(1), Var(2))
    assert shift(Lam(TVar(0), Var(0)), 1) == Lam(TVar(1), Var(0))


def test_shift_type_binders_raise_cutoff() -> None:
    assert shift(TForall(TArrow(TVar(0), TVar(1))), 1) == TForall(TArrow(TVar(0), TVar(2)))
    assert shift(TLam(Var(1)), 1) == TLam(Var(2))
    assert shift(TLam(Var(0)), 1) == TLam(Var(0))


def test_shift_tapp_shifts_type_argument() -> None:
    assert shift(TApp(Var(0), TVar(1)), 1) == TApp(Var(1), TVar(2))


def test_shift_negative_pops_binder_levels() -> None:
    assert shift(App(Var(3), Var(1)), -1, cutoff=1) == App(Var(2), Var(0))


_SAMPLES = [
    TArrow(TVar(0), TForall(TArrow(TVar(0), TVar(2)))),
    Lam(TVar(1), App(Var(0), Var(3))),
    TLam(Lam(TVar(0), App(TApp(Var(2), TVar(1)), Var(0)))),
    App(Lam(TForall(TVar(1)), Var(1)), TLam(Var(4))),
]


@pytest.mark.parametrize("node", _SAMPLES)
@pytest.mark.parametrize("cutoff", [0, 1, 3])
def test_shift_by_zero_is_identity(node, cutoff) -> None:
    assert shift(node, 0, cutoff) == node


@pytest.mark.parametrize("node", _SAMPLES)
@pytest.mark.parametrize("cutoff", [0, 1, 2])
def test_shift_composes(node, cutoff) -> None:
    assert shift(shift(node, 2, cutoff), 3, cutoff) == shift(node, 5, cutoff)


# ------------- Substitution -------------


def test_subst_replaces_matching_index_only() -> None:
    assert subst(TVar(0), TVar(5)) == TVar(5)
    # No decrement: substitution leaves other indices where they are.
    assert subst(TVar(1), TVar(5)) == TVar(1)
    assert subst(App(Var(0), Var(2)), Var(7), 2) == App(Var(0), Var(7))


def test_subst_under_binder_shifts_replacement() -> None:
    assert subst(TForall(TVar(1)), TVar(0)) == TForall(TVar(1))
    assert subst(Lam(TVar(0), Var(1)), Var(3)) == Lam(TVar(0), Var(4))
    assert subst(TLam(Var(1)), Var(0)) == TLam(Var(1))


def test_term_subst_leaves_types_alone() -> None:
    term = Lam(TVar(0), TApp(Var(1), TVar(1)))
    assert subst(term, Var(9)) == Lam(TVar(0), TApp(Var(10), TVar(1)))


@pytest.mark.parametrize(
    "node, sub, j",
    [
        (TLam(Var(2)), Var(0), 1),
        (Lam(TVar(0), App(Var(0), Var(2))), Var(1), 1),
        (App(Var(0), TLam(Lam(TVar(0), Var(2)))), Var(3), 0),
        (TForall(TArrow(TVar(0), TVar(1))), TVar(2), 0),
        (TArrow(TVar(1), TForall(TVar(2))), TForall(TVar(1)), 1),
    ],
)
def test_subst_commutes_with_shift(node, sub, j) -> None:
    lhs = shift(subst(node, sub, j), 1)
    rhs = subst(shift(node, 1), shift(sub, 1), j + 1)
    assert lhs == rhs


def test_subst_type_reaches_param_types_and_type_args() -> None:
    term = Lam(TVar(0), TApp(Var(0), TVar(1)))
    # Under the Lam the target index becomes 1.
    assert subst_type(term, TVar(4)) == Lam(TVar(4), TApp(Var(0), TVar(5)))


# ------------- Contraction helpers -------------


def test_beta_substitutes_and_pops() -> None:
    # (fun x. x) y with y at 0 in the outer scope
    assert beta(Var(0), Var(0)) == Var(0)
    # (fun x. z) y: z was 1 under the binder, 0 outside
    assert beta(Var(1), Var(5)) == Var(0)


def test_beta_type_instantiates_term_body() -> None:
    assert beta_type(Lam(TVar(0), Var(0)), TVar(0)) == Lam(TVar(0), Var(0))


def test_instantiate_forall_body() -> None:
    body = TArrow(TVar(0), TVar(1))
    assert instantiate(body, TVar(3)) == TArrow(TVar(3), TVar(0))
