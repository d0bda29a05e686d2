"""Shifting and substitution over indexed types and terms."""

from __future__ import annotations

from dataclasses import replace
from typing import overload

from .ast import App, Lam, TApp, TArrow, TForall, TLam, TVar, Term, Type, Var


@overload
def shift(node: Type, by: int, cutoff: int = 0) -> Type: ...
@overload
def shift(node: Term, by: int, cutoff: int = 0) -> Term: ...


def shift(node: Type | Term, by: int, cutoff: int = 0) -> Type | Term:
    """Add ``by`` to every free index of ``node`` that is at least ``cutoff``."""

    match node:
        case TVar(k):
            return replace(node, index=k + by) if k >= cutoff else node
        case TArrow(dom, codom):
            return replace(node, dom=shift(dom, by, cutoff), codom=shift(codom, by, cutoff))
        case TForall(body):
            return replace(node, body=shift(body, by, cutoff + 1))
        case Var(k):
            return replace(node, index=k + by) if k >= cutoff else node
        case Lam(param_type, body):
            # The parameter type lives outside the new binder.
            return replace(
                node,
                param_type=shift(param_type, by, cutoff),
                body=shift(body, by, cutoff + 1),
            )
        case App(f, a):
            return replace(node, func=shift(f, by, cutoff), arg=shift(a, by, cutoff))
        case TLam(body):
            return replace(node, body=shift(body, by, cutoff + 1))
        case TApp(f, ty):
            return replace(node, func=shift(f, by, cutoff), arg=shift(ty, by, cutoff))

    raise TypeError(f"Unexpected node in shift: {node!r}")


@overload
def subst(node: Type, sub: Type, j: int = 0) -> Type: ...
@overload
def subst(node: Term, sub: Term, j: int = 0) -> Term: ...


def subst(node: Type | Term, sub: Type | Term, j: int = 0) -> Type | Term:
    """Replace free ``j`` in ``node`` with ``sub``; no other index moves.

    Types are substituted with types and terms with terms.  A term
    substitution leaves embedded types alone since types never mention term
    binders.
    """

    match node:
        case TVar(k):
            return sub if k == j else node
        case TArrow(dom, codom):
            return replace(node, dom=subst(dom, sub, j), codom=subst(codom, sub, j))
        case TForall(body):
            return replace(node, body=subst(body, shift(sub, 1), j + 1))
        case Var(k):
            return sub if k == j else node
        case Lam(_, body):
            return replace(node, body=subst(body, shift(sub, 1), j + 1))
        case App(f, a):
            return replace(node, func=subst(f, sub, j), arg=subst(a, sub, j))
        case TLam(body):
            return replace(node, body=subst(body, shift(sub, 1), j + 1))
        case TApp(f, _):
            return replace(node, func=subst(f, sub, j))

    raise TypeError(f"Unexpected node in subst: {node!r}")


def subst_type(term: Term, ty: Type, j: int = 0) -> Term:
    """Instantiate type variable ``j`` with ``ty`` throughout ``term``."""

    match term:
        case Var(_):
            return term
        case Lam(param_type, body):
            return replace(
                term,
                param_type=subst(param_type, ty, j),
                body=subst_type(body, shift(ty, 1), j + 1),
            )
        case App(f, a):
            return replace(term, func=subst_type(f, ty, j), arg=subst_type(a, ty, j))
        case TLam(body):
            return replace(term, body=subst_type(body, shift(ty, 1), j + 1))
        case TApp(f, arg):
            return replace(term, func=subst_type(f, ty, j), arg=subst(arg, ty, j))

    raise TypeError(f"Unexpected term in subst_type: {term!r}")


def beta(body: Term, arg: Term) -> Term:
    """Contract a term redex whose abstraction body is ``body``."""
    return shift(subst(body, shift(arg, 1)), -1, 1)


def beta_type(body: Term, arg: Type) -> Term:
    """Contract a type redex whose type abstraction body is ``body``."""
    return shift(subst_type(body, shift(arg, 1)), -1, 1)


def instantiate(body: Type, arg: Type) -> Type:
    """Instantiate the bound variable of a ``TForall`` body with ``arg``."""
    return shift(subst(body, shift(arg, 1)), -1, 1)


__all__ = ["shift", "subst", "subst_type", "beta", "beta_type", "instantiate"]
