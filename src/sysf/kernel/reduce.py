"""Full normalization of indexed terms.

Applications are evaluated eagerly (function and argument first) and
reduction continues under every binder, so the result contains no redex.
Variables bound by a ``TermBindingWithTerm`` are unfolded to their
definitions.  Termination relies on the term having been type checked.
"""

from __future__ import annotations

from .ast import App, Lam, TApp, TLam, Term, Var
from .context import Context, TermBinding, TermBindingWithTerm, TypeBinding
from .debruijn import beta, beta_type, shift


def normalize(term: Term, ctx: Context | None = None) -> Term:
    """Return the normal form of ``term`` under ``ctx``."""

    ctx = ctx or Context.empty()
    match term:
        case Var(k):
            b = ctx.term_binding(k)
            if isinstance(b, TermBindingWithTerm):
                return normalize(shift(b.term, k + 1), ctx)
            return term
        case Lam(param_type, body):
            return Lam(
                param_type,
                normalize(body, ctx.push(TermBinding(param_type))),
                span=term.span,
            )
        case App(f, a):
            f_n = normalize(f, ctx)
            a_n = normalize(a, ctx)
            match f_n:
                case Lam(_, body):
                    return normalize(beta(body, a_n), ctx)
                case _:
                    return App(f_n, a_n, span=term.span)
        case TLam(body):
            return TLam(normalize(body, ctx.push(TypeBinding())), span=term.span)
        case TApp(f, arg):
            f_n = normalize(f, ctx)
            match f_n:
                case TLam(body):
                    return normalize(beta_type(body, arg), ctx)
                case _:
                    return TApp(f_n, arg, span=term.span)

    raise TypeError(f"Unexpected term in normalize: {term!r}")


__all__ = ["normalize"]
