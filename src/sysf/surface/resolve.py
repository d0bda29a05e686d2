"""Conversion between named surface syntax and indexed kernel syntax.

Going down (``to_indexed_*``) every name is looked up in a named context
holding ``TypeBinding``/``TermBinding`` records whose payloads are surface
syntax.  A type name only matches type bindings and a term name only matches
term bindings, but the resulting index counts *all* bindings above the match,
since both kinds share one index space.

Going up (``from_indexed_*``) free variables take their names from the given
context and bound variables get fresh names from a ``NameSupply``.  A free
variable whose name is shadowed by a later binding of the same kind is shown
as ``name#k``.
"""

from __future__ import annotations

from sysf.kernel.ast import App, Lam, TApp, TArrow, TForall, TLam, TVar, Term, Type, Var
from sysf.kernel.context import (
    Context,
    TermBinding,
    TermBindingWithTerm,
    TypeBinding,
)

from .errors import UnboundNameError
from .names import NameSupply
from .sast import SApp, SLam, STApp, STArrow, STForall, STLam, STVar, STerm, SType, SVar


# ---- named -> indexed --------------------------------------------------------


def to_indexed_type(ctx: Context, ty: SType) -> Type:
    """Resolve every type variable of ``ty`` against ``ctx``."""

    match ty:
        case STVar(name):
            k = ctx.type_index(name)
            if k is None:
                raise UnboundNameError(
                    f"unbound type variable: {name}", ty.span, name=name, kind="type variable"
                )
            return TVar(k, span=ty.span)
        case STArrow(dom, codom):
            return TArrow(
                to_indexed_type(ctx, dom), to_indexed_type(ctx, codom), span=ty.span
            )
        case STForall(param, body):
            return TForall(
                to_indexed_type(ctx.push(TypeBinding(param)), body), span=ty.span
            )

    raise TypeError(f"Unexpected type in to_indexed_type: {ty!r}")


def to_indexed_term(ctx: Context, term: STerm) -> Term:
    """Resolve every variable of ``term`` against ``ctx``."""

    match term:
        case SVar(name):
            k = ctx.term_index(name)
            if k is None:
                raise UnboundNameError(f"unbound variable: {name}", term.span, name=name)
            return Var(k, span=term.span)
        case SLam(param, param_type, body):
            return Lam(
                to_indexed_type(ctx, param_type),
                to_indexed_term(ctx.push(TermBinding(param_type, name=param)), body),
                span=term.span,
            )
        case SApp(f, a):
            return App(to_indexed_term(ctx, f), to_indexed_term(ctx, a), span=term.span)
        case STLam(param, body):
            return TLam(to_indexed_term(ctx.push(TypeBinding(param)), body), span=term.span)
        case STApp(f, arg):
            return TApp(to_indexed_term(ctx, f), to_indexed_type(ctx, arg), span=term.span)

    raise TypeError(f"Unexpected term in to_indexed_term: {term!r}")


def to_indexed_context(ctx: Context) -> Context:
    """Convert a whole named context, outermost binding first.

    Each binding's type and definition are resolved against the named
    bindings below it, so shadowing later in the session does not change
    what an earlier binding refers to.
    """

    converted: list[TypeBinding | TermBinding] = []
    rest = ctx
    for b in ctx:
        rest = rest.pop()
        match b:
            case TypeBinding(name):
                converted.append(TypeBinding(name))
            case TermBindingWithTerm():
                converted.append(
                    TermBindingWithTerm(
                        to_indexed_type(rest, b.type),
                        to_indexed_term(rest, b.term),
                        name=b.name,
                    )
                )
            case TermBinding():
                converted.append(TermBinding(to_indexed_type(rest, b.type), name=b.name))
            case _:
                raise TypeError(f"Unexpected binding in to_indexed_context: {b!r}")
    return Context.of(*converted)


# ---- indexed -> named --------------------------------------------------------


def _supply_for(ctx: Context) -> NameSupply:
    taken_types = frozenset(b.name for b in ctx if isinstance(b, TypeBinding) and b.name)
    taken_terms = frozenset(b.name for b in ctx if isinstance(b, TermBinding) and b.name)
    return NameSupply(taken_types, taken_terms)


def _type_name(ctx: Context, k: int) -> str:
    name = ctx.type_binding(k).name
    if name is None:
        return f"#{k}"
    # A shadowed binding gets its index appended so it reads differently.
    return name if ctx.type_index(name) == k else f"{name}#{k}"


def _term_name(ctx: Context, k: int) -> str:
    name = ctx.term_binding(k).name
    if name is None:
        return f"#{k}"
    return name if ctx.term_index(name) == k else f"{name}#{k}"


def _from_indexed_type(ctx: Context, names: NameSupply, ty: Type) -> SType:
    match ty:
        case TVar(k):
            return STVar(_type_name(ctx, k), span=ty.span)
        case TArrow(dom, codom):
            dom_s = _from_indexed_type(ctx, names, dom)
            codom_s = _from_indexed_type(ctx, names, codom)
            return STArrow(dom_s, codom_s, span=ty.span)
        case TForall(body):
            param = names.fresh_type()
            body_s = _from_indexed_type(ctx.push(TypeBinding(param)), names, body)
            return STForall(param, body_s, span=ty.span)

    raise TypeError(f"Unexpected type in from_indexed_type: {ty!r}")


def _from_indexed_term(ctx: Context, names: NameSupply, term: Term) -> STerm:
    match term:
        case Var(k):
            return SVar(_term_name(ctx, k), span=term.span)
        case Lam(param_type, body):
            param_type_s = _from_indexed_type(ctx, names, param_type)
            param = names.fresh_term()
            body_s = _from_indexed_term(
                ctx.push(TermBinding(param_type_s, name=param)), names, body
            )
            return SLam(param, param_type_s, body_s, span=term.span)
        case App(f, a):
            f_s = _from_indexed_term(ctx, names, f)
            a_s = _from_indexed_term(ctx, names, a)
            return SApp(f_s, a_s, span=term.span)
        case TLam(body):
            param = names.fresh_type()
            body_s = _from_indexed_term(ctx.push(TypeBinding(param)), names, body)
            return STLam(param, body_s, span=term.span)
        case TApp(f, arg):
            f_s = _from_indexed_term(ctx, names, f)
            arg_s = _from_indexed_type(ctx, names, arg)
            return STApp(f_s, arg_s, span=term.span)

    raise TypeError(f"Unexpected term in from_indexed_term: {term!r}")


def from_indexed_type(ctx: Context, ty: Type) -> SType:
    """Render ``ty`` with free variables named after the bindings of ``ctx``."""
    return _from_indexed_type(ctx, _supply_for(ctx), ty)


def from_indexed_term(ctx: Context, term: Term) -> STerm:
    """Render ``term`` with free variables named after the bindings of ``ctx``."""
    return _from_indexed_term(ctx, _supply_for(ctx), term)


def display_context(ctx: Context) -> Context:
    """Give every unnamed binding of ``ctx`` a fresh, unambiguous name.

    Bindings pushed while inferring a type carry no name; errors raised
    under such binders still need to be printed.
    """

    names = _supply_for(ctx)
    named: list[TypeBinding | TermBinding] = []
    for b in ctx.outermost_first():
        if b.name is not None:
            named.append(b)
        elif isinstance(b, TypeBinding):
            named.append(TypeBinding(names.fresh_type()))
        else:
            named.append(TermBinding(b.type, name=names.fresh_term()))
    return Context.empty().push_all(*named)


__all__ = [
    "to_indexed_type",
    "to_indexed_term",
    "to_indexed_context",
    "from_indexed_type",
    "from_indexed_term",
    "display_context",
]
