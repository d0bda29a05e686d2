"""Type inference for indexed System F terms."""

from __future__ import annotations

from .ast import App, Lam, TApp, TArrow, TForall, TLam, Term, Type, Var
from .context import Context, TermBinding, TypeBinding
from .debruijn import instantiate, shift
from .errors import NotAFunctionError, NotAUniversalError, TypeMismatchError


def infer_type(term: Term, ctx: Context | None = None) -> Type:
    """Infer the type of ``term`` under the indexed context ``ctx``."""

    ctx = ctx or Context.empty()
    match term:
        case Var(k):
            # The binding's type is scoped k + 1 entries further out.
            return shift(ctx.term_binding(k).type, k + 1)
        case Lam(param_type, body):
            body_ty = infer_type(body, ctx.push(TermBinding(param_type)))
            return TArrow(param_type, shift(body_ty, -1, 1), span=term.span)
        case App(f, a):
            f_ty = infer_type(f, ctx)
            a_ty = infer_type(a, ctx)
            if not isinstance(f_ty, TArrow):
                raise NotAFunctionError(
                    "applied term is not a function",
                    f.span,
                    actual=f_ty,
                    context=ctx,
                )
            if f_ty.dom != a_ty:
                raise TypeMismatchError(
                    "argument type does not match",
                    a.span,
                    actual=a_ty,
                    expected=f_ty.dom,
                    context=ctx,
                )
            return f_ty.codom
        case TLam(body):
            body_ty = infer_type(body, ctx.push(TypeBinding()))
            return TForall(body_ty, span=term.span)
        case TApp(f, arg):
            f_ty = infer_type(f, ctx)
            if not isinstance(f_ty, TForall):
                raise NotAUniversalError(
                    "instantiated term is not polymorphic",
                    f.span,
                    actual=f_ty,
                    context=ctx,
                )
            return instantiate(f_ty.body, arg)

    raise TypeError(f"Unexpected term in infer_type: {term!r}")


def type_check(term: Term, ty: Type, ctx: Context | None = None) -> None:
    """Check that ``term`` has type ``ty`` under ``ctx``, raising on mismatch."""

    actual = infer_type(term, ctx)
    if actual != ty:
        raise TypeMismatchError(
            "type does not match",
            term.span,
            actual=actual,
            expected=ty,
            context=ctx or Context.empty(),
        )


__all__ = ["infer_type", "type_check"]
