"""Pretty-printing for named types and terms."""

from __future__ import annotations

from .sast import SApp, SLam, STApp, STArrow, STForall, STLam, STVar, STerm, SType, SVar


def _is_head(term: STerm) -> bool:
    return isinstance(term, (SVar, SApp, STApp))


def pretty_type(ty: SType) -> str:
    match ty:
        case STVar(name):
            return name
        case STArrow(dom, codom):
            dom_text = pretty_type(dom) if isinstance(dom, STVar) else f"({pretty_type(dom)})"
            return f"{dom_text} -> {pretty_type(codom)}"
        case STForall(param, body):
            return f"forall {param}. {pretty_type(body)}"

    raise TypeError(f"Cannot pretty-print unknown type: {ty!r}")


def pretty_term(term: STerm) -> str:
    match term:
        case SVar(name):
            return name
        case SLam(param, param_type, body):
            return f"fun {param}: {pretty_type(param_type)}. {pretty_term(body)}"
        case STLam(param, body):
            return f"fun2 {param}. {pretty_term(body)}"
        case SApp(f, a):
            f_text = pretty_term(f) if _is_head(f) else f"({pretty_term(f)})"
            a_text = pretty_term(a) if isinstance(a, SVar) else f"({pretty_term(a)})"
            return f"{f_text} {a_text}"
        case STApp(f, ty):
            f_text = pretty_term(f) if _is_head(f) else f"({pretty_term(f)})"
            return f"{f_text} [{pretty_type(ty)}]"

    raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


def pretty(node: SType | STerm) -> str:
    """Return a human-friendly string for a type or a term."""
    if isinstance(node, (STVar, STArrow, STForall)):
        return pretty_type(node)
    return pretty_term(node)


__all__ = ["pretty", "pretty_type", "pretty_term"]
