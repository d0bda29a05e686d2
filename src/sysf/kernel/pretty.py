"""Index-level rendering of kernel nodes.

Variables print as ``#k``.  This is what ``str()`` of a kernel node shows;
user-facing output goes through ``sysf.surface.resolve`` to get names back.
"""

from __future__ import annotations

from .ast import App, Lam, TApp, TArrow, TForall, TLam, TVar, Term, Type, Var


def pretty(node: Type | Term) -> str:
    match node:
        case TVar(k) | Var(k):
            return f"#{k}"
        case TArrow(dom, codom):
            dom_text = pretty(dom) if isinstance(dom, TVar) else f"({pretty(dom)})"
            return f"{dom_text} -> {pretty(codom)}"
        case TForall(body):
            return f"forall. {pretty(body)}"
        case Lam(param_type, body):
            return f"fun: {pretty(param_type)}. {pretty(body)}"
        case TLam(body):
            return f"fun2. {pretty(body)}"
        case App(f, a):
            f_text = pretty(f) if isinstance(f, (Var, App, TApp)) else f"({pretty(f)})"
            a_text = pretty(a) if isinstance(a, Var) else f"({pretty(a)})"
            return f"{f_text} {a_text}"
        case TApp(f, ty):
            f_text = pretty(f) if isinstance(f, (Var, App, TApp)) else f"({pretty(f)})"
            return f"{f_text} [{pretty(ty)}]"

    raise TypeError(f"Cannot pretty-print unknown node: {node!r}")
