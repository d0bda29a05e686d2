"""Kernel facade: indexed syntax, context, typing and normalization."""

from sysf.kernel.ast import App, Lam, TApp, TArrow, TForall, TLam, TVar, Term, Type, Var
from sysf.kernel.context import (
    Binding,
    Context,
    TermBinding,
    TermBindingWithTerm,
    TypeBinding,
)
from sysf.kernel.debruijn import shift, subst, subst_type
from sysf.kernel.reduce import normalize
from sysf.kernel.typing import infer_type, type_check

__all__ = [
    "Type",
    "TVar",
    "TArrow",
    "TForall",
    "Term",
    "Var",
    "Lam",
    "App",
    "TLam",
    "TApp",
    "Binding",
    "Context",
    "TypeBinding",
    "TermBinding",
    "TermBindingWithTerm",
    "shift",
    "subst",
    "subst_type",
    "normalize",
    "infer_type",
    "type_check",
]
