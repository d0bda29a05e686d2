"""System F: named and indexed syntax, type inference and normalization."""

from sysf.kernel import (
    App,
    Context,
    Lam,
    TApp,
    TArrow,
    TForall,
    TLam,
    TVar,
    TermBinding,
    TermBindingWithTerm,
    TypeBinding,
    Var,
    infer_type,
    normalize,
    shift,
    subst,
    subst_type,
)
from sysf.kernel.errors import SystemFError
from sysf.surface.resolve import (
    from_indexed_term,
    from_indexed_type,
    to_indexed_context,
    to_indexed_term,
    to_indexed_type,
)

__version__ = "0.1.0"

__all__ = [
    "App",
    "Context",
    "Lam",
    "TApp",
    "TArrow",
    "TForall",
    "TLam",
    "TVar",
    "TermBinding",
    "TermBindingWithTerm",
    "TypeBinding",
    "Var",
    "infer_type",
    "normalize",
    "shift",
    "subst",
    "subst_type",
    "SystemFError",
    "from_indexed_term",
    "from_indexed_type",
    "to_indexed_context",
    "to_indexed_term",
    "to_indexed_type",
]
