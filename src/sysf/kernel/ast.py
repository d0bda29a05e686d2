"""Indexed abstract syntax for System F types and terms.

Variables are de Bruijn indices counted from the innermost enclosing binder.
Type binders and term binders share a single index space: a ``TLam`` inside a
term shifts the indices of term variables just like a ``Lam`` does, and vice
versa for types mentioned inside a ``Lam``.

Spans are carried for diagnostics only and never take part in equality, so
``==`` on these nodes is alpha-equivalence.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sysf.common.span import Span


def _span() -> Span | None:
    return field(default=None, compare=False, kw_only=True, repr=False)  # type: ignore[return-value]


class _Node:
    def __str__(self) -> str:
        from sysf.kernel.pretty import pretty

        return pretty(self)  # type: ignore[arg-type]


# --- Types --------------------------------------------------------------------


@dataclass(frozen=True)
class TVar(_Node):
    """Type variable pointing to the binder at ``index``."""

    index: int
    span: Span | None = _span()

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("De Bruijn indices must be non-negative")


@dataclass(frozen=True)
class TArrow(_Node):
    """Function type ``dom -> codom``."""

    dom: Type
    codom: Type
    span: Span | None = _span()


@dataclass(frozen=True)
class TForall(_Node):
    """Universal type; ``body`` sees the bound type variable at index 0."""

    body: Type
    span: Span | None = _span()


type Type = TVar | TArrow | TForall


# --- Terms --------------------------------------------------------------------


@dataclass(frozen=True)
class Var(_Node):
    """Term variable pointing to the binder at ``index``."""

    index: int
    span: Span | None = _span()

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("De Bruijn indices must be non-negative")


@dataclass(frozen=True)
class Lam(_Node):
    """Term abstraction.

    Args:
        param_type: Type of the parameter, scoped *outside* the new binder.
        body: Term with the parameter in scope at index 0.
    """

    param_type: Type
    body: Term
    span: Span | None = _span()


@dataclass(frozen=True)
class App(_Node):
    """Term application."""

    func: Term
    arg: Term
    span: Span | None = _span()


@dataclass(frozen=True)
class TLam(_Node):
    """Type abstraction; ``body`` sees the bound type variable at index 0."""

    body: Term
    span: Span | None = _span()


@dataclass(frozen=True)
class TApp(_Node):
    """Type application (instantiation of a polymorphic term)."""

    func: Term
    arg: Type
    span: Span | None = _span()


type Term = Var | Lam | App | TLam | TApp


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
]
