"""Top-level statements as produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from sysf.common.span import Span

from .sast import STerm, SType


def _span() -> Span | None:
    return field(default=None, compare=False, kw_only=True, repr=False)  # type: ignore[return-value]


@dataclass(frozen=True)
class SVariable:
    """``Variable X``: assume a type variable."""

    name: str
    span: Span | None = _span()


@dataclass(frozen=True)
class SAxiom:
    """``Axiom x : T``: assume a term constant."""

    name: str
    type: SType
    span: Span | None = _span()


@dataclass(frozen=True)
class STheorem:
    """``Theorem x : T = t``: define a constant against a declared type."""

    name: str
    type: SType
    term: STerm
    span: Span | None = _span()


@dataclass(frozen=True)
class SDefine:
    name: str
    term: STerm
    span: Span | None = _span()


@dataclass(frozen=True)
class SReduce:
    term: STerm
    span: Span | None = _span()


@dataclass(frozen=True)
class SPrint:
    name: str
    span: Span | None = _span()


@dataclass(frozen=True)
class SClear:
    span: Span | None = _span()


type SStatement = SVariable | SAxiom | STheorem | SDefine | SReduce | SPrint | SClear


__all__ = [
    "SStatement",
    "SVariable",
    "SAxiom",
    "STheorem",
    "SDefine",
    "SReduce",
    "SPrint",
    "SClear",
]
