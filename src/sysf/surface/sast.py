"""Named surface syntax produced by the parser and by the bridge."""

from __future__ import annotations

from dataclasses import dataclass, field

from sysf.common.span import Span


def _span() -> Span | None:
    return field(default=None, compare=False, kw_only=True, repr=False)  # type: ignore[return-value]


class _Surface:
    def __str__(self) -> str:
        from sysf.surface.pretty import pretty

        return pretty(self)  # type: ignore[arg-type]


# --- Types --------------------------------------------------------------------


@dataclass(frozen=True)
class STVar(_Surface):
    name: str
    span: Span | None = _span()


@dataclass(frozen=True)
class STArrow(_Surface):
    dom: SType
    codom: SType
    span: Span | None = _span()


@dataclass(frozen=True)
class STForall(_Surface):
    param: str
    body: SType
    span: Span | None = _span()


type SType = STVar | STArrow | STForall


# --- Terms --------------------------------------------------------------------


@dataclass(frozen=True)
class SVar(_Surface):
    name: str
    span: Span | None = _span()


@dataclass(frozen=True)
class SLam(_Surface):
    param: str
    param_type: SType
    body: STerm
    span: Span | None = _span()


@dataclass(frozen=True)
class SApp(_Surface):
    func: STerm
    arg: STerm
    span: Span | None = _span()


@dataclass(frozen=True)
class STLam(_Surface):
    param: str
    body: STerm
    span: Span | None = _span()


@dataclass(frozen=True)
class STApp(_Surface):
    func: STerm
    arg: SType
    span: Span | None = _span()


type STerm = SVar | SLam | SApp | STLam | STApp


__all__ = [
    "SType",
    "STVar",
    "STArrow",
    "STForall",
    "STerm",
    "SVar",
    "SLam",
    "SApp",
    "STLam",
    "STApp",
]
