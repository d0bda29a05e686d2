"""Errors raised while reading or resolving surface syntax."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from sysf.kernel.errors import SystemFError


@dataclass
class ParseError(SystemFError):
    label: ClassVar[str] = "ParseError"

    source: str | None = None

    def __str__(self) -> str:
        text = super().__str__()
        if self.source is None or self.span is None:
            return text
        snippet = self.span.extract(self.source)
        return f"{text}: {snippet!r}" if snippet else text


@dataclass
class UnboundNameError(SystemFError):
    """A name has no binding of the right kind in scope."""

    label: ClassVar[str] = "ReferenceError"

    name: str = ""
    kind: str = "variable"


__all__ = ["ParseError", "UnboundNameError"]
