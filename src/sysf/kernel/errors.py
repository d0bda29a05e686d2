"""Error hierarchy for the System F engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from sysf.common.span import Span

if TYPE_CHECKING:
    from sysf.kernel.ast import Type
    from sysf.kernel.context import Context


@dataclass
class SystemFError(Exception):
    """Base class for every failure a statement can report."""

    label: ClassVar[str] = "Error"

    message: str
    span: Span | None = None

    def __str__(self) -> str:
        if self.span is None:
            return f"{self.label}: {self.message}"
        return f"{self.label} at {self.span}: {self.message}"


@dataclass
class KernelError(SystemFError):
    """Invariant violation inside the indexed representation.

    These point at a bookkeeping bug rather than at user input; a correct
    bridge never produces them.
    """

    label: ClassVar[str] = "InternalError"


@dataclass
class IndexOutOfRangeError(KernelError, IndexError):
    index: int = -1


@dataclass
class InconsistentBindingError(KernelError):
    index: int = -1


@dataclass
class TypingError(SystemFError, TypeError):
    """A term failed to type check.

    ``expected`` and ``actual`` are indexed types valid in ``context``.  When
    only the shape of the expected type is known, ``expected`` is ``None`` and
    ``shape`` describes it.
    """

    label: ClassVar[str] = "TypeError"
    shape: ClassVar[str] = "?"

    actual: Type | None = None
    expected: Type | None = None
    context: Context | None = None


@dataclass
class TypeMismatchError(TypingError):
    pass


@dataclass
class NotAFunctionError(TypingError):
    shape: ClassVar[str] = "? -> ?"


@dataclass
class NotAUniversalError(TypingError):
    shape: ClassVar[str] = "forall ?. ?"


@dataclass
class SelfCheckError(TypingError):
    """The normal form of a term no longer has the term's type."""

    label: ClassVar[str] = "InternalError"


__all__ = [
    "SystemFError",
    "KernelError",
    "IndexOutOfRangeError",
    "InconsistentBindingError",
    "TypingError",
    "TypeMismatchError",
    "NotAFunctionError",
    "NotAUniversalError",
    "SelfCheckError",
]
