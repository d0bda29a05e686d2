"""Bindings and the persistent typing context.

A context is a stack: the most recently pushed binding sits at index 0 and
every older binding's index grows by one per binding pushed after it.

NOTE: type binders and term binders share *one* index space.  A ``TLam``
pushes a ``TypeBinding`` that shifts the index of every enclosing term
variable, and a ``Lam`` pushes a ``TermBinding`` that shifts every enclosing
type variable.  Never keep separate counters per binder kind: the shift and
substitution rules in ``sysf.kernel.debruijn`` rely on the shared numbering,
and a term index that lands on a type binding (or vice versa) is reported as
``InconsistentBindingError``.

The same binding classes are used for the named context (payloads are
surface syntax, ``name`` always set) and the indexed context (payloads are
indexed, ``name`` kept only as a display hint).
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from sysf.kernel.errors import InconsistentBindingError, IndexOutOfRangeError


@dataclass(frozen=True)
class TypeBinding:
    """Introduces a type variable."""

    name: str | None = None


@dataclass(frozen=True)
class TermBinding:
    """Introduces a term variable of the given type.

    ``type`` is scoped in the tail of the context below this binding.
    """

    type: Any
    name: str | None = field(default=None, kw_only=True)


@dataclass(frozen=True)
class TermBindingWithTerm(TermBinding):
    """A transparent term binding whose definition may be unfolded."""

    term: Any


type Binding = TypeBinding | TermBinding


@dataclass(frozen=True)
class _Cell:
    binding: Binding
    rest: _Cell | None
    size: int


@dataclass(frozen=True)
class Context:
    """Immutable stack of bindings; pushing shares the existing tail."""

    _top: _Cell | None = None

    @staticmethod
    def empty() -> Context:
        return Context()

    @staticmethod
    def of(*bindings: Binding) -> Context:
        """Build a context listing bindings by index (index 0 first)."""
        return Context.empty().push_all(*reversed(bindings))

    # ---- extending ----
    def push(self, binding: Binding) -> Context:
        """Return a new context with ``binding`` at index 0."""
        return Context(_Cell(binding, self._top, len(self) + 1))

    def push_all(self, *bindings: Binding) -> Context:
        """Push many bindings ordered outermost -> innermost."""
        ctx = self
        for b in bindings:
            ctx = ctx.push(b)
        return ctx

    def pop(self) -> Context:
        if self._top is None:
            raise IndexOutOfRangeError("cannot pop an empty context", index=0)
        return Context(self._top.rest)

    # ---- inspection ----
    def __len__(self) -> int:
        return 0 if self._top is None else self._top.size

    def __iter__(self) -> Iterator[Binding]:
        """Iterate from index 0 (innermost) outward."""
        cell = self._top
        while cell is not None:
            yield cell.binding
            cell = cell.rest

    def __bool__(self) -> bool:
        return self._top is not None

    def __repr__(self) -> str:
        return f"Context({list(self)!r})"

    def outermost_first(self) -> list[Binding]:
        return list(self)[::-1]

    def get(self, index: int) -> Binding:
        if index < 0 or index >= len(self):
            raise IndexOutOfRangeError(f"index out of range: {index}", index=index)
        cell = self._top
        for _ in range(index):
            assert cell is not None
            cell = cell.rest
        assert cell is not None
        return cell.binding

    def find_index(self, predicate: Callable[[Binding], bool]) -> int | None:
        """Return the index of the most recent binding matching ``predicate``."""
        for i, b in enumerate(self):
            if predicate(b):
                return i
        return None

    # ---- kind-checked lookup ----
    def type_binding(self, index: int) -> TypeBinding:
        b = self.get(index)
        if not isinstance(b, TypeBinding):
            raise InconsistentBindingError(
                f"inconsistent binding: {index} is not a type variable", index=index
            )
        return b

    def term_binding(self, index: int) -> TermBinding:
        b = self.get(index)
        if not isinstance(b, TermBinding):
            raise InconsistentBindingError(
                f"inconsistent binding: {index} is not a term variable", index=index
            )
        return b

    def type_index(self, name: str) -> int | None:
        """Index of the nearest type binding called ``name``."""
        return self.find_index(lambda b: isinstance(b, TypeBinding) and b.name == name)

    def term_index(self, name: str) -> int | None:
        """Index of the nearest term binding called ``name``."""
        return self.find_index(lambda b: isinstance(b, TermBinding) and b.name == name)

    def names(self) -> tuple[str | None, ...]:
        """Names ordered by index (0 = innermost)."""
        return tuple(b.name for b in self)


__all__ = [
    "Binding",
    "TypeBinding",
    "TermBinding",
    "TermBindingWithTerm",
    "Context",
]
