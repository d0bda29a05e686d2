"""Fresh display names for binders regenerated from indexed syntax."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass, field
from string import ascii_lowercase, ascii_uppercase


def generate_name(n: int, upper: bool = False) -> str:
    """Return the bijective base-26 numeral for ``n``.

    ``0..25`` map to single letters, ``26`` to ``aa`` (or ``AA``), and so on,
    most significant digit first.
    """
    if n < 0:
        raise ValueError("name ids must be non-negative")
    alphabet = ascii_uppercase if upper else ascii_lowercase
    name = ""
    while n >= 0:
        name = alphabet[n % 26] + name
        n = n // 26 - 1
    return name


def type_var_name(n: int) -> str:
    return generate_name(n, upper=True)


def term_var_name(n: int) -> str:
    return generate_name(n, upper=False)


@dataclass
class NameSupply:
    """Two independent monotonic counters, one per binder kind.

    Names already bound in the ambient context are skipped so a regenerated
    binder can never capture a free variable.
    """

    taken_types: Container[str] = field(default_factory=frozenset)
    taken_terms: Container[str] = field(default_factory=frozenset)
    next_type: int = 0
    next_term: int = 0

    def fresh_type(self) -> str:
        while True:
            name = type_var_name(self.next_type)
            self.next_type += 1
            if name not in self.taken_types:
                return name

    def fresh_term(self) -> str:
        while True:
            name = term_var_name(self.next_term)
            self.next_term += 1
            if name not in self.taken_terms:
                return name


__all__ = ["generate_name", "type_var_name", "term_var_name", "NameSupply"]
