"""Human-readable rendering of engine errors."""

from __future__ import annotations

from sysf.kernel.context import Context
from sysf.kernel.errors import SystemFError, TypingError
from sysf.surface.resolve import display_context, from_indexed_type


def _where(error: SystemFError) -> str:
    return f"{error.label} at {error.span}" if error.span is not None else error.label


def format_error(error: SystemFError) -> str:
    """Render ``error`` as the multi-line report printed by the driver.

    Typing errors show their expected and actual types with names recovered
    from the context the types were derived in.
    """

    lines = [f"{_where(error)}:", f"  {error.message}"]
    if isinstance(error, TypingError):
        ctx = display_context(error.context or Context.empty())
        expected = (
            str(from_indexed_type(ctx, error.expected))
            if error.expected is not None
            else error.shape
        )
        lines.append(f"  expected: {expected}")
        if error.actual is not None:
            lines.append(f"  actual  : {from_indexed_type(ctx, error.actual)}")
    return "\n".join(lines)


__all__ = ["format_error"]
