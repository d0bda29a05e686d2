"""Top-level statements and their effect on the running context.

``execute`` never raises for user-level failures: anything that goes wrong
while elaborating, checking or reducing is reported on ``out`` and the
context passed in is returned as is.  Contexts are persistent, so nothing a
failed statement did can leak into the session.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from sysf.kernel.context import Context, TermBinding, TermBindingWithTerm, TypeBinding
from sysf.kernel.errors import SelfCheckError, SystemFError, TypeMismatchError
from sysf.kernel.reduce import normalize
from sysf.kernel.typing import infer_type
from sysf.surface.errors import UnboundNameError
from sysf.surface.resolve import (
    from_indexed_term,
    from_indexed_type,
    to_indexed_context,
    to_indexed_term,
    to_indexed_type,
)
from sysf.surface.sstmt import (
    SAxiom,
    SClear,
    SDefine,
    SPrint,
    SReduce,
    SStatement,
    STheorem,
    SVariable,
)

from .messages import format_error

logger = logging.getLogger(__name__)


def execute(stmt: SStatement, context: Context, out: TextIO | None = None) -> Context:
    """Run ``stmt`` against ``context`` and return the new context."""
    if out is None:
        out = sys.stdout
    kind = type(stmt).__name__
    logger.debug("exec %s at depth %d", kind, len(context))
    try:
        return _run(stmt, context, out)
    except SystemFError as e:
        logger.debug("%s failed: %s", kind, type(e).__name__)
        out.write(format_error(e) + "\n")
    except RecursionError:
        logger.warning("%s exceeded the recursion limit", kind)
        where = f" at {stmt.span}" if stmt.span is not None else ""
        out.write(
            f"InternalError{where}:\n"
            "  recursion limit exceeded (does the term normalize?)\n"
        )
    return context


def _run(stmt: SStatement, context: Context, out: TextIO) -> Context:
    match stmt:
        case SVariable(name):
            out.write(f"{name} is assumed.\n")
            return context.push(TypeBinding(name))
        case SAxiom(name, ty):
            # Resolving the type rejects unbound type variables up front.
            to_indexed_type(context, ty)
            out.write(f"{name}: {ty} is assumed.\n")
            return context.push(TermBinding(ty, name=name))
        case STheorem():
            return _theorem(stmt, context, out)
        case SDefine():
            return _define(stmt, context, out)
        case SReduce():
            return _reduce(stmt, context, out)
        case SPrint():
            return _print(stmt, context, out)
        case SClear():
            out.write("Context is cleared.\n")
            return Context.empty()

    raise TypeError(f"Unexpected statement: {stmt!r}")


def _theorem(stmt: STheorem, context: Context, out: TextIO) -> Context:
    expected = to_indexed_type(context, stmt.type)
    ix_term = to_indexed_term(context, stmt.term)
    ix_context = to_indexed_context(context)
    actual = infer_type(ix_term, ix_context)
    if actual != expected:
        raise TypeMismatchError(
            "defined type does not match",
            stmt.span,
            actual=actual,
            expected=expected,
            context=ix_context,
        )
    out.write(f"{stmt.name}: {stmt.type} is defined.\n")
    return context.push(TermBindingWithTerm(stmt.type, stmt.term, name=stmt.name))


def _define(stmt: SDefine, context: Context, out: TextIO) -> Context:
    ix_term = to_indexed_term(context, stmt.term)
    ix_context = to_indexed_context(context)
    ix_type = infer_type(ix_term, ix_context)
    ty = from_indexed_type(context, ix_type)
    # The type is stored by name, so the name must resolve back to it.
    try:
        nameable = to_indexed_type(context, ty) == ix_type
    except UnboundNameError:
        nameable = False
    if not nameable:
        raise TypeMismatchError(
            "inferred type cannot be named in the current context",
            stmt.span,
            actual=ix_type,
            context=ix_context,
        )
    out.write(f"{stmt.name}: {ty} is defined.\n")
    return context.push(TermBindingWithTerm(ty, stmt.term, name=stmt.name))


def _reduce(stmt: SReduce, context: Context, out: TextIO) -> Context:
    ix_term = to_indexed_term(context, stmt.term)
    ix_context = to_indexed_context(context)
    expected = infer_type(ix_term, ix_context)
    reduced = normalize(ix_term, ix_context)
    actual = infer_type(reduced, ix_context)
    if actual != expected:
        logger.error("normal form of %s changed type", stmt.term)
        raise SelfCheckError(
            "something went wrong during reduction",
            stmt.span,
            actual=actual,
            expected=expected,
            context=ix_context,
        )
    out.write(f"{from_indexed_term(context, reduced)}\n")
    out.write(f"  : {from_indexed_type(context, expected)}\n")
    return context


def _print(stmt: SPrint, context: Context, out: TextIO) -> Context:
    k = context.term_index(stmt.name)
    if k is None:
        if context.type_index(stmt.name) is not None:
            out.write(f"{stmt.name} is a type variable.\n")
            return context
        raise UnboundNameError(f"unbound variable: {stmt.name}", stmt.span, name=stmt.name)
    b = context.term_binding(k)
    out.write(f"{stmt.name}: {b.type}\n")
    if isinstance(b, TermBindingWithTerm):
        out.write(f"= {b.term}\n")
    else:
        out.write("= (assumed)\n")
    return context


__all__ = ["execute"]
