"""Session state and the line-buffering interactive loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

from sysf.config import Settings
from sysf.kernel.context import Context
from sysf.surface.errors import ParseError
from sysf.surface.parse import parse

from .messages import format_error
from .statement import execute

logger = logging.getLogger(__name__)


class Session:
    """A running context plus the stream statements report to."""

    def __init__(self, out: TextIO | None = None, context: Context | None = None) -> None:
        self.out = sys.stdout if out is None else out
        self.context = Context.empty() if context is None else context

    def execute(self, source: str) -> None:
        """Parse ``source`` and run its statements in order.

        A parse error runs nothing; failing statements leave the context as it
        was before them and later statements still run.
        """
        try:
            statements = parse(source)
        except ParseError as e:
            logger.debug("parse failed: %s", e.message)
            self.out.write(format_error(e) + "\n")
            return
        for stmt in statements:
            self.context = execute(stmt, self.context, self.out)


class Repl:
    """Accumulate input lines until a ``;`` shows up, then execute the buffer."""

    def __init__(self, session: Session, settings: Settings | None = None) -> None:
        self.session = session
        self.settings = settings or Settings()
        self.buffer = ""

    @property
    def prompt(self) -> str:
        return self.settings.continuation_prompt if self.buffer else self.settings.prompt

    def feed(self, line: str) -> bool:
        """Add one line; return ``True`` if the buffer was executed."""
        self.buffer += line + "\n"
        if ";" not in self.buffer:
            return False
        source, self.buffer = self.buffer, ""
        self.session.execute(source)
        return True

    def run(self, read_line: Callable[[str], str] = input) -> None:
        """Read lines until end of input or an interrupt."""
        while True:
            try:
                line = read_line(self.prompt)
            except (EOFError, KeyboardInterrupt):
                self.session.out.write("\n")
                break
            self.feed(line)
        if self.buffer.strip():
            logger.info("discarding unterminated input")


__all__ = ["Session", "Repl"]
