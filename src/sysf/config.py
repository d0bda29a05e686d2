"""Runtime settings for the interactive driver.

Defaults can be overridden from the environment:

    SYSF_PROMPT               prompt shown for a fresh statement ("> ")
    SYSF_CONTINUATION_PROMPT  prompt while a statement is incomplete ("| ")
    SYSF_LOG_LEVEL            logging level name ("WARNING")
    SYSF_RECURSION_LIMIT      Python recursion limit for deep terms (10000)

and then from the command line (see ``sysf.cli``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    prompt: str = "> "
    continuation_prompt: str = "| "
    log_level: str = "WARNING"
    recursion_limit: int = 10000

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.recursion_limit <= 0:
            raise ValueError("Recursion limit must be positive")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = Settings()
        raw_limit = env.get("SYSF_RECURSION_LIMIT", str(defaults.recursion_limit))
        try:
            recursion_limit = int(raw_limit)
        except ValueError:
            raise ValueError(
                f"SYSF_RECURSION_LIMIT must be an integer, got {raw_limit!r}"
            ) from None
        return Settings(
            prompt=env.get("SYSF_PROMPT", defaults.prompt),
            continuation_prompt=env.get(
                "SYSF_CONTINUATION_PROMPT", defaults.continuation_prompt
            ),
            log_level=env.get("SYSF_LOG_LEVEL", defaults.log_level),
            recursion_limit=recursion_limit,
        )


__all__ = ["Settings"]
