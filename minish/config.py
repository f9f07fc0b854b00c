"""Environment driven shell settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PROMPT = "$ "
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class ShellConfig:
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ShellConfig":
        source = os.environ if env is None else env
        return cls(
            prompt=source.get("MINISH_PROMPT", DEFAULT_PROMPT),
            log_level=source.get("MINISH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def with_overrides(
        self,
        *,
        prompt: str | None = None,
        log_level: str | None = None,
    ) -> "ShellConfig":
        return ShellConfig(
            prompt=self.prompt if prompt is None else prompt,
            log_level=self.log_level if log_level is None else log_level.upper(),
        )


__all__ = ["ShellConfig", "DEFAULT_PROMPT", "DEFAULT_LOG_LEVEL"]
