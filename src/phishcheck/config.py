from __future__ import annotations

import logging
import os
from dataclasses import dataclass

log = logging.getLogger(__name__)


def _int_env(name: str, default: int, minimum: int | None = None) -> int:
    v = os.getenv(name)
    if not v:
        return default
    try:
        n = int(v)
    except ValueError:
        log.warning("Invalid %s=%r, using %s", name, v, default)
        return default
    if minimum is not None and n < minimum:
        log.warning("%s=%s below %s, using %s", name, n, minimum, minimum)
        return minimum
    return n


@dataclass(frozen=True)
class AppConfig:
    env: str; debug: bool
    log_level: str; log_json: bool
    max_input_chars: int; reasons_limit: int

    @property
    def effective_log_level(self) -> str: return "DEBUG" if self.debug else self.log_level


def load_config() -> "AppConfig":
    env = os.getenv("PHISHCHECK_ENV", "dev"); debug = os.getenv("PHISHCHECK_DEBUG", "0") == "1"
    return AppConfig(env, debug,
        os.getenv("LOG_LEVEL", "INFO").upper(), os.getenv("PHISHCHECK_LOG_JSON", "1") == "1",
        _int_env("PHISHCHECK_MAX_INPUT_CHARS", 100_000), _int_env("PHISHCHECK_REASONS_LIMIT", 9, minimum=1))
