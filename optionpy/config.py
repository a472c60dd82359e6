from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

TRUE_STRINGS = frozenset(("1", "t", "y", "true", "yes"))
FALSE_STRINGS = frozenset(("", "0", "f", "n", "false", "no"))

ENV_LOG_LEVEL = "OPTIONPY_LOG_LEVEL"
ENV_LOG_JSON = "OPTIONPY_LOG_JSON"


def env_bool(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in TRUE_STRINGS:
        return True
    if s in FALSE_STRINGS:
        return False
    raise ValueError(
        f"can't get bool from env var {name}={raw!r}; "
        f"recognized values are True={'|'.join(sorted(TRUE_STRINGS))} "
        f"and False={'|'.join(sorted(FALSE_STRINGS))} (case-insensitive)"
    )


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARN"
    log_json: bool = False

    @staticmethod
    def from_env() -> "Settings":
        level = os.environ.get(ENV_LOG_LEVEL) or Settings.log_level
        return Settings(log_level=level.upper(), log_json=env_bool(ENV_LOG_JSON))


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        try:
            _settings = Settings.from_env()
        except ValueError as e:
            # invalid env falls back to defaults here; Settings.from_env() still raises
            from .logger import ConsoleLogger
            ConsoleLogger("optionpy.config").warn("ignoring invalid environment settings", error=str(e))
            _settings = Settings()
    return _settings


def configure(**overrides: Any) -> Settings:
    """Replace process-wide settings and re-level loggers already handed out."""
    global _settings
    _settings = replace(get_settings(), **overrides)
    from .logger import apply_settings
    apply_settings(_settings)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
