import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from santa_draw.services.assignment import DEFAULT_MAX_ATTEMPTS

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_path: Optional[str]
    max_attempts: int
    seed: Optional[int]


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None


def load_settings(
    log_level: Optional[str] = None,
    log_path: Optional[str] = None,
    max_attempts: Optional[int] = None,
    seed: Optional[int] = None,
) -> Settings:
    """Read settings from the environment; explicit arguments take precedence.

    An environment variable is only parsed when no explicit value is given,
    so a command-line flag can stand in for a broken variable.
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "WARNING")
    if log_path is None:
        log_path = os.getenv("LOG_PATH") or None

    if max_attempts is None:
        raw_attempts = os.getenv("SANTA_MAX_ATTEMPTS")
        max_attempts = (
            _parse_int("SANTA_MAX_ATTEMPTS", raw_attempts) if raw_attempts else DEFAULT_MAX_ATTEMPTS
        )
    if max_attempts < 1:
        raise ValueError("SANTA_MAX_ATTEMPTS must be a positive integer.")

    if seed is None:
        raw_seed = os.getenv("SANTA_SEED")
        seed = _parse_int("SANTA_SEED", raw_seed) if raw_seed else None

    return Settings(
        log_level=log_level.upper(),
        log_path=log_path,
        max_attempts=max_attempts,
        seed=seed,
    )
