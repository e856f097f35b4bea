import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str
    log_path: str
    max_exclusions: int
    max_attempts: int
    max_participants: int


def _int_setting(name: str, default: int, minimum: int = 1) -> int:
    raw: Optional[str] = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from None
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}.")
    return value


def load_settings() -> Settings:
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/santa.log")

    return Settings(
        log_level=log_level,
        log_path=log_path,
        max_exclusions=_int_setting("MAX_EXCLUSIONS", 2, minimum=0),
        max_attempts=_int_setting("MAX_ATTEMPTS", 100),
        max_participants=_int_setting("MAX_PARTICIPANTS", 50),
    )
