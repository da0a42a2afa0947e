"""
Walker settings read from environment variables.
Call dotenv.load_dotenv() beforehand to pick values up from a .env file.
"""
import os
from dataclasses import dataclass
from typing import Optional

from ontowalk import __version__

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class WalkerSettings:
    format: Optional[str] = None  # None = detect from response / extension
    timeout: float = 10.0
    user_agent: str = f"ontowalk/{__version__}"
    max_workers: int = 4
    concurrent: bool = False

    @classmethod
    def from_env(cls) -> "WalkerSettings":
        return cls(
            format=os.getenv("ONTOWALK_FORMAT") or None,
            timeout=_env_float("ONTOWALK_TIMEOUT", 10.0),
            user_agent=os.getenv("ONTOWALK_USER_AGENT", f"ontowalk/{__version__}"),
            max_workers=_env_int("ONTOWALK_MAX_WORKERS", 4),
            concurrent=os.getenv("ONTOWALK_CONCURRENT", "").strip().lower() in _TRUE_VALUES,
        )
