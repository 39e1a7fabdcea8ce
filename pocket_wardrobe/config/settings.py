"""Settings loader for the wardrobe bot."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_env_file(path: str = ".env") -> None:
    """Populate environment variables from a .env file if present."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


def _optional_int(raw: str) -> int | None:
    raw = raw.strip()
    return int(raw) if raw else None


def _flag(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime configuration for the wardrobe session and Telegram bot."""

    bot_token: str = ""
    log_level: str = "INFO"
    upload_delay: float = 1.0
    max_outfits: int | None = None
    seed_path: str = ""
    load_sample: bool = True

    @property
    def seed_file(self) -> Path | None:
        return Path(self.seed_path) if self.seed_path else None


def _build_settings() -> Settings:
    _load_env_file()
    return Settings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        upload_delay=float(os.getenv("POCKET_WARDROBE_UPLOAD_DELAY", "1.0")),
        max_outfits=_optional_int(os.getenv("POCKET_WARDROBE_MAX_OUTFITS", "")),
        seed_path=os.getenv("POCKET_WARDROBE_SEED_PATH", ""),
        load_sample=_flag(os.getenv("POCKET_WARDROBE_LOAD_SAMPLE", "true")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return _build_settings()
