"""Process configuration, loaded once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    discord_token: str = os.getenv("DISCORD_TOKEN", "")
    app_id: str = os.getenv("APP_ID", "")
    public_key: str = os.getenv("PUBLIC_KEY", "")
    github_webhook_secret: str = os.getenv("GITHUB_WEBHOOK_SECRET", "")
    public_url: str = os.getenv("PUBLIC_URL", "")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "console")
    delivery_queue_size: int = int(os.getenv("DELIVERY_QUEUE_SIZE", "100"))
    delivery_workers: int = int(os.getenv("DELIVERY_WORKERS", "2"))


settings = Settings()
