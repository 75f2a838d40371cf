from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    api_url: str = os.getenv("API_URL", os.getenv("NEXT_PUBLIC_API_URL", "http://localhost:4000"))
    internal_api_key: str = os.getenv("INTERNAL_API_KEY", "")
    environment: str = os.getenv("APP_ENV", os.getenv("NODE_ENV", "production"))
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "10"))
    http_backend: str = os.getenv("HTTP_BACKEND", "httpx")
    login_path: str = os.getenv("LOGIN_PATH", "/login")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    session_cookie: str = "CH-SESSION"
    xsrf_cookie: str = "XSRF-TOKEN"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def api_base(self) -> str:
        return self.api_url.rstrip("/")


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
