# src/config.py

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

load_dotenv()


DEFAULT_MAX_TICKETS_ALLOWED = 20


@dataclass(frozen=True)
class Settings:
    max_tickets_allowed: int
    log_level: str
    app_title: str
    host: str
    port: int


@lru_cache
def get_settings() -> Settings:
    return Settings(
        max_tickets_allowed=int(
            os.getenv("MAX_TICKETS_ALLOWED", str(DEFAULT_MAX_TICKETS_ALLOWED))
        ),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_title=os.getenv("APP_TITLE", "Cinema Ticket Service"),
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
