import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from .logging_config import LoggingConfig, get_logger

DEFAULT_PORT = 6000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_API_URL = "http://localhost:8000/api"

# Advertised to browsers; only GET has routes behind it.
CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]


def _read_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"PORT out of range: {port}")
    return port


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def get_api_url() -> str:
    """Base URL the client prefixes to API paths"""
    load_dotenv(override=False)
    return (os.getenv("API_URL") or DEFAULT_API_URL).rstrip("/")


class AppConfig:
    def __init__(self):
        load_dotenv(override=False)

        self.host = os.getenv("HOST") or DEFAULT_HOST
        self.port = _read_port(os.getenv("PORT") or str(DEFAULT_PORT))
        self.cors_origins = _split_origins(os.getenv("CORS_ORIGINS") or "*")
        self.cors_methods = list(CORS_METHODS)

        self.static_dir = Path(os.getenv("STATIC_DIR") or "public")
        self.static_dir.mkdir(parents=True, exist_ok=True)

        self.logging_config = LoggingConfig(os.getenv("LOGS_DIR") or "logs")
        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
