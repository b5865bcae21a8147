from enum import Enum
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from rich.logging import RichHandler


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    api_key: str | None = None
    text_model: str = "gemini-2.5-flash"
    image_model: str = "gemini-2.5-flash-image-preview"
    gemini_url: str = "https://generativelanguage.googleapis.com/v1beta/"
    timeout: float = 60 * 2
    html_dir: Path = Path("assets/html")
    mount_id: str = "menu-portal"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )
    # One line per Gemini request is too chatty above debug.
    logging.getLogger("httpx").setLevel(logging.WARNING)
