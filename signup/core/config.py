from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from signup.core.crypto import HASH_BASE64, HASH_MD5

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./signup.db"
DEFAULT_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_flag(value: str | None) -> bool | None:
    if value is None or value.strip() == "":
        return None
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    database_url: str = DEFAULT_DATABASE_URL
    recaptcha_secret_key: str = ""
    recaptcha_site_key: str = ""
    recaptcha_verify_url: str = DEFAULT_VERIFY_URL
    hash_type: str = Field(default=HASH_BASE64, description="md5 or base64")
    # None: decide from the database dialect
    db_use_procedure: bool | None = None
    db_create_tables: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "Settings":
        if env_file:
            load_dotenv(env_file)
        hash_type = os.getenv("HASH_TYPE", HASH_BASE64).strip().lower()
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            recaptcha_secret_key=os.getenv("RECAPTCHA_SECRET_KEY", ""),
            recaptcha_site_key=os.getenv("RECAPTCHA_SITE_KEY", ""),
            recaptcha_verify_url=os.getenv("RECAPTCHA_VERIFY_URL", DEFAULT_VERIFY_URL),
            hash_type=HASH_MD5 if hash_type == HASH_MD5 else HASH_BASE64,
            db_use_procedure=_env_flag(os.getenv("DB_USE_PROCEDURE")),
            db_create_tables=bool(_env_flag(os.getenv("DB_CREATE_TABLES"))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
