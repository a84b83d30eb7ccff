# config/settings.py
import os
import sys
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    ALLOWED_ORIGIN: str = Field(
        default="http://localhost:8000", validation_alias="ALLOWED_ORIGIN"
    )

    # Upstream management API
    CF_API_BASE_URL: str = Field(
        default="https://api.cloudflare.com/client/v4",
        validation_alias="CF_API_BASE_URL",
    )
    UPSTREAM_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, validation_alias="UPSTREAM_TIMEOUT_SECONDS"
    )
    NAMESPACES_PAGE_SIZE: int = Field(
        default=100, ge=1, le=100, validation_alias="NAMESPACES_PAGE_SIZE"
    )
    NAMESPACES_MAX_PAGES: int = Field(
        default=1000, ge=1, validation_alias="NAMESPACES_MAX_PAGES"
    )
    OBJECTS_LIMIT: int = Field(
        default=10000, ge=1, le=10000, validation_alias="OBJECTS_LIMIT"
    )

    # Session cookies (0 = browser-session cookie, no Max-Age)
    SESSION_MAX_AGE_SECONDS: int = Field(
        default=24 * 60 * 60, ge=0, validation_alias="SESSION_MAX_AGE_SECONDS"
    )
    COOKIE_SECURE: bool = Field(default=False, validation_alias="COOKIE_SECURE")

    # Logging knobs
    LOGGER_NAME: str = "do-viewer"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
