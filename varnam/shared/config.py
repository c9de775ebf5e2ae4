from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Read from the environment (and an optional .env file).
    """

    # --- Application Meta ---
    APP_NAME: str = "varnam"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # 'console' or 'json'

    # --- Native Library ---
    # Explicit path to libvarnam.so; when unset the names below are looked up.
    VARNAM_LIBRARY_PATH: Optional[str] = None
    VARNAM_LIBRARY_NAMES: List[str] = ["varnam", "govarnam"]

    # --- Scheme Listing ---
    # False: a failed entry empties the whole listing (libvarnam binding behaviour).
    # True: the failure is raised as EnumerationError.
    STRICT_SCHEME_LISTING: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
