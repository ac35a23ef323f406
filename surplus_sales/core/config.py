# surplus_sales/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal

class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Security
    SECRET_KEY: str
    ALGORITHM: Literal["HS256"] = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 72 * 60

    # Database
    DATABASE_URL: str
    AUTO_CREATE_TABLES: bool = True

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True

    # Frontend
    CORS_ORIGINS: list[str] = ["*"]

    # Inventory images
    DEFAULT_IMAGE_URL: str = (
        "https://encrypted-tbn0.gstatic.com/images"
        "?q=tbn:ANd9GcQU0N_pZ1FmfWhbnKjb-rlqcfOO65_PRLhvTg&s"
    )


    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
