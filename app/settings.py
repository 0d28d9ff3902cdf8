from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    STORE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite+aiosqlite:///data/games.db"
    PUBLIC_DIR: str = "public"
    IMAGES_SUBDIR: str = "images"
    DEFAULT_IMG_REFERENCE: str = "images/placeholder.jpg"
    SEED_SAMPLE_GAMES: bool = True
    IO_TIMEOUT_SECONDS: float = 10.0
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    LOG_JSON_FORMAT: bool = True
    LOG_DIR: str = "data/logs"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
