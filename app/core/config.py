"""
Gestao de Template API - Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
import secrets
from pathlib import Path
from dotenv import load_dotenv

# Carrega .env com override para sobrescrever variáveis do sistema
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=True)


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Gestao de Template API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./gestao_template.db"

    # Security
    SECRET_KEY: str = secrets.token_urlsafe(32)
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    LOGIN_RATE_LIMIT: str = "10/minute"

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Storage (disco publico, exposto em /storage)
    STORAGE_ROOT: str = "storage/app/public"
    PUBLIC_URL: Optional[str] = None
    MAX_UPLOAD_KB: int = 2048

    # OpenWeatherMap
    OPENWEATHERMAP_API_KEY: Optional[str] = None
    OPENWEATHERMAP_URL: str = "https://api.openweathermap.org/data/2.5/weather"
    WEATHER_TIMEOUT_SECONDS: float = 10.0

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
