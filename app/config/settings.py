"""
Environment configuration for the hotel management back end.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
import secrets
import string
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Union

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


def _generate_secret_key() -> str:
    """Generate a default secret key if not provided"""
    alphabet = string.ascii_letters + string.digits
    return ''.join(secrets.choice(alphabet) for _ in range(32))


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = "Hotel Manager"
    API_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 4040
    CORS_ORIGINS: List[str] = Field(default=["*"])

    # Database configuration
    DATABASE_URL: str = "sqlite:///./hotel_manager.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_POOL_OVERFLOW: int = 10

    # Security configuration
    JWT_SECRET_KEY: str = Field(default_factory=_generate_secret_key)
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    PASSWORD_BCRYPT_ROUNDS: int = 12

    # Business logic
    CONFIRMATION_CODE_LENGTH: int = Field(default=10, ge=1)

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False
    LOG_JSON: bool = False

    # Validators
    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS_ORIGINS from string to list"""
        if isinstance(v, str):
            # Handle JSON string format from .env
            if v.startswith('[') and v.endswith(']'):
                try:
                    return json.loads(v)
                except json.JSONDecodeError:
                    pass
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def get_database_url(self) -> str:
        """Get database URL"""
        return self.DATABASE_URL

    def is_sqlite(self) -> bool:
        """Check whether the configured database is SQLite"""
        return self.DATABASE_URL.startswith("sqlite")

    def get_engine_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``create_engine`` matching the configured backend"""
        options: Dict[str, Any] = {
            "pool_pre_ping": True,
            "echo": self.DB_ECHO,
        }
        if self.is_sqlite():
            # SQLite connections are shared across FastAPI's threadpool
            options["connect_args"] = {"check_same_thread": False}
        else:
            options["pool_size"] = self.DB_POOL_SIZE
            options["max_overflow"] = self.DB_POOL_OVERFLOW
            options["pool_recycle"] = 3600
        return options

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
