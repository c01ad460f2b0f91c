"""Application configuration settings"""

import os
from dotenv import load_dotenv

from todo_service.application.common.exceptions import ConfigurationError

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUE_VALUES


class Config:
    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./todo.db")
    DB_ECHO: bool = _env_flag("DB_ECHO", "false")
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "20"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))

    # gRPC server
    GRPC_HOST: str = os.getenv("GRPC_HOST", "0.0.0.0")
    GRPC_PORT: int = int(os.getenv("GRPC_PORT", "5000"))
    GRPC_GRACE_SECONDS: float = float(os.getenv("GRPC_GRACE_SECONDS", "5"))

    # HTTP gateway (JSON routes + health checks)
    HTTP_ENABLED: bool = _env_flag("HTTP_ENABLED", "true")
    HTTP_HOST: str = os.getenv("HTTP_HOST", "0.0.0.0")
    HTTP_PORT: int = int(os.getenv("HTTP_PORT", "5001"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Append exception text to INTERNAL errors. Never enable in production.
    EXPOSE_ERROR_DETAILS: bool = _env_flag("EXPOSE_ERROR_DETAILS", "false")

    @classmethod
    def validate(cls) -> None:
        """Fail fast on settings the service cannot start without."""
        if not cls.DATABASE_URL or not cls.DATABASE_URL.strip():
            raise ConfigurationError(
                "Configuration Error: 'DATABASE_URL' is required but not found or empty. "
                "Please provide a valid connection string in .env or environment variables."
            )
        for name in ("GRPC_PORT", "HTTP_PORT"):
            port = getattr(cls, name)
            if not 0 <= port <= 65535:
                raise ConfigurationError(f"Configuration Error: '{name}' out of range: {port}")


class DevelopmentConfig(Config):
    """Development configuration"""

    EXPOSE_ERROR_DETAILS = _env_flag("EXPOSE_ERROR_DETAILS", "true")


class TestingConfig(Config):
    """Testing configuration"""

    DATABASE_URL = "sqlite+aiosqlite:///:memory:"
    GRPC_HOST = "127.0.0.1"
    GRPC_PORT = 0
    HTTP_ENABLED = False
    EXPOSE_ERROR_DETAILS = False


class ProductionConfig(Config):
    """Production configuration"""

    EXPOSE_ERROR_DETAILS = False


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None) -> type[Config]:
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
