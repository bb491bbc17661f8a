"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    ENV = os.getenv("ENV", "development")
    TESTING = os.getenv("TESTING", "false").lower() in {"1", "true", "yes", "on"}
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s",
    )

    # Auth (tokens are issued by the external auth service)
    SERVICE_AUTH_SECRET = os.getenv(
        "SERVICE_AUTH_SECRET", "local-development-secret-change-me-0123456789"
    )
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "tracker-auth")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "tracker-api")

    # Postgresql Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Redis settings
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    CACHE_TTL: int = int(os.getenv("CACHE_TTL", "1000"))  # seconds

    # Pagination
    PAGINATION_OFFSET: int = 0
    PAGINATION_LIMIT: int = int(os.getenv("PAGINATION_LIMIT", "10"))
    PAGINATION_MAX_LIMIT: int = int(os.getenv("PAGINATION_MAX_LIMIT", "100"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = Config.ENV
    return config.get(env, config["default"])
