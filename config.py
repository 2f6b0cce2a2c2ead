"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os


class Config:
    """Base configuration with default settings."""

    SECRET_KEY: str = os.environ.get("SECRET_KEY", "dev-secret-key-change-in-production")
    APP_TITLE: str = os.environ.get("APP_TITLE", "My Task Manager")

    # Where the initial tasks come from: default, empty, file or remote
    TASKS_SEED: str = os.environ.get("TASKS_SEED", "default")
    TASKS_SEED_PATH: str | None = os.environ.get("TASKS_SEED_PATH")
    TASKS_SEED_URL: str = os.environ.get("TASKS_SEED_URL", "http://localhost:5000/tasks")
    TASKS_SEED_TIMEOUT: float = float(os.environ.get("TASKS_SEED_TIMEOUT", "5"))


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # Every test starts from an empty store unless it seeds one itself
    TASKS_SEED: str = "empty"


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
