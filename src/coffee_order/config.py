"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from ``COFFEE_ORDER_*`` environment variables."""

    temporal_address: str = "localhost:7233"
    # Must match between the worker and the client for work to be routed.
    task_queue: str = "coffee-orders"
    receipt_author: str = "Coffee Shop"
    log_level: str = "INFO"
    notify_latency_seconds: float = 0.3

    model_config = SettingsConfigDict(
        env_prefix="COFFEE_ORDER_",
        env_file=".env",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
