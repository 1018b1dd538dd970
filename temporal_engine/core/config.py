"""Engine configuration loaded from the environment."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment (``TEMPORAL_`` prefix)."""

    app_name: str = "Legal Temporal Engine"
    debug: bool = False

    # Logging
    log_level: str = "INFO"

    # Paths
    timelines_dir: str = "data/timelines"

    model_config = {
        "env_prefix": "TEMPORAL_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
