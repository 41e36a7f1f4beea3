"""Application configuration"""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVER_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATASET_PATH = SERVER_DIR / "data" / "sensor_data.json"


class Settings(BaseSettings):
    """Runtime settings, overridable with TELEMETRY_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="TELEMETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "telemetry-server"
    host: str = "0.0.0.0"
    port: int = 3000

    # Simulated producer
    sim_interval_ms: int = Field(default=5000, gt=0)
    dataset_path: Path = DEFAULT_DATASET_PATH

    # In-memory history
    history_capacity: int = Field(default=100, ge=1)
    default_history_limit: int = Field(default=50, ge=1)

    # Submission envelope
    max_payload_bytes: int = Field(default=1_000_000, gt=0)

    log_level: str = "INFO"

    @property
    def sim_interval_seconds(self) -> float:
        return self.sim_interval_ms / 1000


@lru_cache
def get_settings() -> Settings:
    return Settings()
