"""Shamba configuration: data location, recommendation policy, logging, tracing."""

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Catalog CSVs (crops.csv, climate.csv, livestock.csv, pasture.csv, aez.csv)
    data_dir: str = "data"

    # Recommendation policy
    rank_limit: int = 100
    suitability_threshold: int = 60
    fallback_limit: int = 10

    @model_validator(mode="after")
    def _check_policy(self) -> "Settings":
        """Reject policy values that would silently hide every recommendation."""
        if self.rank_limit <= 0:
            raise ValueError(f"rank_limit must be positive, got {self.rank_limit}")
        if self.fallback_limit <= 0:
            raise ValueError(f"fallback_limit must be positive, got {self.fallback_limit}")
        if self.suitability_threshold < 0:
            raise ValueError(
                f"suitability_threshold must not be negative, got {self.suitability_threshold}"
            )
        return self

    # MLflow: local SQLite for development, MLFLOW_TRACKING_URI in production
    mlflow_tracking_uri: str = Field(
        default="sqlite:///mlruns/mlflow.db",
        validation_alias=AliasChoices("SHAMBA_MLFLOW_TRACKING_URI", "MLFLOW_TRACKING_URI"),
    )
    mlflow_experiment_name: str = "shamba-recommendations"

    # Logging
    log_json: bool = True
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = {"env_prefix": "SHAMBA_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
