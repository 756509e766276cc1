"""Tests for settings validation."""

import pytest

from shamba.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.rank_limit == 100
        assert settings.suitability_threshold == 60
        assert settings.fallback_limit == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SHAMBA_SUITABILITY_THRESHOLD", "40")
        monkeypatch.setenv("SHAMBA_DATA_DIR", "/srv/kalro")
        settings = Settings()
        assert settings.suitability_threshold == 40
        assert settings.data_dir == "/srv/kalro"

    @pytest.mark.parametrize(
        "overrides",
        [{"rank_limit": 0}, {"fallback_limit": -1}, {"suitability_threshold": -5}],
    )
    def test_invalid_policy_rejected(self, overrides):
        with pytest.raises(ValueError):
            Settings(**overrides)


class TestTrackingURI:
    def test_defaults_to_local_sqlite(self, monkeypatch):
        monkeypatch.delenv("MLFLOW_TRACKING_URI", raising=False)
        monkeypatch.delenv("SHAMBA_MLFLOW_TRACKING_URI", raising=False)
        assert Settings().mlflow_tracking_uri == "sqlite:///mlruns/mlflow.db"

    def test_reads_mlflow_env_var(self, monkeypatch):
        monkeypatch.delenv("SHAMBA_MLFLOW_TRACKING_URI", raising=False)
        monkeypatch.setenv("MLFLOW_TRACKING_URI", "postgresql://prod/mlflow")
        assert Settings().mlflow_tracking_uri == "postgresql://prod/mlflow"

    def test_prefixed_var_wins(self, monkeypatch):
        monkeypatch.setenv("MLFLOW_TRACKING_URI", "postgresql://prod/mlflow")
        monkeypatch.setenv("SHAMBA_MLFLOW_TRACKING_URI", "http://mlflow.internal:5000")
        assert Settings().mlflow_tracking_uri == "http://mlflow.internal:5000"
