"""Shared test fixtures."""

from pathlib import Path

import mlflow
import pytest

from shamba.core.types import ClimateRecord, CropVariety
from tests.factories import make_crop, make_location

SAMPLE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def _disable_mlflow_tracing():
    """Disable MLflow tracing during tests: no side effects, no mlruns/ writes."""
    mlflow.tracing.disable()
    yield
    mlflow.tracing.enable()


@pytest.fixture
def sample_data_dir() -> Path:
    return SAMPLE_DATA_DIR


@pytest.fixture
def location() -> ClimateRecord:
    return make_location()


@pytest.fixture
def crop() -> CropVariety:
    return make_crop()
