import os

import pytest
from hypothesis import HealthCheck, settings
from loguru import logger

from workbench import logs
from workbench.constants import ENV

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=200,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without workbench variables; undo anything the code writes."""
    for name in ENV.values():
        # setenv first so monkeypatch records the variable and removes it afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Keep loguru sinks added by one test from writing into the next one's capture."""
    monkeypatch.setattr(logs, "_active_level", None)
    monkeypatch.setattr(logs, "_sink_id", None)
    yield
    logger.remove()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    path = tmp_path / "data"
    monkeypatch.setenv(ENV["data_dir"], str(path))
    return path
