"""Shared fixtures: keep fetch-failure logs out of the working directory."""

import pytest


@pytest.fixture(autouse=True)
def _tmp_log(tmp_path, monkeypatch):
    log_path = tmp_path / "logs" / "weather_dashboard.log"
    monkeypatch.setattr("weather_dashboard.utils._log_path", log_path)
    return log_path
