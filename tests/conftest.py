"""Shared fixtures for modelgen tests."""

import pytest
from modelgen.config.settings import Settings, reset_settings
from modelgen.config.options import GeneratorOptions


@pytest.fixture
def settings(tmp_path):
    """Settings rooted in a temporary project directory."""
    return Settings(project_root=tmp_path)


@pytest.fixture
def options():
    """Default generator options."""
    return GeneratorOptions()


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Point the CLI's settings at a temporary project directory."""
    for name in ("MIGRATION", "BINARY_ID", "BASE_MODULE", "TEMPLATES_DIR", "LOG_FILE"):
        monkeypatch.delenv(f"MODELGEN_{name}", raising=False)
    monkeypatch.setenv("MODELGEN_PROJECT_ROOT", str(tmp_path))
    reset_settings()
    yield tmp_path
    reset_settings()
