"""Shared test fixtures for ksops-dry-run tests."""

from pathlib import Path

import pytest

from ksops_dry_run.environment import (
    CONFIG_ROOT_VAR,
    CONFIG_STRING_VAR,
    DEBUG_VAR,
    DRY_RUN_VAR,
    KSOPS_PATH_VAR,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the plugin reads from the environment."""
    for variable in (DRY_RUN_VAR, KSOPS_PATH_VAR, CONFIG_STRING_VAR, CONFIG_ROOT_VAR, DEBUG_VAR):
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch


@pytest.fixture
def sample_secret_yaml():
    """Sample encrypted secret YAML content."""
    return """apiVersion: v1
kind: Secret
metadata:
  name: test-secret
  namespace: default
  labels:
    app: demo
type: Opaque
stringData:
  username: ENC[AES256_GCM,data:dXNlcg==,type:str]
  empty: ""
data:
  password: ENC[AES256_GCM,data:cGFzcw==,type:str]
sops:
  version: 3.8.1
"""


@pytest.fixture
def sample_generator_yaml():
    """Sample ksops generator config referencing two files."""
    return """apiVersion: viaduct.ai/v1
kind: ksops
metadata:
  name: example-secret-generator
files:
  - first.enc.yaml
  - nested/second.enc.yaml
"""


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes content to a file below tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
