"""Shared fixtures for config and service tests."""

import pytest


SAMPLE_CONFIG = """
access_key_id: access_key
secret_access_key: secret
protocol: https
"""


@pytest.fixture
def sample_yaml() -> str:
    return SAMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path, sample_yaml):
    path = tmp_path / "qingstor_sdk.config"
    path.write_text(sample_yaml, encoding="utf-8")
    return path
