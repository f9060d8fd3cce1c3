"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from src.consultrack.core.config import Settings

pytestmark = pytest.mark.unit


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.database_statement_timeout_seconds > 0


@pytest.mark.parametrize(("raw", "expected"), [("/api", "/api"), ("/api/", "/api"), (" ", "")])
def test_api_prefix_normalized(raw: str, expected: str):
    assert Settings(_env_file=None, api_prefix=raw).api_prefix == expected


def test_api_prefix_must_start_with_slash():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, api_prefix="api")


def test_cors_wildcard_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, cors_origins=["*"])


@pytest.mark.parametrize(
    "field", ["database_statement_timeout_seconds", "database_pool_timeout_seconds"]
)
def test_timeouts_must_be_positive(field: str):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: 0})
