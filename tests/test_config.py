"""Tests for engine settings."""

import pytest
from pydantic import ValidationError

from d10pool.infra.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.default_target_number == 7
    assert s.default_double == 10
    assert s.max_cascade_depth == 256


def test_env_override(monkeypatch):
    monkeypatch.setenv("D10POOL_DEFAULT_TARGET_NUMBER", "6")
    monkeypatch.setenv("D10POOL_MAX_CASCADE_DEPTH", "12")
    s = Settings(_env_file=None)
    assert s.default_target_number == 6
    assert s.default_double == 10
    assert s.max_cascade_depth == 12


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("D10POOL_DEFAULT_DOUBLE=9\n", encoding="utf-8")
    s = Settings(_env_file=env_file)
    assert s.default_double == 9


def test_unprefixed_env_ignored(monkeypatch):
    monkeypatch.setenv("DEFAULT_TARGET_NUMBER", "3")
    assert Settings(_env_file=None).default_target_number == 7


@pytest.mark.parametrize("depth", [0, -5])
def test_cascade_depth_must_be_positive(depth):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_cascade_depth=depth)


def test_cascade_depth_env_must_be_positive(monkeypatch):
    monkeypatch.setenv("D10POOL_MAX_CASCADE_DEPTH", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
