from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_str
from common.logging import resolve_level, setup_default_logging


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LUMINA_X", "  ")
    assert env_str("LUMINA_X", "d") == "d"
    monkeypatch.setenv("LUMINA_X", "off")
    assert env_bool("LUMINA_X", True) is False
    monkeypatch.setenv("LUMINA_X", "garbage")
    assert env_bool("LUMINA_X", True) is True


def test_settings_reload(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LUMINA_PERSIST", "0")
    monkeypatch.setenv("LUMINA_LOG_LEVEL", "debug")
    settings.reload_from_env()
    s = settings.get()
    assert s.PERSIST is False
    assert s.LOG_LEVEL == "DEBUG"
    assert s.PERCEPTUAL_CORRECTION is True


def test_resolve_level_priority(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_level("warning", config_level="DEBUG") == logging.WARNING
    assert resolve_level(None, config_level="ERROR") == logging.ERROR
    monkeypatch.setenv("LUMINA_LOG_LEVEL", "DEBUG")
    settings.reload_from_env()
    assert resolve_level(None, config_level="ERROR") == logging.DEBUG
    assert resolve_level("not-a-level") == logging.DEBUG


def test_setup_default_logging_only_sets_level_when_configured() -> None:
    root = logging.getLogger()
    handlers = list(root.handlers)
    previous = root.level
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        setup_default_logging("ERROR")
        assert root.level == logging.ERROR
        assert root.handlers == handlers + [sentinel]
    finally:
        root.removeHandler(sentinel)
        root.setLevel(previous)
