"""Tests for environment-driven settings."""

import logging
import os
from unittest.mock import patch

import pytest

from force_graph import Graph, GraphSettings
from force_graph.config.env import get_env_bool, get_env_str
from force_graph.config.settings import LOG_OVERWRITES_ENV, WARN_AMBIGUOUS_IDS_ENV


def test_get_env_str():
    """Test string parsing."""
    with patch.dict(os.environ, {"FOO": "bar"}):
        assert get_env_str("FOO") == "bar"
        assert get_env_str("BAR", default="baz") == "baz"

    with pytest.raises(KeyError):
        get_env_str("FORCE_GRAPH_MISSING", required=True)


def test_get_env_bool():
    """Test boolean parsing."""
    for val in ["true", "1", "yes", "on", "TRUE", " Yes "]:
        with patch.dict(os.environ, {"FOO": val}):
            assert get_env_bool("FOO") is True

    for val in ["false", "0", "no", "off", "", "FALSE"]:
        with patch.dict(os.environ, {"FOO": val}):
            assert get_env_bool("FOO") is False

    assert get_env_bool("FORCE_GRAPH_MISSING", default=True) is True

    with patch.dict(os.environ, {"FOO": "maybe"}):
        with pytest.raises(ValueError):
            get_env_bool("FOO")


def test_settings_defaults(monkeypatch):
    """Without env vars, overwrites are quiet and ambiguity warnings are on."""
    monkeypatch.delenv(LOG_OVERWRITES_ENV, raising=False)
    monkeypatch.delenv(WARN_AMBIGUOUS_IDS_ENV, raising=False)
    assert GraphSettings.from_env() == GraphSettings(log_overwrites=False, warn_ambiguous_ids=True)


def test_settings_from_env(monkeypatch):
    """Env vars override both settings."""
    monkeypatch.setenv(LOG_OVERWRITES_ENV, "yes")
    monkeypatch.setenv(WARN_AMBIGUOUS_IDS_ENV, "off")
    assert GraphSettings.from_env() == GraphSettings(log_overwrites=True, warn_ambiguous_ids=False)


def test_graph_reads_settings_on_construction(monkeypatch):
    """A new Graph picks up settings from the environment."""
    monkeypatch.setenv(LOG_OVERWRITES_ENV, "1")
    assert Graph()._settings.log_overwrites is True


def test_invalid_setting_rejected_by_from_env(monkeypatch):
    """Strict loading reports an invalid boolean."""
    monkeypatch.setenv(LOG_OVERWRITES_ENV, "sometimes")
    with pytest.raises(ValueError):
        GraphSettings.from_env()


def test_invalid_setting_falls_back_to_defaults(monkeypatch, caplog):
    """Graph construction never fails on bad env; it warns and uses defaults."""
    monkeypatch.setenv(LOG_OVERWRITES_ENV, "sometimes")
    monkeypatch.setenv(WARN_AMBIGUOUS_IDS_ENV, "off")
    with caplog.at_level(logging.WARNING, logger="force_graph"):
        graph = Graph()
    assert graph._settings == GraphSettings()
    assert "Invalid graph settings in environment" in caplog.text


def test_settings_excluded_from_wire(monkeypatch):
    """Settings never appear in the serialized graph."""
    monkeypatch.setenv(LOG_OVERWRITES_ENV, "1")
    assert Graph().to_wire() == {"nodes": {}, "edges": {}}
