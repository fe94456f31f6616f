"""
Tests for logging setup.
"""

import logging

import pytest

from graphbrewer.log import LOG_LEVEL_ENV, configure_logging


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger("graphbrewer").level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "WARNING")
    assert configure_logging() == logging.WARNING


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        configure_logging("LOUD")


def test_unreachable_is_logged(split_graph, caplog):
    with caplog.at_level(logging.INFO, logger="graphbrewer"):
        split_graph.shortest_path("a", "x")
    assert "unreachable" in caplog.text
