"""Tests for environment-based configuration."""

import io
import logging
import sys
from pathlib import Path

from kex.config import (
    DEFAULT_CATALOG_FILE,
    KexConfig,
    load_config,
    resolve_catalog_path,
    resolve_log_level,
)
from kex.log import configure_logging


def test_catalog_path_from_env():
    assert resolve_catalog_path({"KEX_FILE": "/etc/kex/commands.yaml"}) == Path(
        "/etc/kex/commands.yaml"
    )


def test_catalog_path_defaults_to_commands_yaml():
    assert resolve_catalog_path({}) == Path(DEFAULT_CATALOG_FILE)
    assert DEFAULT_CATALOG_FILE == "commands.yaml"


def test_blank_env_value_uses_default():
    assert resolve_catalog_path({"KEX_FILE": "   "}) == Path("commands.yaml")


def test_catalog_path_expands_user():
    path = resolve_catalog_path({"KEX_FILE": "~/kex.yaml"})
    assert "~" not in str(path)
    assert path.name == "kex.yaml"


def test_log_level_from_env():
    assert resolve_log_level({"KEX_LOG_LEVEL": "debug"}) == logging.DEBUG
    assert resolve_log_level({"KEX_LOG_LEVEL": "ERROR"}) == logging.ERROR


def test_unknown_log_level_falls_back_to_warning():
    assert resolve_log_level({"KEX_LOG_LEVEL": "chatty"}) == logging.WARNING
    assert resolve_log_level({}) == logging.WARNING


def test_load_config():
    config = load_config({"KEX_FILE": "cmds.yml", "KEX_LOG_LEVEL": "INFO"})
    assert config == KexConfig(catalog_path=Path("cmds.yml"), log_level=logging.INFO)


def test_configure_logging_is_idempotent():
    logger = configure_logging(logging.INFO)
    count = len(logger.handlers)
    logger = configure_logging(logging.DEBUG)
    assert len(logger.handlers) == count
    assert logger.level == logging.DEBUG


def test_configure_logging_survives_closed_stderr(monkeypatch):
    old_stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", old_stream)
    configure_logging(logging.INFO)
    old_stream.close()

    new_stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", new_stream)
    logger = configure_logging(logging.INFO)
    logging.getLogger("kex.catalog").info("loaded")

    kex_handlers = [h for h in logger.handlers if getattr(h, "_kex_handler", False)]
    assert len(kex_handlers) == 1
    assert kex_handlers[0].stream is new_stream
    assert "INFO kex.catalog: loaded" in new_stream.getvalue()
