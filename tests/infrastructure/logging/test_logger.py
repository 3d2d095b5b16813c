"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def recorded_builds(monkeypatch):
    """Replace LoggerBuilder.build and record the configured targets."""
    builds = []

    def _fake_build(self):
        fake = MagicMock()
        builds.append((self._name, self._subdir, self._prefix, fake))
        return fake

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    return builds


def test_default_builder_writes_app_log_under_project_root(
    tmp_path, monkeypatch
):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240115"),
    )

    builder = logger_module.LoggerBuilder()
    assert builder._name == "dompetpintar"

    built = builder.name("dompetpintar.defaults").console(False).build()

    assert built.name == "dompetpintar.defaults"
    assert built.level == logging.INFO
    file_handlers = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    expected = tmp_path / "logs" / "app" / "20240115_app_logs.log"
    assert [h.baseFilename for h in file_handlers] == [str(expected)]
    assert not any(
        type(h) is logging.StreamHandler for h in built.handlers
    )


def test_custom_export_logger_reuses_instance(tmp_path, monkeypatch):
    """A second build with the same name returns the configured logger."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240201"),
    )
    builder = (
        logger_module.LoggerBuilder()
        .name("dompetpintar.export")
        .subdir("export")
        .prefix("export_logs")
        .level(logging.WARNING)
    )

    first = builder.build()

    assert first.level == logging.WARNING
    assert (tmp_path / "logs" / "export").is_dir()
    assert builder.build() is first


def test_default_handlers_log_at_info_with_shared_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "tracker.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert (file_handler.level, console_handler.level) == (
        logging.INFO,
        logging.INFO,
    )
    assert file_handler.formatter is fmt
    assert console_handler.formatter is fmt
    file_handler.close()


def test_app_logger_targets_app_subdir(recorded_builds):
    app_logger = logger_module.get_app_logger()
    app_logger.warning("Ignoring non-positive withdrawal")

    assert logger_module.get_app_logger() is app_logger
    assert len(recorded_builds) == 1
    name, subdir, prefix, wrapped = recorded_builds[0]
    assert (name, subdir, prefix) == ("dompetpintar.app", "app", "app_logs")
    wrapped.warning.assert_called_once_with("Ignoring non-positive withdrawal")


def test_usage_logger_targets_usage_subdir(recorded_builds):
    usage_logger = logger_module.get_usage_logger()
    usage_logger.info("page=Dashboard")

    assert logger_module.get_usage_logger() is usage_logger
    name, subdir, prefix, wrapped = recorded_builds[0]
    assert (name, subdir, prefix) == (
        "dompetpintar.usage",
        "usage",
        "usage_logs",
    )
    wrapped.info.assert_called_once_with("page=Dashboard")
    assert usage_logger is not logger_module.get_app_logger()
