"""Tests for the application composition root."""

import pytest

from pattern_gallery.bootstrap import Application, create_application
from pattern_gallery.domain.core.exceptions import ConfigurationError


def test_application_is_lazy(application):
    status = application.get_status()

    assert status["initialized"] is False
    assert status["shared_instances"] == []


def test_initialize_builds_catalog(application):
    assert application.initialize() is True
    assert application.get_status()["initialized"] is True
    assert application.get_status()["demos"] == 15


def test_run_demos_shares_instance_registry(application):
    results = application.run_demos(["singleton", "singleton"])

    assert [r.name for r in results] == ["singleton", "singleton"]
    assert application.instance_registry.registered_classes() == ["SharedService"]


def test_log_level_override(reset_logging, tmp_path):
    path = tmp_path / "gallery.yaml"
    path.write_text("logging:\n  level: ERROR\n")

    app = Application(str(path), log_level="debug")

    assert app.config.logging.level == "DEBUG"


def test_create_application_reports_bad_config(reset_logging, tmp_path):
    with pytest.raises(ConfigurationError):
        create_application(str(tmp_path / "missing.yaml"))


def test_invalid_log_level_override_raises_configuration_error(reset_logging):
    app = Application(log_level="verbose")

    with pytest.raises(ConfigurationError, match="verbose"):
        app.initialize()
    assert app.get_status()["initialized"] is False


def test_log_level_override_keeps_other_logging_settings(reset_logging, tmp_path):
    path = tmp_path / "gallery.yaml"
    path.write_text("logging:\n  level: ERROR\n  backup_count: 2\n")

    app = Application(str(path), log_level="info")

    assert app.config.logging.level == "INFO"
    assert app.config.logging.backup_count == 2
