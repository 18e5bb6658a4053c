import logging

from pattern_gallery.config.schemas import LogDestination, LoggingConfig
from pattern_gallery.infrastructure.logging.logger import get_logger, setup_logging


def _file_config(tmp_path, level="DEBUG"):
    return LoggingConfig(
        level=level,
        destination=LogDestination.FILE,
        file_path=str(tmp_path / "logs" / "gallery.log"),
    )


def test_setup_logging_sets_root_level(reset_logging, tmp_path):
    setup_logging(_file_config(tmp_path, level="ERROR"))

    assert logging.getLogger().level == logging.ERROR


def test_file_destination_writes_structured_line(reset_logging, tmp_path):
    config = _file_config(tmp_path)
    setup_logging(config)

    get_logger("tests.logger").info("Icon cached", icon_type="folder")

    contents = (tmp_path / "logs" / "gallery.log").read_text()
    assert "INFO - tests.logger" in contents
    assert "Icon cached icon_type='folder'" in contents
    assert "[test_logger.test_file_destination_writes_structured_line:" in contents


def test_records_below_level_are_dropped(reset_logging, tmp_path):
    setup_logging(_file_config(tmp_path, level="WARNING"))

    get_logger("tests.logger").info("hidden")
    get_logger("tests.logger").warning("shown")

    contents = (tmp_path / "logs" / "gallery.log").read_text()
    assert "hidden" not in contents
    assert "shown" in contents


def test_stdlib_loggers_share_the_format(reset_logging, tmp_path):
    setup_logging(_file_config(tmp_path))

    logging.getLogger("plain.stdlib").warning("from stdlib")

    contents = (tmp_path / "logs" / "gallery.log").read_text()
    assert "WARNING - plain.stdlib" in contents
    assert "from stdlib" in contents


def test_setup_replaces_previous_handlers(reset_logging, tmp_path):
    setup_logging(_file_config(tmp_path))
    setup_logging(_file_config(tmp_path))

    assert len(logging.getLogger().handlers) == 1


def test_setup_closes_replaced_file_handlers(reset_logging, tmp_path):
    setup_logging(_file_config(tmp_path))
    (previous,) = logging.getLogger().handlers

    setup_logging(_file_config(tmp_path))

    assert previous not in logging.getLogger().handlers
    assert previous.stream is None
