import pytest

from pattern_gallery.application.demos import build_default_catalog
from pattern_gallery.bootstrap import Application
from pattern_gallery.config.schemas import LoggingConfig
from pattern_gallery.infrastructure.logging.logger import setup_logging
from pattern_gallery.infrastructure.patterns.instance_registry import InstanceRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer overrides out of the tests."""
    monkeypatch.delenv("PATTERN_GALLERY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PATTERN_GALLERY_OUTPUT_FORMAT", raising=False)


@pytest.fixture
def reset_logging():
    """Restore default logging after a test reconfigures it."""
    yield
    setup_logging(LoggingConfig())


@pytest.fixture
def instance_registry():
    return InstanceRegistry()


@pytest.fixture
def catalog():
    return build_default_catalog()


@pytest.fixture
def application(reset_logging):
    return Application()
