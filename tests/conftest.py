"""Pytest configuration and shared fixtures for optres tests."""

import logging

import pytest
import structlog

from optres import _config, _logging


@pytest.fixture
def fresh_config(monkeypatch):
    """Start from no active config and no OPTRES_* environment."""
    monkeypatch.delenv('OPTRES_LOG_CAUGHT', raising=False)
    monkeypatch.delenv('OPTRES_LOG_LEVEL', raising=False)
    _config.reset()
    yield
    _config.reset()


@pytest.fixture
def restore_logging():
    """Undo configure_logging(): structlog defaults and a bare optres logger."""
    yield
    structlog.reset_defaults()
    library_logger = logging.getLogger(_logging.LOGGER_NAME)
    if _logging._handler is not None:
        library_logger.removeHandler(_logging._handler)
        _logging._handler = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from optres import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from optres import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from optres import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from optres import Nothing

    return Nothing
