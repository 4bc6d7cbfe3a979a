"""Shared pytest fixtures and configuration."""

import logging

import pytest


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture(autouse=True)
def reset_roster_logger():
    """Detach handlers added by setup_logging after each test."""
    yield
    logger = logging.getLogger("roster")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def ana() -> dict[str, str]:
    """A valid student draft."""
    return {
        "nome": "Ana Silva",
        "matricula": "A1",
        "email": "ana@x.com",
        "dataNascimento": "2000-01-01",
    }


@pytest.fixture
def bruno() -> dict[str, str]:
    """A second valid student draft with a different matricula."""
    return {
        "nome": "Bruno Costa",
        "matricula": "B2",
        "email": "bruno@example.org",
        "dataNascimento": "1999-12-31",
    }
