import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests bind loggers to CliRunner streams; undo that after each test."""
    yield
    structlog.reset_defaults()
