import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests configure structlog against a captured stream; undo it."""
    yield
    structlog.reset_defaults()
