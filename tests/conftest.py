"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from fixturecalc.config import Settings
from fixturecalc.core.evaluator import FixtureEvaluator
from fixturecalc.core.registry import create_default_registry
from fixturecalc.models import FrameParameters
from fixturecalc.services.fixture_service import FixtureService
from fixturecalc.utils.logging import clear_evaluation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset evaluation context between tests."""
    clear_evaluation_context()
    yield
    clear_evaluation_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def evaluator() -> FixtureEvaluator:
    return FixtureEvaluator(create_default_registry())


@pytest.fixture
def service() -> FixtureService:
    return FixtureService()


@pytest.fixture
def road_frame() -> FrameParameters:
    """A complete, in-range stack & reach frame."""
    return FrameParameters(
        hta=72.0,
        sta=73.0,
        stack=560.0,
        reach=385.0,
        htlength=150.0,
        cslength=420.0,
        bbdrop=70.0,
    )
