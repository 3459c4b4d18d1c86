"""Pytest configuration and fixtures."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from linkalias.config import Config
from linkalias.registry import AliasRegistry
from linkalias.shortcode import ShortCodeGenerator
from linkalias.common.logging_config import setup_logging


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now += timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    """Frozen clock starting at a fixed instant."""
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def config():
    """Default configuration, isolated from the environment."""
    return Config(_env_file=None)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG", buffer_size=100)


@pytest.fixture
def short_code_generator():
    """Create seeded short code generator."""
    return ShortCodeGenerator(default_length=6, rng=random.Random(1234))


@pytest.fixture
def registry(config, short_code_generator, clock, logger):
    """Create registry instance."""
    return AliasRegistry(
        config=config,
        short_code_generator=short_code_generator,
        clock=clock,
        logger=logger,
    )


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
