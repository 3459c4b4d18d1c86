"""Wiring for an application that owns one alias registry.

Usage:
    registry, worker = create_registry()
    worker.start()
    ...
    worker.stop()

Environment variables:
    BASE_URL - Origin used to render short URLs
    SHORT_CODE_LENGTH - Length of generated codes
    DEFAULT_VALIDITY_MINUTES - Validity when a request gives none
    PURGE_INTERVAL_SECONDS - Background purge interval
    LOG_LEVEL - Logging level
"""

import random
from typing import Optional, Tuple

from .config import Config, load_config
from .registry import AliasRegistry, Clock
from .shortcode import ShortCodeGenerator
from .worker import PurgeWorker
from .common.logging_config import setup_logging


def create_registry(
    config: Optional[Config] = None,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[AliasRegistry, PurgeWorker]:
    """Build a registry and its purge worker from configuration.

    The worker is returned stopped; the caller decides when to start it.
    """
    config = config or load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
        buffer_size=config.log_buffer_size,
    )

    generator = ShortCodeGenerator(default_length=config.short_code_length, rng=rng)
    registry = AliasRegistry(
        config=config,
        short_code_generator=generator,
        clock=clock,
        logger=logger.getChild("registry"),
    )
    worker = PurgeWorker(registry, logger=logger.getChild("worker"))

    logger.info("Alias registry initialized")
    return registry, worker
