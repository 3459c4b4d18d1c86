"""Background purge of expired aliases."""

import logging
import threading
from typing import Optional

from .registry import AliasRegistry


class PurgeWorker:
    """Periodically purge expired aliases from a registry."""

    def __init__(
        self,
        registry: AliasRegistry,
        interval: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        join_timeout: float = 5.0,
    ):
        self.registry = registry
        self.join_timeout = join_timeout
        self.interval = interval if interval is not None else registry.config.purge_interval_seconds
        self.logger = logger or logging.getLogger(__name__)
        self.thread: Optional[threading.Thread] = None
        self._stop = threading.Event()

    @property
    def running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def start(self) -> None:
        if self.running:
            self.logger.warning("Purge worker already running")
            return

        self._stop.clear()
        self.thread = threading.Thread(target=self._worker, name="linkalias-purge", daemon=True)
        self.thread.start()
        self.logger.info(f"Purge worker started (interval={self.interval}s)")

    def stop(self) -> None:
        self._stop.set()
        if self.thread:
            self.thread.join(timeout=self.join_timeout)
            if self.thread.is_alive():
                self.logger.warning(f"Purge worker did not stop within {self.join_timeout}s")
                return
            self.thread = None
        self.logger.info("Purge worker stopped")

    def run_once(self) -> int:
        """Purge now, logging instead of raising on failure."""
        try:
            return self.registry.purge_expired()
        except Exception as e:
            self.logger.error(f"Purge error: {e}")
            return 0

    def _worker(self) -> None:
        while not self._stop.is_set():
            self.run_once()
            self._stop.wait(self.interval)

    def __enter__(self) -> "PurgeWorker":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
