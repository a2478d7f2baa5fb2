"""
MedCheck — Періодична очистка сесій

SessionSweeper викликає store.sweep_expired() у фоновому потоці
з фіксованим інтервалом, поки не буде викликано stop().
"""

import threading
from typing import Optional

from medcheck.utils import get_logger
from .store import AssessmentStore


logger = get_logger(__name__)


class SessionSweeper:
    """
    Фоновий потік очистки.

    Приклад використання:
        sweeper = SessionSweeper(store, interval_seconds=3600)
        sweeper.start()
        ...
        sweeper.stop()
    """

    def __init__(self, store: AssessmentStore, interval_seconds: float = 3600.0):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")

        self.store = store
        self.interval_seconds = interval_seconds
        self.total_evicted = 0
        self.runs = 0

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Запустити потік (повторний виклик ігнорується)"""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run,
            name="medcheck-session-sweeper",
            daemon=True,
        )
        self._thread.start()
        logger.info("Session sweeper started (every %.0fs)", self.interval_seconds)

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """Зупинити потік та дочекатися завершення"""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Session sweeper stopped")

    def run_once(self) -> int:
        """Одна очистка; повертає кількість видалених сесій"""
        evicted = self.store.sweep_expired()
        self.runs += 1
        self.total_evicted += evicted
        return evicted

    def _run(self) -> None:
        # Event.wait повертає True після stop()
        while not self._stop_event.wait(self.interval_seconds):
            try:
                evicted = self.run_once()
                if evicted:
                    logger.info("Cleaned up %d old sessions", evicted)
            except Exception:
                logger.exception("Session sweep failed")
