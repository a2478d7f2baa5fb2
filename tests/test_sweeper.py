"""
Тести для модуля store.sweeper

Запуск: pytest tests/test_sweeper.py -v
"""

from datetime import datetime, timedelta, timezone
import time

import pytest


def test_run_once():
    """Одна очистка рахує видалені сесії"""
    from medcheck.store import AssessmentStore, SessionSweeper

    now = [datetime(2024, 5, 1, tzinfo=timezone.utc)]
    store = AssessmentStore(clock=lambda: now[0])
    store.create_session()
    store.create_session()

    sweeper = SessionSweeper(store, interval_seconds=60)

    assert sweeper.run_once() == 0

    now[0] += timedelta(hours=25)

    assert sweeper.run_once() == 2
    assert sweeper.runs == 2
    assert sweeper.total_evicted == 2
    assert store.session_count == 0


def test_invalid_interval():
    """Інтервал має бути додатнім"""
    from medcheck.store import AssessmentStore, SessionSweeper

    with pytest.raises(ValueError):
        SessionSweeper(AssessmentStore(), interval_seconds=0)


def test_start_stop():
    """Фоновий потік запускається та зупиняється"""
    from medcheck.store import AssessmentStore, SessionSweeper

    sweeper = SessionSweeper(AssessmentStore(), interval_seconds=0.01)

    sweeper.start()
    sweeper.start()  # повторний виклик ігнорується
    assert sweeper.is_running

    deadline = time.monotonic() + 2.0
    while sweeper.runs == 0 and time.monotonic() < deadline:
        time.sleep(0.01)

    sweeper.stop()

    assert not sweeper.is_running
    assert sweeper.runs >= 1


def test_background_eviction():
    """Потік видаляє прострочені сесії"""
    from medcheck.store import AssessmentStore, SessionSweeper

    now = [datetime(2024, 5, 1, tzinfo=timezone.utc)]
    store = AssessmentStore(clock=lambda: now[0], session_ttl=timedelta(minutes=10))
    store.create_session()
    now[0] += timedelta(minutes=11)

    sweeper = SessionSweeper(store, interval_seconds=0.01)
    sweeper.start()

    deadline = time.monotonic() + 2.0
    while store.session_count and time.monotonic() < deadline:
        time.sleep(0.01)

    sweeper.stop()

    assert store.session_count == 0
    assert sweeper.total_evicted == 1
