"""
MedCheck — Сховище сесій та оцінок (store)

Компоненти:
- AssessmentStore: сесії, оцінки, історія, статистика, очистка
- SessionSweeper: фонова періодична очистка неактивних сесій

Приклад використання:
    from medcheck.store import AssessmentStore, SessionSweeper

    store = AssessmentStore()
    session = store.create_session()

    sweeper = SessionSweeper(store, interval_seconds=3600)
    sweeper.start()
"""

from .store import AssessmentStore, DEFAULT_SESSION_TTL
from .sweeper import SessionSweeper


__all__ = [
    "AssessmentStore",
    "DEFAULT_SESSION_TTL",
    "SessionSweeper",
]
