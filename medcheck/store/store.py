"""
MedCheck — Сховище сесій та оцінок

Дві мапи в пам'яті процесу:
- sessions: session_id → Session
- assessments: assessment_id → Assessment

Всі операції виконуються під одним lock; читання повертають копії,
тож виклики поза lock не бачать часткових змін.
"""

from datetime import datetime, timedelta
import threading
from typing import Callable, Dict, Iterable, List, Optional

from medcheck.schemas import (
    Assessment,
    AssessmentHistory,
    GlobalStats,
    RiskLevel,
    RiskTrend,
    Session,
    TrendPoint,
)
from medcheck.utils import generate_id, get_logger, utc_now


logger = get_logger(__name__)


DEFAULT_SESSION_TTL = timedelta(hours=24)


class AssessmentStore:
    """
    Сховище сесій та оцінок.

    Приклад використання:
        store = AssessmentStore(condition_ids=catalog.keys())

        session = store.create_session(user_agent="Mozilla/5.0")
        store.save_assessment(engine.assess(..., session_id=session.id))

        history = store.get_history(session.id)

        # Періодично
        evicted = store.sweep_expired()
    """

    def __init__(
        self,
        lock=None,
        clock: Callable[[], datetime] = utc_now,
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
        condition_ids: Iterable[str] = ()
    ):
        """
        Args:
            lock: Lock для всіх операцій (за замовчуванням threading.RLock)
            clock: Джерело поточного часу
            session_ttl: Час неактивності, після якого сесія видаляється
            condition_ids: Стани для нульових лічильників у global_stats()
        """
        self._lock = lock if lock is not None else threading.RLock()
        self._clock = clock
        self.session_ttl = session_ttl
        self.condition_ids = list(condition_ids)

        self._sessions: Dict[str, Session] = {}
        self._assessments: Dict[str, Assessment] = {}

    # === Sessions ===

    def create_session(
        self,
        user_agent: Optional[str] = None,
        ip_address: Optional[str] = None
    ) -> Session:
        """Створити нову сесію (created_at == last_activity)"""
        now = self._clock()

        with self._lock:
            session_id = generate_id("session")
            while session_id in self._sessions:
                session_id = generate_id("session")

            session = Session(
                id=session_id,
                created_at=now,
                last_activity=now,
                user_agent=user_agent,
                ip_address=ip_address,
            )
            self._sessions[session_id] = session
            snapshot = session.model_copy(deep=True)

        logger.debug("Session created: %s", session_id)
        return snapshot

    def get_session(self, session_id: str) -> Optional[Session]:
        """Отримати копію сесії або None"""
        with self._lock:
            session = self._sessions.get(session_id)
            return session.model_copy(deep=True) if session else None

    def touch_activity(self, session_id: str) -> None:
        """Оновити last_activity; відсутня сесія: no-op"""
        with self._lock:
            self._touch(session_id)

    def _touch(self, session_id: str) -> None:
        session = self._sessions.get(session_id)
        if session is None:
            return
        now = self._clock()
        # last_activity не зменшується
        if now > session.last_activity:
            session.last_activity = now

    # === Assessments ===

    def save_assessment(self, assessment: Assessment) -> None:
        """
        Зберегти оцінку.

        Якщо assessment.session_id вказує на живу сесію: додати до неї
        та оновити активність. Інакше оцінка зберігається окремо.
        Оцінка з уже відомим id до сесії вдруге не додається.
        """
        with self._lock:
            is_new = assessment.id not in self._assessments
            self._assessments[assessment.id] = assessment

            if is_new and assessment.session_id:
                session = self._sessions.get(assessment.session_id)
                if session is not None:
                    session.assessments.append(assessment)
                    self._touch(assessment.session_id)

    def get_assessment(self, assessment_id: str) -> Optional[Assessment]:
        """Отримати оцінку або None"""
        with self._lock:
            return self._assessments.get(assessment_id)

    def get_session_assessments(self, session_id: str) -> List[Assessment]:
        """Оцінки сесії (порожньо якщо сесії немає)"""
        with self._lock:
            session = self._sessions.get(session_id)
            return list(session.assessments) if session else []

    def get_history(self, session_id: str) -> Optional[AssessmentHistory]:
        """
        Історія оцінок сесії.

        Returns:
            AssessmentHistory з трендами по станах, або None
        """
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            assessments = list(session.assessments)

        # Групування за станом у порядку першої появи
        groups: Dict[str, List[TrendPoint]] = {}
        for assessment in assessments:
            groups.setdefault(assessment.condition, []).append(TrendPoint(
                timestamp=assessment.timestamp,
                risk=assessment.risk,
                score=assessment.score,
            ))

        risk_trends = [
            RiskTrend(
                condition=condition,
                assessments=sorted(points, key=lambda p: p.timestamp),
            )
            for condition, points in groups.items()
        ]

        return AssessmentHistory(
            session_id=session_id,
            assessments=assessments,
            total_assessments=len(assessments),
            last_assessment=max(a.timestamp for a in assessments) if assessments else None,
            risk_trends=risk_trends,
        )

    # === Analytics ===

    def global_stats(self) -> GlobalStats:
        """Агреговані лічильники"""
        with self._lock:
            total_sessions = len(self._sessions)
            assessments = list(self._assessments.values())

        by_condition = {condition_id: 0 for condition_id in self.condition_ids}
        risk_distribution = {level.value: 0 for level in RiskLevel}

        for assessment in assessments:
            by_condition[assessment.condition] = by_condition.get(assessment.condition, 0) + 1
            risk_distribution[assessment.risk.value] += 1

        average = len(assessments) / total_sessions if total_sessions > 0 else 0.0

        return GlobalStats(
            total_sessions=total_sessions,
            total_assessments=len(assessments),
            assessments_by_condition=by_condition,
            risk_distribution=risk_distribution,
            average_assessments_per_session=average,
        )

    def recent_activity(
        self,
        now: Optional[datetime] = None,
        sessions_window: timedelta = timedelta(hours=24),
        assessments_window: timedelta = timedelta(days=7)
    ) -> Dict[str, int]:
        """Активні сесії та нові оцінки за останні періоди"""
        now = now or self._clock()

        with self._lock:
            sessions = sum(
                1 for s in self._sessions.values()
                if s.last_activity > now - sessions_window
            )
            assessments = sum(
                1 for a in self._assessments.values()
                if a.timestamp > now - assessments_window
            )

        return {
            "recent_sessions": sessions,
            "recent_assessments": assessments,
        }

    # === Eviction ===

    def sweep_expired(self, now: Optional[datetime] = None) -> int:
        """
        Видалити сесії, неактивні довше session_ttl, разом з їх оцінками.

        Returns:
            Кількість видалених сесій
        """
        now = now or self._clock()
        cutoff = now - self.session_ttl

        with self._lock:
            expired = [
                sid for sid, session in self._sessions.items()
                if session.last_activity < cutoff
            ]

            for sid in expired:
                session = self._sessions.pop(sid)
                for assessment in session.assessments:
                    self._assessments.pop(assessment.id, None)

        if expired:
            logger.info("Evicted %d expired sessions", len(expired))

        return len(expired)

    @property
    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    @property
    def assessment_count(self) -> int:
        with self._lock:
            return len(self._assessments)

    def __repr__(self) -> str:
        return (
            f"AssessmentStore("
            f"sessions={self.session_count}, "
            f"assessments={self.assessment_count}"
            f")"
        )
