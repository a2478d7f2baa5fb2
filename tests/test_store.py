"""
Тести для модуля store

Запуск: pytest tests/test_store.py -v
"""

from datetime import datetime, timedelta, timezone
import threading


T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Керований годинник для тестів"""

    def __init__(self, now=T0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


def _setup(clock=None):
    from medcheck.catalog import ConditionCatalog
    from medcheck.scoring import ScoringEngine
    from medcheck.store import AssessmentStore

    clock = clock or FakeClock()
    catalog = ConditionCatalog.default()
    store = AssessmentStore(clock=clock, condition_ids=catalog.keys())
    engine = ScoringEngine(catalog, clock=clock)
    return store, engine, clock


def test_create_session():
    """Нова сесія: created_at == last_activity, порожня історія"""
    store, _, _ = _setup()

    session = store.create_session(user_agent="pytest", ip_address="10.0.0.1")

    assert session.id.startswith("session_")
    assert session.created_at == session.last_activity == T0
    assert session.assessments == []
    assert session.user_agent == "pytest"
    assert store.get_session(session.id).ip_address == "10.0.0.1"
    assert store.session_count == 1


def test_get_session_returns_copy():
    """Зміни копії не впливають на сховище"""
    store, engine, _ = _setup()
    session = store.create_session()

    copy = store.get_session(session.id)
    copy.assessments.append(engine.assess("mesothelioma", ["Fatigue"]))

    assert store.get_session(session.id).assessments == []
    assert store.get_session("session_missing") is None


def test_touch_activity():
    """touch_activity оновлює last_activity; відсутня сесія: no-op"""
    store, _, clock = _setup()
    session = store.create_session()

    clock.advance(minutes=5)
    store.touch_activity(session.id)
    store.touch_activity("session_missing")

    updated = store.get_session(session.id)
    assert updated.last_activity == T0 + timedelta(minutes=5)
    assert updated.created_at == T0


def test_last_activity_never_decreases():
    """Годинник назад не зменшує last_activity"""
    store, _, clock = _setup()
    session = store.create_session()

    clock.advance(minutes=-10)
    store.touch_activity(session.id)

    assert store.get_session(session.id).last_activity == T0


def test_save_assessment_to_session():
    """Оцінка з session_id додається до сесії та оновлює активність"""
    store, engine, clock = _setup()
    session = store.create_session()

    clock.advance(minutes=1)
    assessment = engine.assess("coronaryheartdisease", ["Chest pain"], session_id=session.id)
    store.save_assessment(assessment)

    stored = store.get_session(session.id)
    assert [a.id for a in stored.assessments] == [assessment.id]
    assert stored.last_activity == T0 + timedelta(minutes=1)
    assert store.get_assessment(assessment.id) == assessment
    assert store.get_session_assessments(session.id) == [assessment]


def test_save_assessment_without_session():
    """Оцінка без сесії (або з видаленою сесією) зберігається окремо"""
    store, engine, _ = _setup()

    standalone = engine.assess("mesothelioma", ["Fatigue"])
    orphan = engine.assess("mesothelioma", ["Fatigue"], session_id="session_missing")
    store.save_assessment(standalone)
    store.save_assessment(orphan)

    assert store.get_assessment(standalone.id) is not None
    assert store.get_assessment(orphan.id) is not None
    assert store.get_session_assessments("session_missing") == []
    assert store.assessment_count == 2


def test_history():
    """Історія: всі оцінки в порядку створення, тренди по станах"""
    store, engine, clock = _setup()
    session = store.create_session()

    conditions = ["mesothelioma", "livercirrhosis", "mesothelioma"]
    saved = []
    for condition in conditions:
        clock.advance(minutes=1)
        assessment = engine.assess(condition, ["Fatigue", "Weight loss"], session_id=session.id)
        store.save_assessment(assessment)
        saved.append(assessment)

    history = store.get_history(session.id)

    assert history.total_assessments == 3
    assert [a.id for a in history.assessments] == [a.id for a in saved]
    assert history.last_assessment == saved[-1].timestamp
    assert [t.condition for t in history.risk_trends] == ["mesothelioma", "livercirrhosis"]
    assert len(history.risk_trends[0].assessments) == 2

    timestamps = [p.timestamp for p in history.risk_trends[0].assessments]
    assert timestamps == sorted(timestamps)


def test_history_empty_and_missing():
    """Порожня сесія: без last_assessment; відсутня повертає None"""
    store, _, _ = _setup()
    session = store.create_session()

    history = store.get_history(session.id)

    assert history.total_assessments == 0
    assert history.last_assessment is None
    assert history.risk_trends == []
    assert store.get_history("session_missing") is None


def test_global_stats():
    """Лічильники заповнені нулями для всіх станів та рівнів"""
    store, engine, _ = _setup()

    empty = store.global_stats()
    assert empty.total_sessions == 0
    assert empty.average_assessments_per_session == 0.0
    assert empty.assessments_by_condition["livercirrhosis"] == 0
    assert empty.risk_distribution == {"low": 0, "moderate": 0, "high": 0}

    session = store.create_session()
    store.create_session()
    store.save_assessment(engine.assess("livercirrhosis", ["Fatigue"], session_id=session.id))
    store.save_assessment(engine.assess(
        "coronaryheartdisease",
        ["Chest pain", "Chest pressure", "Shortness of breath", "Fatigue", "Dizziness", "Nausea"],
        session_id=session.id,
    ))
    store.save_assessment(engine.assess("livercirrhosis", ["Fatigue"]))

    stats = store.global_stats()

    assert stats.total_sessions == 2
    assert stats.total_assessments == 3
    assert stats.assessments_by_condition["livercirrhosis"] == 2
    assert stats.assessments_by_condition["mesothelioma"] == 0
    assert stats.risk_distribution == {"low": 2, "moderate": 0, "high": 1}
    assert stats.average_assessments_per_session == 1.5


def test_recent_activity():
    """Активні сесії за 24 години, оцінки за 7 днів"""
    store, engine, clock = _setup()

    old = store.create_session()
    store.save_assessment(engine.assess("mesothelioma", ["Fatigue"], session_id=old.id))

    clock.advance(hours=30)
    store.create_session()

    activity = store.recent_activity()
    assert activity == {"recent_sessions": 1, "recent_assessments": 1}

    later = store.recent_activity(now=clock.now + timedelta(days=7))
    assert later == {"recent_sessions": 0, "recent_assessments": 0}


def test_sweep_expired():
    """Сесії неактивні довше TTL видаляються разом з оцінками"""
    store, engine, clock = _setup()

    old = store.create_session()
    old_assessment = engine.assess("mesothelioma", ["Fatigue"], session_id=old.id)
    store.save_assessment(old_assessment)

    clock.advance(hours=23)
    fresh = store.create_session()

    clock.advance(hours=2)  # old: 25 годин, fresh: 2 години
    evicted = store.sweep_expired()

    assert evicted == 1
    assert store.get_session(old.id) is None
    assert store.get_assessment(old_assessment.id) is None
    assert store.get_session(fresh.id) is not None
    assert store.sweep_expired() == 0


def test_sweep_keeps_active_session():
    """Активність продовжує життя сесії"""
    store, _, clock = _setup()
    session = store.create_session()

    clock.advance(hours=20)
    store.touch_activity(session.id)
    clock.advance(hours=20)

    assert store.sweep_expired() == 0
    assert store.get_session(session.id) is not None


def test_custom_ttl():
    """TTL задається при створенні сховища"""
    from medcheck.store import AssessmentStore

    clock = FakeClock()
    store = AssessmentStore(clock=clock, session_ttl=timedelta(minutes=30))
    store.create_session()

    clock.advance(minutes=31)

    assert store.sweep_expired() == 1


def test_concurrent_saves():
    """Паралельні записи не губляться"""
    store, engine, _ = _setup()
    session = store.create_session()

    def worker():
        for _ in range(50):
            store.save_assessment(engine.assess("mesothelioma", ["Fatigue"], session_id=session.id))
            store.touch_activity(session.id)
            store.global_stats()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.assessment_count == 400
    assert store.get_history(session.id).total_assessments == 400


def test_save_assessment_twice():
    """Повторне збереження не дублює оцінку в історії сесії"""
    store, engine, _ = _setup()
    session = store.create_session()

    assessment = engine.assess("mesothelioma", ["Fatigue"], session_id=session.id)
    store.save_assessment(assessment)
    store.save_assessment(assessment)

    assert store.assessment_count == 1
    assert store.get_history(session.id).total_assessments == 1
    assert store.global_stats().total_assessments == 1


def test_last_assessment_is_latest_timestamp():
    """last_assessment: найпізніший timestamp, навіть якщо оцінки додані не по порядку"""
    store, engine, clock = _setup()
    session = store.create_session()

    clock.advance(minutes=2)
    later = engine.assess("mesothelioma", ["Fatigue"], session_id=session.id)
    clock.advance(minutes=-1)
    earlier = engine.assess("mesothelioma", ["Fatigue"], session_id=session.id)

    store.save_assessment(later)
    store.save_assessment(earlier)

    history = store.get_history(session.id)

    assert [a.id for a in history.assessments] == [later.id, earlier.id]
    assert history.last_assessment == later.timestamp
    assert [p.timestamp for p in history.risk_trends[0].assessments] == [
        earlier.timestamp, later.timestamp,
    ]
