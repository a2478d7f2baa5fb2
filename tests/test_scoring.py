"""
Тести для модуля scoring

Запуск: pytest tests/test_scoring.py -v
"""

from datetime import datetime, timezone

import pytest


CHD = "coronaryheartdisease"
CHD_SYMPTOMS = [
    "Chest pain", "Chest pressure", "Shortness of breath", "Fatigue",
    "Heart palpitations", "Dizziness", "Nausea", "Cold sweats",
    "Pain in arms/shoulders", "Jaw pain",
]


def _engine(**kwargs):
    from medcheck.catalog import ConditionCatalog
    from medcheck.scoring import ScoringEngine

    return ScoringEngine(ConditionCatalog.default(), **kwargs)


def test_percent_half_up():
    """Округлення до найближчого, .5 вгору"""
    from medcheck.scoring import percent

    assert percent(1, 8) == 13      # 12.5
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(1, 12) == 8
    assert percent(7, 12) == 58
    assert percent(0, 10) == 0
    assert percent(10, 10) == 100
    assert percent(3, 0) == 0


def test_count_matches():
    """Співпадіння рахуються як перетин множин"""
    from medcheck.scoring import count_matches

    assert count_matches(["Fatigue", "Fatigue", "Fever"], ["Fatigue", "Nausea"]) == 1
    assert count_matches([], ["Fatigue"]) == 0
    # Порівняння точне, з урахуванням регістру
    assert count_matches(["fatigue"], ["Fatigue"]) == 0


def test_empty_selection():
    """Без симптомів: score 0, низький ризик"""
    from medcheck.scoring import RiskLevel

    result = _engine().score(CHD, [])

    assert result.score == 0
    assert result.matches == 0
    assert result.risk == RiskLevel.LOW
    assert result.risk_factor_score == 0


def test_all_symptoms():
    """Всі симптоми: score 100, високий ризик"""
    from medcheck.scoring import RiskLevel

    result = _engine().score(CHD, CHD_SYMPTOMS)

    assert result.score == 100
    assert result.matches == result.total_symptoms == 10
    assert result.risk == RiskLevel.HIGH


def test_threshold_boundaries():
    """Межі класифікації: 60 → high, 30 → moderate, 20 → low"""
    from medcheck.scoring import RiskLevel

    engine = _engine()

    assert engine.score(CHD, CHD_SYMPTOMS[:6]).risk == RiskLevel.HIGH
    assert engine.score(CHD, CHD_SYMPTOMS[:5]).risk == RiskLevel.MODERATE
    assert engine.score(CHD, CHD_SYMPTOMS[:3]).risk == RiskLevel.MODERATE
    assert engine.score(CHD, CHD_SYMPTOMS[:2]).risk == RiskLevel.LOW


def test_score_monotonic():
    """Додавання симптому стану не зменшує score"""
    engine = _engine()

    scores = [engine.score(CHD, CHD_SYMPTOMS[:n]).score for n in range(len(CHD_SYMPTOMS) + 1)]

    assert scores == sorted(scores)
    assert all(0 <= s <= 100 for s in scores)


def test_unrelated_symptoms_ignored():
    """Симптоми не з каталогу стану не впливають на score"""
    engine = _engine()

    base = engine.score(CHD, ["Chest pain"])
    noisy = engine.score(CHD, ["Chest pain", "Jaundice", "Itchy skin"])

    assert base.score == noisy.score == 10


def test_risk_factor_escalation():
    """Фактори ризику: 50 → low стає moderate"""
    from medcheck.scoring import RiskLevel

    result = _engine().score(CHD, ["Jaw pain"], ["Smoking", "Diabetes"])

    assert result.score == 10
    assert result.risk_factor_score == 50
    assert result.risk == RiskLevel.MODERATE


def test_risk_factor_cascade():
    """Фактори ризику 75: low стає high за одну оцінку"""
    from medcheck.scoring import RiskLevel

    result = _engine().score(CHD, ["Jaw pain"], ["Smoking", "Diabetes", "High cholesterol"])

    assert result.risk_factor_score == 75
    assert result.risk == RiskLevel.HIGH


def test_escalate_never_lowers():
    """Ескалація ніколи не знижує ризик"""
    from medcheck.scoring import RiskLevel

    engine = _engine()

    assert engine.escalate(RiskLevel.HIGH, 0) == RiskLevel.HIGH
    assert engine.escalate(RiskLevel.MODERATE, 49) == RiskLevel.MODERATE
    assert engine.escalate(RiskLevel.MODERATE, 75) == RiskLevel.HIGH
    assert engine.escalate(RiskLevel.LOW, 74) == RiskLevel.MODERATE


def test_coronary_scenario():
    """Chest pain + Fatigue + Dizziness, Smoking + Diabetes → 30, moderate"""
    from medcheck.scoring import RiskLevel

    result = _engine().score(
        CHD,
        ["Chest pain", "Fatigue", "Dizziness"],
        ["Smoking", "Diabetes"],
    )

    assert result.score == 30
    assert result.matches == 3
    assert result.risk_factor_score == 50
    assert result.risk == RiskLevel.MODERATE


def test_custom_thresholds():
    """Пороги беруться з ScoringConfig"""
    from medcheck.config import ScoringConfig
    from medcheck.scoring import RiskLevel

    engine = _engine(config=ScoringConfig(high_threshold=20, moderate_threshold=10))

    assert engine.score(CHD, CHD_SYMPTOMS[:2]).risk == RiskLevel.HIGH
    assert engine.score(CHD, CHD_SYMPTOMS[:1]).risk == RiskLevel.MODERATE


def test_unknown_condition():
    """Невідомий стан → UnknownConditionError"""
    from medcheck.utils import UnknownConditionError

    engine = _engine()

    with pytest.raises(UnknownConditionError) as exc_info:
        engine.score("flu", ["Fever"])

    assert exc_info.value.code == "UNKNOWN_CONDITION"
    assert str(exc_info.value) == "Invalid condition: flu"


def test_assess():
    """Тест повної оцінки"""
    from medcheck.scoring import RiskLevel

    now = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    engine = _engine(clock=lambda: now)

    assessment = engine.assess(
        CHD,
        ["Chest pain", "Fatigue", "Chest pain", "Dizziness"],
        ["Smoking", "Diabetes"],
        session_id="session_abc",
    )

    assert assessment.id.startswith("assessment_")
    assert assessment.condition == CHD
    assert assessment.condition_name == "Coronary Heart Disease"
    assert assessment.score == 30
    assert assessment.risk == RiskLevel.MODERATE
    assert assessment.selected_symptoms == ["Chest pain", "Fatigue", "Dizziness"]
    assert assessment.risk_factor_score == 50
    assert assessment.timestamp == now
    assert assessment.session_id == "session_abc"
    assert assessment.recommendations[0].startswith("⚠️ MODERATE RISK")

    print(f"✓ Assessment: {assessment.score}% ({assessment.risk.value})")


def test_assess_unique_ids():
    """Кожна оцінка отримує новий id"""
    engine = _engine()

    ids = {engine.assess(CHD, ["Fatigue"]).id for _ in range(20)}

    assert len(ids) == 20


def test_score_result_to_dict():
    """ScoreResult серіалізується з рядковим ризиком"""
    result = _engine().score(CHD, CHD_SYMPTOMS[:6])

    data = result.to_dict()

    assert data["score"] == 60
    assert data["risk"] == "high"
    assert data["total_symptoms"] == 10
