"""
MedCheck — Аналітика оцінок

- format_assessment_summary: один рядок-підсумок оцінки
- summarize_assessments: найчастіший стан, середній ризик, тренд
- generate_health_insights: детермінований rule-based аналіз симптомів
  (без моделі; однакові входи: однаковий результат)
"""

from typing import Any, Dict, List, Optional, Sequence

from medcheck.schemas import (
    Assessment,
    AssessmentInsights,
    HealthInsights,
    RiskFactorFlag,
    RiskLevel,
    RiskTrendDirection,
    SymptomCluster,
)


# Поріг різниці середнього ризику між половинами історії
TREND_MARGIN = 0.3
TREND_MIN_ASSESSMENTS = 4

RESPIRATORY_SYMPTOMS = ("cough", "shortness_of_breath", "chest_pain")

HEALTH_RECOMMENDATIONS = [
    "Schedule comprehensive medical evaluation",
    "Consider specialized testing based on symptom clusters",
    "Implement symptom tracking and monitoring",
    "Discuss findings with healthcare provider",
    "Consider lifestyle modifications for risk reduction",
]


def format_assessment_summary(assessment: Assessment) -> str:
    """Текстовий підсумок оцінки"""
    return (
        f"{assessment.condition_name} assessment completed with {assessment.score}% symptom match "
        f"({assessment.risk.value} risk). {assessment.matches} out of "
        f"{assessment.total_symptoms} symptoms matched."
    )


def _average_rank(assessments: Sequence[Assessment]) -> float:
    return sum(a.risk.rank for a in assessments) / len(assessments)


def summarize_assessments(assessments: Sequence[Assessment]) -> AssessmentInsights:
    """
    Підсумок по списку оцінок (в порядку створення).

    Args:
        assessments: Оцінки сесії

    Returns:
        AssessmentInsights
    """
    if not assessments:
        return AssessmentInsights()

    counts: Dict[str, int] = {}
    for assessment in assessments:
        counts[assessment.condition] = counts.get(assessment.condition, 0) + 1

    # При рівності перемагає стан, що з'явився пізніше
    most_common = None
    best = 0
    for condition, n in counts.items():
        if n >= best:
            most_common, best = condition, n

    average = _average_rank(assessments)
    if average >= 2.5:
        average_level = RiskLevel.HIGH
    elif average >= 1.5:
        average_level = RiskLevel.MODERATE
    else:
        average_level = RiskLevel.LOW

    unique_symptoms = {s for a in assessments for s in a.selected_symptoms}

    trend = RiskTrendDirection.STABLE
    if len(assessments) >= TREND_MIN_ASSESSMENTS:
        midpoint = len(assessments) // 2
        first = _average_rank(assessments[:midpoint])
        second = _average_rank(assessments[midpoint:])

        if second > first + TREND_MARGIN:
            trend = RiskTrendDirection.WORSENING
        elif first > second + TREND_MARGIN:
            trend = RiskTrendDirection.IMPROVING

    return AssessmentInsights(
        most_common_condition=most_common,
        average_risk_level=average_level,
        total_symptoms=len(unique_symptoms),
        risk_trend=trend,
    )


def _risk_factor_flags(symptoms: Sequence[str]) -> List[RiskFactorFlag]:
    flags = []

    if "chest_pain" in symptoms or "shortness_of_breath" in symptoms:
        flags.append(RiskFactorFlag(
            category="Cardiovascular",
            level="Moderate",
            description="Symptoms suggest potential cardiovascular involvement",
        ))

    if "fatigue" in symptoms and "weight_loss" in symptoms:
        flags.append(RiskFactorFlag(
            category="Systemic",
            level="High",
            description="Constitutional symptoms may indicate systemic condition",
        ))

    return flags


def _symptom_clusters(symptoms: Sequence[str]) -> List[SymptomCluster]:
    respiratory = [s for s in symptoms if s in RESPIRATORY_SYMPTOMS]
    if len(respiratory) < 2:
        return []

    return [SymptomCluster(
        type="Respiratory",
        symptoms=respiratory,
        significance="High correlation with pulmonary conditions",
    )]


def insight_confidence(symptoms: Sequence[str]) -> float:
    """0.75 + 0.05 за симптом (до +0.2), максимум 0.95"""
    bonus = min(len(symptoms) * 0.05, 0.2)
    return round(min(0.75 + bonus, 0.95), 4)


def generate_health_insights(
    symptoms: Sequence[str],
    patient_data: Optional[Dict[str, Any]] = None
) -> HealthInsights:
    """
    Rule-based аналіз симптомів.

    Args:
        symptoms: Коди симптомів у snake_case ("chest_pain", "fatigue")
        patient_data: Дані пацієнта (поки не впливають на результат)

    Returns:
        HealthInsights
    """
    symptoms = list(symptoms or [])

    return HealthInsights(
        risk_factors=_risk_factor_flags(symptoms),
        symptom_clusters=_symptom_clusters(symptoms),
        timeline_analysis={
            "onset": "Gradual over 3-6 months",
            "progression": "Progressive worsening",
            "pattern": "Chronic with acute exacerbations",
        },
        predictive_indicators={
            "early_warning_signs": ["Progressive fatigue", "Unexplained weight loss"],
            "monitoring_recommendations": ["Weekly symptom tracking", "Monthly health assessments"],
            "preventive_actions": ["Lifestyle modifications", "Regular medical follow-up"],
        },
        confidence=insight_confidence(symptoms),
        recommendations=list(HEALTH_RECOMMENDATIONS),
    )
