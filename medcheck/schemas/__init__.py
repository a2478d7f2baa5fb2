"""
MedCheck — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації.

Компоненти:
- assessment.py: RiskLevel, UserInfo, Assessment, Session, AssessmentHistory, GlobalStats
- insights.py: AssessmentInsights, HealthInsights

Приклад використання:
    from medcheck.schemas import Assessment, Session

    # Серіалізація в JSON-сумісний словник
    data = session.model_dump(mode="json")

    # Десеріалізація
    session = Session.model_validate(data)
"""

from .assessment import (
    RiskLevel,
    Gender,
    UserInfo,
    Assessment,
    Session,
    TrendPoint,
    RiskTrend,
    AssessmentHistory,
    GlobalStats,
)

from .insights import (
    RiskTrendDirection,
    AssessmentInsights,
    RiskFactorFlag,
    SymptomCluster,
    HealthInsights,
)


__all__ = [
    # Assessment
    "RiskLevel",
    "Gender",
    "UserInfo",
    "Assessment",
    "Session",
    "TrendPoint",
    "RiskTrend",
    "AssessmentHistory",
    "GlobalStats",

    # Insights
    "RiskTrendDirection",
    "AssessmentInsights",
    "RiskFactorFlag",
    "SymptomCluster",
    "HealthInsights",
]
