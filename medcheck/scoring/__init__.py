"""
MedCheck — Движок оцінки ризику (scoring)

Компоненти:
- ScoringEngine: score / recommendations / assess
- generate_recommendations: рекомендації для (risk, condition_id)
- insights: підсумки історії та детермінований аналіз симптомів

Приклад використання:
    from medcheck.catalog import ConditionCatalog
    from medcheck.scoring import ScoringEngine

    engine = ScoringEngine(ConditionCatalog.default())

    result = engine.score("coronaryheartdisease", ["Chest pain", "Fatigue", "Dizziness"])
    print(f"Score: {result.score}%, risk: {result.risk.value}")

    for line in engine.recommendations(result.risk, "coronaryheartdisease"):
        print(f"  - {line}")
"""

from medcheck.schemas import RiskLevel
from .engine import ScoringEngine, ScoreResult, percent, count_matches
from .recommendations import (
    generate_recommendations,
    DISCLAIMERS,
    RISK_TIER_RECOMMENDATIONS,
    CONDITION_RECOMMENDATIONS,
)
from .insights import (
    format_assessment_summary,
    summarize_assessments,
    generate_health_insights,
)


__all__ = [
    # Engine
    "ScoringEngine",
    "ScoreResult",
    "RiskLevel",
    "percent",
    "count_matches",

    # Recommendations
    "generate_recommendations",
    "DISCLAIMERS",
    "RISK_TIER_RECOMMENDATIONS",
    "CONDITION_RECOMMENDATIONS",

    # Insights
    "format_assessment_summary",
    "summarize_assessments",
    "generate_health_insights",
]
