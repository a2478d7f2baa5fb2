"""
MedCheck — Схеми аналітики оцінок

- AssessmentInsights: підсумок по списку оцінок
- HealthInsights: детермінований аналіз набору симптомів
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .assessment import RiskLevel


class RiskTrendDirection(str, Enum):
    """Напрям зміни ризику"""
    IMPROVING = "improving"
    WORSENING = "worsening"
    STABLE = "stable"


class AssessmentInsights(BaseModel):
    """Підсумок по історії оцінок"""
    most_common_condition: Optional[str] = None
    average_risk_level: RiskLevel = RiskLevel.LOW
    total_symptoms: int = Field(default=0, description="Кількість унікальних вибраних симптомів")
    risk_trend: RiskTrendDirection = RiskTrendDirection.STABLE


class RiskFactorFlag(BaseModel):
    category: str
    level: str
    description: str


class SymptomCluster(BaseModel):
    type: str
    symptoms: List[str]
    significance: str


class HealthInsights(BaseModel):
    """Результат generate_health_insights()"""
    risk_factors: List[RiskFactorFlag] = Field(default_factory=list)
    symptom_clusters: List[SymptomCluster] = Field(default_factory=list)
    timeline_analysis: Dict[str, str] = Field(default_factory=dict)
    predictive_indicators: Dict[str, List[str]] = Field(default_factory=dict)
    confidence: float = Field(..., ge=0.0, le=1.0)
    recommendations: List[str] = Field(default_factory=list)
