"""
MedCheck — API Models

Pydantic моделі для запитів та відповідей API.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from medcheck.schemas import (
    Assessment,
    AssessmentHistory,
    AssessmentInsights,
    GlobalStats,
    UserInfo,
)
from medcheck.utils import utc_now


# ============================================================
# Envelope
# ============================================================

class ApiResponse(BaseModel):
    """Стандартна обгортка відповіді"""
    success: bool = True
    data: Optional[Any] = None
    error: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=utc_now)


def ok(data: Any) -> ApiResponse:
    return ApiResponse(success=True, data=data)


# ============================================================
# Condition Models
# ============================================================

class ConditionInfo(BaseModel):
    """Інформація про стан"""
    id: str
    name: str
    description: str
    symptoms: List[str]
    risk_factors: List[str]
    symptoms_count: int
    risk_factors_count: int


class ConditionsResponse(BaseModel):
    """Всі стани каталогу"""
    conditions: Dict[str, ConditionInfo]
    common_symptoms: List[str]
    total_conditions: int


class SymptomMatch(BaseModel):
    """Результат пошуку симптому"""
    condition: str
    symptom: str


# ============================================================
# Assessment Models
# ============================================================

class AssessmentRequest(BaseModel):
    """Запит на оцінку"""
    condition: str = Field(..., min_length=1, description="Ідентифікатор стану")
    symptoms: List[str] = Field(..., description="Вибрані симптоми")
    risk_factors: Optional[List[str]] = None
    user_info: Optional[UserInfo] = None
    session_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "condition": "coronaryheartdisease",
                "symptoms": ["Chest pain", "Fatigue", "Dizziness"],
                "risk_factors": ["Smoking", "Diabetes"],
                "session_id": "session_8b1e4c2f9a0d",
            }
        }


class AssessmentResponse(BaseModel):
    """Оцінка з текстовим підсумком"""
    assessment: Assessment
    summary: str


# ============================================================
# Session Models
# ============================================================

class HistoryResponse(BaseModel):
    """Історія сесії та підсумок"""
    history: AssessmentHistory
    insights: AssessmentInsights


class AnalyticsResponse(BaseModel):
    """Статистика системи"""
    stats: GlobalStats
    recent_activity: Dict[str, int]
    uptime_seconds: float


# ============================================================
# Health Insights Models
# ============================================================

class HealthInsightsRequest(BaseModel):
    """Запит на аналіз симптомів"""
    symptoms: List[str] = Field(default_factory=list)
    patient_data: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "symptoms": ["chest_pain", "cough", "fatigue"],
                "patient_data": {"age": 58},
            }
        }


# ============================================================
# Health Check
# ============================================================

class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "ok"
    version: str = "1.0.0"
    conditions: int = 0
    active_sessions: int = 0
    assessments: int = 0
    sweeper_running: bool = False
