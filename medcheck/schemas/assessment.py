"""
MedCheck — Схеми оцінок та сесій

Pydantic моделі для:
- RiskLevel: рівень ризику
- UserInfo: опціональні дані користувача
- Assessment: результат однієї оцінки (незмінний)
- Session: сесія клієнта з історією оцінок
- AssessmentHistory: історія сесії з групуванням за станом
- GlobalStats: агреговані лічильники сховища
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class RiskLevel(str, Enum):
    """Рівень ризику"""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Порядковий номер: low=1, moderate=2, high=3"""
        return _RISK_RANKS[self]

    @classmethod
    def from_rank(cls, rank: int) -> "RiskLevel":
        for level, value in _RISK_RANKS.items():
            if value == rank:
                return level
        raise ValueError(f"Unknown risk rank: {rank}")


_RISK_RANKS = {
    RiskLevel.LOW: 1,
    RiskLevel.MODERATE: 2,
    RiskLevel.HIGH: 3,
}


class Gender(str, Enum):
    """Стать користувача"""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class UserInfo(BaseModel):
    """Дані, які користувач може надати разом з оцінкою"""
    age: Optional[int] = Field(default=None, ge=0, le=150)
    gender: Optional[Gender] = None
    medical_history: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)


class Assessment(BaseModel):
    """
    Результат оцінки симптомів.

    Створюється один раз ScoringEngine.assess() і більше не змінюється.

    Приклад:
        assessment = engine.assess(
            "coronaryheartdisease",
            ["Chest pain", "Fatigue", "Dizziness"],
        )
        assessment.score  # 30
        assessment.risk   # RiskLevel.MODERATE
    """
    id: str = Field(..., description="Ідентифікатор оцінки")
    condition: str = Field(..., description="Ідентифікатор стану")
    condition_name: str = Field(..., description="Назва стану")

    score: int = Field(..., ge=0, le=100, description="Відсоток співпадіння симптомів")
    risk: RiskLevel
    matches: int = Field(..., ge=0, description="Кількість симптомів що співпали")
    total_symptoms: int = Field(..., ge=1, description="Кількість симптомів стану")

    # Всі вибрані симптоми, включно з тими що не співпали
    selected_symptoms: List[str] = Field(default_factory=list)
    risk_factor_score: Optional[int] = Field(default=None, ge=0, le=100)

    recommendations: List[str] = Field(default_factory=list)
    timestamp: datetime

    session_id: Optional[str] = None
    user_info: Optional[UserInfo] = None

    @model_validator(mode="after")
    def check_matches(self) -> "Assessment":
        if self.matches > self.total_symptoms:
            raise ValueError("matches cannot exceed total_symptoms")
        return self

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "assessment_3f2a9c1b7d4e",
                "condition": "coronaryheartdisease",
                "condition_name": "Coronary Heart Disease",
                "score": 30,
                "risk": "moderate",
                "matches": 3,
                "total_symptoms": 10,
                "selected_symptoms": ["Chest pain", "Fatigue", "Dizziness"],
                "risk_factor_score": 50,
                "recommendations": ["⚠️ MODERATE RISK: Consider scheduling a medical consultation."],
                "timestamp": "2024-05-01T10:00:00+00:00",
                "session_id": "session_8b1e4c2f9a0d",
            }
        }


class Session(BaseModel):
    """Сесія клієнта"""
    id: str
    created_at: datetime
    last_activity: datetime
    assessments: List[Assessment] = Field(default_factory=list)
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None

    @property
    def assessment_count(self) -> int:
        return len(self.assessments)


class TrendPoint(BaseModel):
    """Точка тренду ризику"""
    timestamp: datetime
    risk: RiskLevel
    score: int


class RiskTrend(BaseModel):
    """Оцінки одного стану в хронологічному порядку"""
    condition: str
    assessments: List[TrendPoint] = Field(default_factory=list)


class AssessmentHistory(BaseModel):
    """Історія оцінок сесії"""
    session_id: str
    assessments: List[Assessment] = Field(default_factory=list)
    total_assessments: int = 0
    last_assessment: Optional[datetime] = None
    risk_trends: List[RiskTrend] = Field(default_factory=list)


class GlobalStats(BaseModel):
    """Агреговані лічильники сховища"""
    total_sessions: int = 0
    total_assessments: int = 0
    assessments_by_condition: Dict[str, int] = Field(default_factory=dict)
    risk_distribution: Dict[str, int] = Field(default_factory=dict)
    average_assessments_per_session: float = 0.0
