"""
MedCheck — Assessment Routes

Endpoints для оцінок:
- Створення оцінки (score + рекомендації, збереження в сховищі)
- Отримання збереженої оцінки
- Детермінований аналіз симптомів (health insights)
"""

from fastapi import APIRouter, Depends

from medcheck.scoring import (
    ScoringEngine,
    format_assessment_summary,
    generate_health_insights,
)
from medcheck.store import AssessmentStore
from medcheck.utils import get_logger
from ..dependencies import get_engine, get_store, require_assessment
from ..models import (
    ApiResponse,
    AssessmentRequest,
    AssessmentResponse,
    HealthInsightsRequest,
    ok,
)

router = APIRouter(tags=["Assessments"])

logger = get_logger(__name__)


@router.post("/assessment", response_model=ApiResponse)
async def create_assessment(
    request: AssessmentRequest,
    engine: ScoringEngine = Depends(get_engine),
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """
    Створити оцінку симптомів.

    Приклад:
    ```json
    {
        "condition": "coronaryheartdisease",
        "symptoms": ["Chest pain", "Fatigue", "Dizziness"],
        "risk_factors": ["Smoking", "Diabetes"]
    }
    ```

    Невідомий стан → 400. Якщо передано session_id живої сесії,
    оцінка додається до її історії.
    """
    assessment = engine.assess(
        condition_id=request.condition,
        symptoms=request.symptoms,
        risk_factors=request.risk_factors,
        session_id=request.session_id,
        user_info=request.user_info,
    )
    store.save_assessment(assessment)

    logger.info(
        "Assessment %s saved (%s, %s risk)",
        assessment.id, assessment.condition, assessment.risk.value
    )

    return ok(AssessmentResponse(
        assessment=assessment,
        summary=format_assessment_summary(assessment),
    ))


@router.get("/assessments/{assessment_id}", response_model=ApiResponse)
async def get_assessment(
    assessment_id: str,
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """Отримати збережену оцінку"""
    return ok(require_assessment(store, assessment_id))


@router.post("/health-insights", response_model=ApiResponse)
async def health_insights(request: HealthInsightsRequest) -> ApiResponse:
    """
    Rule-based аналіз симптомів.

    Результат повністю визначається вхідними даними.
    """
    return ok(generate_health_insights(request.symptoms, request.patient_data))
