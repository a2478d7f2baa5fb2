"""
MedCheck — Sessions Routes

Endpoints для сесій:
- Створення сесії
- Отримання / оновлення активності
- Історія оцінок сесії
- Статистика та аналітика
"""

from datetime import timedelta

from fastapi import APIRouter, Depends, Request

from medcheck.scoring import summarize_assessments
from medcheck.store import AssessmentStore
from medcheck.utils import NotFoundError
from ..dependencies import (
    AppState,
    client_ip,
    get_state,
    get_store,
    require_session,
)
from ..models import AnalyticsResponse, ApiResponse, HistoryResponse, ok

router = APIRouter(tags=["Sessions"])


@router.post("/sessions", response_model=ApiResponse)
async def create_session(
    request: Request,
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """
    Створити нову сесію.

    User-Agent та IP (X-Forwarded-For / X-Real-IP) зберігаються в сесії.
    """
    session = store.create_session(
        user_agent=request.headers.get("user-agent"),
        ip_address=client_ip(request),
    )
    return ok(session)


@router.get("/sessions", response_model=ApiResponse)
async def session_stats(
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """Статистика сесій та оцінок (для адміністрування)"""
    return ok(store.global_stats())


@router.get("/sessions/{session_id}", response_model=ApiResponse)
async def get_session(
    session_id: str,
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """Отримати сесію (оновлює активність)"""
    require_session(store, session_id)
    store.touch_activity(session_id)
    return ok(require_session(store, session_id))


@router.put("/sessions/{session_id}", response_model=ApiResponse)
async def touch_session(
    session_id: str,
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """Оновити активність сесії"""
    require_session(store, session_id)
    store.touch_activity(session_id)
    return ok(require_session(store, session_id))


@router.get("/history/{session_id}", response_model=ApiResponse)
async def get_history(
    session_id: str,
    store: AssessmentStore = Depends(get_store)
) -> ApiResponse:
    """
    Історія оцінок сесії.

    Повертає:
    - Всі оцінки в порядку створення
    - Тренди ризику по кожному стану
    - Підсумок (найчастіший стан, середній ризик, тренд)
    """
    history = store.get_history(session_id)

    if history is None:
        raise NotFoundError("session", session_id)

    return ok(HistoryResponse(
        history=history,
        insights=summarize_assessments(history.assessments),
    ))


@router.get("/analytics", response_model=ApiResponse)
async def analytics(
    state: AppState = Depends(get_state)
) -> ApiResponse:
    """Статистика системи та активність за останні періоди"""
    store_config = state.config.store

    recent = state.store.recent_activity(
        sessions_window=timedelta(hours=store_config.recent_sessions_hours),
        assessments_window=timedelta(days=store_config.recent_assessments_days),
    )

    return ok(AnalyticsResponse(
        stats=state.store.global_stats(),
        recent_activity=recent,
        uptime_seconds=round(state.uptime_seconds, 3),
    ))
