"""
MedCheck — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from ..dependencies import AppState, get_state
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    state: AppState = Depends(get_state)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Кількість станів у каталозі
    - Кількість активних сесій та оцінок
    - Чи працює фоновий sweeper
    """
    sweeper_running = state.sweeper.is_running if state.sweeper else False

    return HealthResponse(
        status="ok",
        version=state.api_config.version,
        conditions=len(state.catalog),
        active_sessions=state.store.session_count,
        assessments=state.store.assessment_count,
        sweeper_running=sweeper_running,
    )


@router.get("/")
async def root(state: AppState = Depends(get_state)):
    """Головна сторінка API"""
    return {
        "name": state.api_config.api_title,
        "version": state.api_config.version,
        "description": state.api_config.api_description,
        "docs": "/docs",
        "health": "/health",
    }
