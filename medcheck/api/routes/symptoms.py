"""
MedCheck — Symptoms Routes

Пошук симптомів по всіх станах каталогу.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from medcheck.catalog import ConditionCatalog
from ..dependencies import AppState, get_state
from ..models import ApiResponse, SymptomMatch, ok

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


@router.get("/search", response_model=ApiResponse)
async def search_symptoms(
    q: str = Query(default="", max_length=100),
    state: AppState = Depends(get_state)
) -> ApiResponse:
    """
    Пошук симптомів за текстом.

    - **q**: Пошуковий запит (мінімум 2 символи)

    Повертає пари (стан, симптом); пошук case-insensitive.
    """
    query = q.strip()
    min_length = state.api_config.search_min_length

    if len(query) < min_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query parameter 'q' is required and must be at least {min_length} characters"
        )

    catalog: ConditionCatalog = state.catalog
    results = [
        SymptomMatch(condition=condition_id, symptom=symptom)
        for condition_id, symptom in catalog.search(query)
    ]

    return ok(results)
