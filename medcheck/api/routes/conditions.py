"""
MedCheck — Conditions Routes

Endpoints для каталогу станів:
- Список всіх станів та спільних симптомів
- Деталі одного стану
"""

from fastapi import APIRouter, Depends, HTTPException

from medcheck.catalog import ConditionCatalog
from ..dependencies import get_catalog
from ..models import ApiResponse, ConditionInfo, ConditionsResponse, ok

router = APIRouter(prefix="/conditions", tags=["Conditions"])


@router.get("", response_model=ApiResponse)
async def list_conditions(
    catalog: ConditionCatalog = Depends(get_catalog)
) -> ApiResponse:
    """Отримати всі стани та симптоми, спільні для кількох станів"""
    conditions = {
        condition_id: ConditionInfo(**condition.to_dict())
        for condition_id, condition in catalog.list_all().items()
    }

    return ok(ConditionsResponse(
        conditions=conditions,
        common_symptoms=catalog.common_symptoms(),
        total_conditions=len(conditions),
    ))


@router.get("/{condition_id}", response_model=ApiResponse)
async def get_condition(
    condition_id: str,
    catalog: ConditionCatalog = Depends(get_catalog)
) -> ApiResponse:
    """Отримати стан з кількістю симптомів та факторів ризику"""
    condition = catalog.get(condition_id)

    if condition is None:
        raise HTTPException(
            status_code=404,
            detail="Condition not found"
        )

    return ok(ConditionInfo(**condition.to_dict()))
