"""
MedCheck — Каталог медичних станів (catalog)

Компоненти:
- ConditionCatalog: get / list_all / search / common_symptoms
- Condition: незмінний запис стану
- ConditionKey: ідентифікатори вбудованих станів

Приклад використання:
    from medcheck.catalog import ConditionCatalog

    catalog = ConditionCatalog.default()
    condition = catalog.get("livercirrhosis")
    print(condition.name, condition.symptom_count)
"""

from .data import ConditionKey, MEDICAL_CONDITIONS
from .catalog import Condition, ConditionCatalog, MIN_SEARCH_LENGTH


__all__ = [
    "ConditionKey",
    "MEDICAL_CONDITIONS",
    "Condition",
    "ConditionCatalog",
    "MIN_SEARCH_LENGTH",
]
