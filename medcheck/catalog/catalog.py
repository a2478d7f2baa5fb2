"""
MedCheck — Каталог медичних станів

Незмінне відображення condition_id → Condition та допоміжні
індекси для пошуку симптомів.
"""

import json
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from medcheck.utils.exceptions import CatalogError
from .data import MEDICAL_CONDITIONS


MIN_SEARCH_LENGTH = 2


def _string_list(condition_id: str, field_name: str, value: Any) -> Tuple[str, ...]:
    """Список рядків з JSON; None означає порожньо"""
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise CatalogError(
            f"Condition '{condition_id}': {field_name} must be a list of strings",
            details={"condition": condition_id, "field": field_name},
        )
    return tuple(value)


@dataclass(frozen=True)
class Condition:
    """Запис про медичний стан"""
    id: str
    name: str
    description: str
    symptoms: Tuple[str, ...]
    risk_factors: Tuple[str, ...]

    @property
    def symptom_count(self) -> int:
        return len(self.symptoms)

    @property
    def risk_factor_count(self) -> int:
        return len(self.risk_factors)

    def to_dict(self) -> Dict[str, Any]:
        """Конвертувати в словник для API"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "symptoms": list(self.symptoms),
            "risk_factors": list(self.risk_factors),
            "symptoms_count": self.symptom_count,
            "risk_factors_count": self.risk_factor_count,
        }


class ConditionCatalog:
    """
    Каталог станів.

    Приклад використання:
        catalog = ConditionCatalog.default()

        condition = catalog.get("coronaryheartdisease")
        print(condition.symptom_count)  # 10

        # Пошук симптомів (case-insensitive)
        catalog.search("chest")
        # [("mesothelioma", "Chest pain"), ("coronaryheartdisease", "Chest pain"), ...]

        # Симптоми, що зустрічаються у кількох станах
        catalog.common_symptoms()  # ["Fatigue", ...]
    """

    def __init__(self, conditions: Mapping[str, Mapping[str, Any]]):
        """
        Args:
            conditions: {condition_id: {name, description, symptoms, riskFactors}}
        """
        self._conditions: Dict[str, Condition] = {}

        for condition_id, data in conditions.items():
            condition = self._build(str(condition_id), data)
            if condition.id in self._conditions:
                raise CatalogError(
                    f"Duplicate condition id: {condition.id}",
                    details={"condition": condition.id},
                )
            self._conditions[condition.id] = condition

        self._common_symptoms = self._count_common_symptoms()

    @staticmethod
    def _build(condition_id: str, data: Mapping[str, Any]) -> Condition:
        if not isinstance(data, Mapping):
            raise CatalogError(
                f"Condition '{condition_id}' must be an object",
                details={"condition": condition_id},
            )

        symptoms = _string_list(condition_id, "symptoms", data.get("symptoms"))
        # JSON з фронтенду використовує camelCase
        risk_factors = _string_list(
            condition_id,
            "riskFactors",
            data.get("riskFactors") or data.get("risk_factors"),
        )

        name = data.get("name", condition_id)
        description = data.get("description", "")
        for field_name, value in (("name", name), ("description", description)):
            if not isinstance(value, str):
                raise CatalogError(
                    f"Condition '{condition_id}': {field_name} must be a string",
                    details={"condition": condition_id, "field": field_name},
                )

        if not symptoms:
            raise CatalogError(
                f"Condition '{condition_id}' has no symptoms",
                details={"condition": condition_id},
            )
        if not risk_factors:
            raise CatalogError(
                f"Condition '{condition_id}' has no risk factors",
                details={"condition": condition_id},
            )

        return Condition(
            id=condition_id,
            name=name,
            description=description,
            symptoms=symptoms,
            risk_factors=risk_factors,
        )

    @classmethod
    def default(cls) -> "ConditionCatalog":
        """Каталог з вбудованими даними"""
        return cls(MEDICAL_CONDITIONS)

    @classmethod
    def from_json(cls, path: str) -> "ConditionCatalog":
        """
        Завантажити каталог з JSON файлу.

        Args:
            path: Шлях до JSON файлу

        Returns:
            ConditionCatalog
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise CatalogError(f"Catalog file must contain a JSON object: {path}")

        return cls(data)

    def get(self, condition_id: str) -> Optional[Condition]:
        """Отримати стан або None"""
        return self._conditions.get(condition_id)

    def list_all(self) -> Dict[str, Condition]:
        """Всі стани в порядку каталогу"""
        return dict(self._conditions)

    def keys(self) -> List[str]:
        return list(self._conditions)

    def search(self, query: str) -> List[Tuple[str, str]]:
        """
        Пошук симптомів за підрядком.

        Args:
            query: Пошуковий запит (мінімум 2 символи)

        Returns:
            Пари (condition_id, symptom); порожній список для коротких запитів
        """
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return []

        query_lower = query.lower()
        return [
            (condition.id, symptom)
            for condition in self._conditions.values()
            for symptom in condition.symptoms
            if query_lower in symptom.lower()
        ]

    def common_symptoms(self) -> List[str]:
        """Симптоми з більш ніж одного стану, за спаданням частоти"""
        return list(self._common_symptoms)

    def _count_common_symptoms(self) -> Tuple[str, ...]:
        counts: Counter = Counter()
        for condition in self._conditions.values():
            counts.update(list(dict.fromkeys(condition.symptoms)))

        # Counter зберігає порядок першої появи, sorted стабільний
        common = [(symptom, n) for symptom, n in counts.items() if n > 1]
        common.sort(key=lambda item: item[1], reverse=True)
        return tuple(symptom for symptom, _ in common)

    def __contains__(self, condition_id: object) -> bool:
        return condition_id in self._conditions

    def __iter__(self) -> Iterator[Condition]:
        return iter(self._conditions.values())

    def __len__(self) -> int:
        return len(self._conditions)

    def __repr__(self) -> str:
        return f"ConditionCatalog(conditions={len(self)})"
