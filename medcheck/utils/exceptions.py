"""
MedCheck — Ієрархія винятків

Кожен виняток має код та деталі для відповіді API.
"""

from typing import Any, Dict, Optional


class MedCheckError(Exception):
    """Базовий виняток MedCheck"""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Словник для відповіді API"""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class UnknownConditionError(MedCheckError):
    """Ідентифікатор стану відсутній у каталозі"""

    def __init__(self, condition_id: str):
        super().__init__(
            message=f"Invalid condition: {condition_id}",
            code="UNKNOWN_CONDITION",
            details={"condition": condition_id},
        )
        self.condition_id = condition_id


class NotFoundError(MedCheckError):
    """Сесію або оцінку не знайдено"""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            message=f"{resource.capitalize()} not found",
            code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


class CatalogError(MedCheckError):
    """Некоректні дані каталогу"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="CATALOG_ERROR", details=details)
