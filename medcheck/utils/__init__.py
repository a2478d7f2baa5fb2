"""
MedCheck — Логування та винятки
"""
from .logging import get_logger, setup_logging, StructuredFormatter
from .ids import utc_now, generate_id
from .exceptions import (
    MedCheckError,
    UnknownConditionError,
    NotFoundError,
    CatalogError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "StructuredFormatter",
    "utc_now",
    "generate_id",
    "MedCheckError",
    "UnknownConditionError",
    "NotFoundError",
    "CatalogError",
]
