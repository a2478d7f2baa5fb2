"""
MedCheck — Перевірка симптомів та оцінка ризику

Архітектура: Каталог станів + Движок оцінки + Сховище сесій

Модулі:
- config: Конфігурація системи
- catalog: Довідник медичних станів (симптоми, фактори ризику)
- scoring: Обчислення score, рівня ризику та рекомендацій
- store: Сесії та оцінки в пам'яті процесу, очистка застарілих сесій
- schemas: Pydantic записи (Assessment, Session, History)
- utils: Логування та винятки
- api: Backend API
"""

__version__ = "0.1.0"

from .config import MedCheckConfig, get_default_config
from .catalog import ConditionCatalog, Condition, ConditionKey
from .scoring import ScoringEngine, ScoreResult, RiskLevel, generate_recommendations
from .store import AssessmentStore, SessionSweeper
