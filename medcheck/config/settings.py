"""
MedCheck — Налаштування системи

Всі параметри зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.scoring.high_threshold
- Серіалізації в YAML
"""

from dataclasses import dataclass, field, fields
from datetime import timedelta
from typing import Any, Dict, Optional


# =============================================================================
# SCORING CONFIGURATION
# =============================================================================

@dataclass
class ScoringConfig:
    """Пороги класифікації ризику"""

    # Базовий ризик за score симптомів
    high_threshold: int = 60
    moderate_threshold: int = 30

    # Ескалація за score факторів ризику
    risk_factor_moderate: int = 50   # low → moderate
    risk_factor_high: int = 75       # moderate → high


# =============================================================================
# STORE CONFIGURATION
# =============================================================================

@dataclass
class StoreConfig:
    """Параметри сховища сесій"""

    session_ttl_hours: int = 24
    sweep_interval_minutes: int = 60

    # Вікна для аналітики
    recent_sessions_hours: int = 24
    recent_assessments_days: int = 7

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(hours=self.session_ttl_hours)

    @property
    def sweep_interval_seconds(self) -> float:
        return self.sweep_interval_minutes * 60.0


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class MedCheckConfig:
    """
    Головна конфігурація MedCheck

    Приклад використання:
        config = MedCheckConfig()
        print(config.scoring.high_threshold)  # 60
        print(config.store.session_ttl_hours)  # 24
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "MedCheck"

    # Каталог (None = вбудовані дані)
    catalog_path: Optional[str] = None

    # Компоненти
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    store: StoreConfig = field(default_factory=StoreConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "MedCheckConfig":
        """Створити конфігурацію зі словника (невідомі ключі ігноруються)"""
        data = data or {}
        config = cls(**_known(cls, data, exclude=("scoring", "store")))
        config.scoring = ScoringConfig(**_known(ScoringConfig, data.get("scoring") or {}))
        config.store = StoreConfig(**_known(StoreConfig, data.get("store") or {}))
        return config


def _known(cls, data: Dict[str, Any], exclude: tuple = ()) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)} - set(exclude)
    return {k: v for k, v in data.items() if k in names}


def get_default_config() -> MedCheckConfig:
    """Конфігурація за замовчуванням"""
    return MedCheckConfig()
