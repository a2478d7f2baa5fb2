"""MedCheck — Модуль конфігурації"""
from .settings import (
    MedCheckConfig,
    get_default_config,
    ScoringConfig,
    StoreConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml

__all__ = [
    "MedCheckConfig",
    "get_default_config",
    "ScoringConfig",
    "StoreConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
]
