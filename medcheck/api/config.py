"""
MedCheck — API Configuration

Налаштування FastAPI сервера.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML конфігурація ядра (MedCheckConfig)
    config_path: Optional[str] = None
    # JSON каталог станів (перекриває config.catalog_path)
    catalog_path: Optional[str] = None

    # Фоновий sweeper
    enable_sweeper: bool = True

    # Пошук
    search_min_length: int = 2

    # Логування
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api"
    api_title: str = "MedCheck API"
    api_description: str = "Перевірка симптомів та оцінка ризику"
    version: str = "1.0.0"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            config_path=os.getenv("MEDCHECK_CONFIG"),
            catalog_path=os.getenv("MEDCHECK_CATALOG"),
            enable_sweeper=os.getenv("MEDCHECK_SWEEPER", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
