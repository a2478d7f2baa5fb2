"""
MedCheck — REST API модуль

FastAPI REST API над каталогом, движком оцінки та сховищем.

Компоненти:
- app.py: create_app() та FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Стан застосунку та Depends

Запуск:
    uvicorn medcheck.api.app:app --reload --port 8000

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET  /health                      - Health check

    GET  /api/conditions              - Всі стани + спільні симптоми
    GET  /api/conditions/{id}         - Деталі стану
    GET  /api/symptoms/search?q=      - Пошук симптомів

    POST /api/assessment              - Створити оцінку
    GET  /api/assessments/{id}        - Отримати оцінку
    POST /api/health-insights         - Аналіз симптомів

    POST /api/sessions                - Створити сесію
    GET  /api/sessions                - Статистика
    GET  /api/sessions/{id}           - Отримати сесію
    PUT  /api/sessions/{id}           - Оновити активність
    GET  /api/history/{session_id}    - Історія оцінок
    GET  /api/analytics               - Аналітика
"""

from .app import app, create_app
from .config import APIConfig
from .dependencies import AppState, get_catalog, get_engine, get_store


__all__ = [
    "app",
    "create_app",
    "APIConfig",
    "AppState",
    "get_catalog",
    "get_engine",
    "get_store",
]
