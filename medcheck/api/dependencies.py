"""
MedCheck — API Dependencies

Dependency Injection для FastAPI.
Каталог, движок, сховище та sweeper створюються один раз у create_app()
і зберігаються в app.state; роути отримують їх через Depends.
"""

from dataclasses import dataclass
import time
from typing import Optional

from fastapi import Request

from medcheck.catalog import ConditionCatalog
from medcheck.config import MedCheckConfig, load_config
from medcheck.scoring import ScoringEngine
from medcheck.store import AssessmentStore, SessionSweeper
from medcheck.utils import NotFoundError, get_logger
from medcheck.schemas import Assessment, Session
from .config import APIConfig


logger = get_logger(__name__)


@dataclass
class AppState:
    """Компоненти ядра, спільні для всіх запитів"""
    api_config: APIConfig
    config: MedCheckConfig
    catalog: ConditionCatalog
    engine: ScoringEngine
    store: AssessmentStore
    sweeper: Optional[SessionSweeper] = None
    started_at: float = 0.0

    @classmethod
    def build(
        cls,
        api_config: Optional[APIConfig] = None,
        config: Optional[MedCheckConfig] = None
    ) -> "AppState":
        """Зібрати компоненти з конфігурації"""
        api_config = api_config or APIConfig()

        if config is None:
            config = load_config(api_config.config_path) if api_config.config_path else MedCheckConfig()

        catalog_path = api_config.catalog_path or config.catalog_path
        if catalog_path:
            catalog = ConditionCatalog.from_json(catalog_path)
        else:
            catalog = ConditionCatalog.default()

        store = AssessmentStore(
            session_ttl=config.store.session_ttl,
            condition_ids=catalog.keys(),
        )

        sweeper = None
        if api_config.enable_sweeper:
            sweeper = SessionSweeper(store, interval_seconds=config.store.sweep_interval_seconds)

        logger.info("Catalog loaded: %d conditions", len(catalog))

        return cls(
            api_config=api_config,
            config=config,
            catalog=catalog,
            engine=ScoringEngine(catalog, config.scoring),
            store=store,
            sweeper=sweeper,
            started_at=time.monotonic(),
        )

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self.started_at


# Dependency functions для FastAPI

def get_state(request: Request) -> AppState:
    """Dependency: стан застосунку"""
    return request.app.state.medcheck


def get_catalog(request: Request) -> ConditionCatalog:
    """Dependency: каталог станів"""
    return get_state(request).catalog


def get_engine(request: Request) -> ScoringEngine:
    """Dependency: движок оцінки"""
    return get_state(request).engine


def get_store(request: Request) -> AssessmentStore:
    """Dependency: сховище сесій"""
    return get_state(request).store


def require_session(store: AssessmentStore, session_id: str) -> Session:
    """Сесія або NotFoundError"""
    session = store.get_session(session_id)
    if session is None:
        raise NotFoundError("session", session_id)
    return session


def require_assessment(store: AssessmentStore, assessment_id: str) -> Assessment:
    """Оцінка або NotFoundError"""
    assessment = store.get_assessment(assessment_id)
    if assessment is None:
        raise NotFoundError("assessment", assessment_id)
    return assessment


def client_ip(request: Request) -> str:
    """IP клієнта з X-Forwarded-For / X-Real-IP"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("x-real-ip") or "unknown"
