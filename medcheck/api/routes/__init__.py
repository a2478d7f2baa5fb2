"""
MedCheck — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .conditions import router as conditions_router
from .symptoms import router as symptoms_router
from .assessments import router as assessments_router
from .sessions import router as sessions_router

__all__ = [
    'health_router',
    'conditions_router',
    'symptoms_router',
    'assessments_router',
    'sessions_router',
]
