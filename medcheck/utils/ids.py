"""MedCheck — Ідентифікатори та час"""
from datetime import datetime, timezone
import uuid


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_id(prefix: str) -> str:
    """Унікальний ідентифікатор виду '<prefix>_<12 hex>'"""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"
