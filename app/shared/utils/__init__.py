"""Shared utilities: datetime, generators."""

from app.shared.utils.datetime import ensure_utc
from app.shared.utils.generators import generate_cuid

__all__ = [
    "ensure_utc",
    "generate_cuid",
]
