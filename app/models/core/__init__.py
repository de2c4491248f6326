"""Core domain models - legislators."""

from app.models.core.legislator import LEGISLATOR_SCHEMA, Legislator

__all__ = [
    "LEGISLATOR_SCHEMA",
    "Legislator",
]
