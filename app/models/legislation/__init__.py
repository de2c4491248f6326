"""Legislation domain models - bills."""

from app.models.legislation.bill import BILL_SCHEMA, Bill

__all__ = [
    "BILL_SCHEMA",
    "Bill",
]
