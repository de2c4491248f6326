"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass(frozen=True)
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def from_row(cls, row: dict[str, Any]):
        """Build entity from a row dict, ignoring unknown keys."""
        return cls(**{f.name: row[f.name] for f in fields(cls)})
