"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    @classmethod
    def columns(cls) -> list[str]:
        """Field names in declaration order (used as SELECT column lists)."""
        return [f.name for f in fields(cls)]

    @classmethod
    def from_row(cls, row: tuple | None):
        """Build entity from a row selected with ``columns()``."""
        if row is None:
            return None
        return cls(**dict(zip(cls.columns(), row, strict=True)))

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)
