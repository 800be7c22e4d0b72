"""Shared base for Atelier entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity. Changes produce a new instance via ``evolve``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied, leaving ``self`` untouched."""
        return self.model_copy(update=changes)
