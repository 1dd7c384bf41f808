"""Shared base for feature board entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    State changes go through ``model_copy(update=...)``, so a repository
    never sees an entity mutated behind its back.
    """

    model_config = ConfigDict(frozen=True)
