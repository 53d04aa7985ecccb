"""Base model for toplist entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for entities (servers, votes, profiles).

    Entities are immutable; updates go through ``model_copy`` or a
    repository write.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Username and other root value objects
    )
