"""
Common base models and utilities.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CardBaseModel(BaseModel):
    """Base model for immutable decoding records."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a JSON-compatible dict, dropping absent fields."""
        return self.model_dump(mode="json", exclude_none=True)
