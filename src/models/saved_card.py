"""
Saved card-designer state.
"""

from pydantic import Field, field_validator

from src.models.base import CardBaseModel


class SavedCardState(CardBaseModel):
    """
    What a card designer keeps between sessions: the barcode plus the
    user's own name, description and artwork for the card.

    Stats are never stored; they are re-derived by decoding the barcode.
    """

    barcode: str = Field(..., description="Barcode as entered, whitespace removed")
    card_name: str | None = Field(None, description="User-chosen card name")
    card_description: str | None = None
    custom_image_base64: str | None = Field(
        None, description="Custom artwork as a base64 data string"
    )

    @field_validator("barcode", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        if isinstance(v, str):
            return "".join(v.split())
        return v

    def to_json(self) -> str:
        """Serialize to JSON, omitting unset fields."""
        return self.model_dump_json(exclude_none=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "SavedCardState":
        """Load a saved state from JSON."""
        return cls.model_validate_json(data)
