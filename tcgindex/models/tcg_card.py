"""
TCGINDEX raw card model.

Only the attributes the indexes read are modeled; everything else in a
card file is accepted and ignored. Only `id` and `name` can fail a card:
malformed optional attributes are coerced or dropped.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


def scalar_to_str(value: Any) -> str | None:
    """Numbers become strings, containers and other oddities become None."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class TcgCardSetReference(BaseModel):
    """The set a card claims to belong to."""

    model_config = {"extra": "allow"}

    id: str | None = Field(default=None)

    @field_validator("id", mode="before")
    @classmethod
    def id_to_str(cls, v: Any) -> str | None:
        """Some dumps store numeric set ids"""
        return scalar_to_str(v)


class TcgCard(BaseModel):
    """A single card as found in a per-set card file."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    id: str
    name: str
    number: str | None = Field(default=None)
    rarity: str | None = Field(default=None)
    types: list[str] = Field(default_factory=list)
    supertype: str | None = Field(default=None)
    subtypes: list[str] = Field(default_factory=list)
    card_set: TcgCardSetReference | None = Field(default=None, alias="set")

    @field_validator("number", "rarity", "supertype", mode="before")
    @classmethod
    def scalars_to_str(cls, v: Any) -> str | None:
        """Collector numbers are strings, but some dumps store them as ints"""
        return scalar_to_str(v)

    @field_validator("types", "subtypes", mode="before")
    @classmethod
    def ensure_list_of_str(cls, v: Any) -> list[str]:
        """Anything but a list is treated as no values; non-scalar items are dropped"""
        if not isinstance(v, list):
            return []
        return [item for item in map(scalar_to_str, v) if item is not None]

    @field_validator("card_set", mode="before")
    @classmethod
    def set_reference_or_none(cls, v: Any) -> Any:
        """A set reference that is not an object resolves to the placeholder set"""
        return v if isinstance(v, dict) else None

    @property
    def set_id(self) -> str | None:
        """Set id the card references, if any."""
        return self.card_set.id if self.card_set else None
