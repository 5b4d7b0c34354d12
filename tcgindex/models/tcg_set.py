"""
TCGINDEX set catalog entry model.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class TcgSet(BaseModel):
    """One entry of the set catalog (sets.json)."""

    model_config = {"populate_by_name": True, "extra": "allow"}

    id: str = Field(description="Stable set slug, also the card file stem.")
    name: str | None = Field(default=None)
    series: str | None = Field(default=None)
    release_date: str | None = Field(default=None, alias="releaseDate")

    @field_validator("id", mode="before")
    @classmethod
    def id_is_file_stem(cls, v: Any) -> Any:
        """The id names cards/<id>.json, so it must stay inside that directory"""
        if isinstance(v, str) and (
            not v.strip() or "/" in v or "\\" in v or v in {".", ".."}
        ):
            raise ValueError(f"set id {v!r} cannot be used as a card file name")
        return v
