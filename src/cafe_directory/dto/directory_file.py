"""DTOs for directory data files.

A data file is a JSON object keyed by city::

    {
        "moscow": [
            {"name": "Мир кофе", "address": "ул. Тверская, 12", "price_category": 2}
        ]
    }
"""

from pydantic import BaseModel, Field, RootModel, field_validator


class CafeRecord(BaseModel):
    """A single café as stored in a data file."""

    name: str = Field(..., min_length=1, description="Café name")
    address: str = Field("", description="Street address")
    price_category: int = Field(0, ge=0, description="Price ordinal (0 = cheapest)")

    @field_validator("name")
    @classmethod
    def name_has_no_delimiter(cls, value: str) -> str:
        # Names are written comma-separated.
        if "," in value:
            raise ValueError("café name must not contain ','")
        return value


class DirectoryFile(RootModel[dict[str, list[CafeRecord]]]):
    """Whole data file: city -> ordered café records."""
