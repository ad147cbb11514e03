"""Common Pydantic models shared by both catalogs."""

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Stored and serialized with camelCase keys (hireDate, createdAt, ...)
CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class Record(BaseModel):
    """Stored catalog record.

    Records are frozen; every write installs a fresh copy under the same id.
    """

    id: str = Field(description="Generated unique identifier (UUID)")
    created_at: int = Field(description="Creation time, nanoseconds since epoch")
    updated_at: int | None = Field(default=None, description="Last write time, None until first update")

    model_config = {"frozen": True, **CAMEL_CONFIG}

    def to_json(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class Payload(BaseModel):
    """Creation payload: every field is required, no id or timestamps."""

    model_config = {"frozen": True, "extra": "forbid", **CAMEL_CONFIG}


class UpdatePayload(BaseModel):
    """Partial update payload.

    Fields default to None. The field mask is the set of fields the caller
    supplied with a non-None value; explicit None is treated as omitted.
    """

    model_config = {"frozen": True, "extra": "forbid", **CAMEL_CONFIG}

    @property
    def field_mask(self) -> frozenset[str]:
        """Names of the fields supplied for this update."""
        return frozenset(name for name in self.model_fields_set if getattr(self, name) is not None)

    def changes(self) -> dict[str, Any]:
        """Supplied field values keyed by field name."""
        return {name: getattr(self, name) for name in self.field_mask}
