# =============================================================================
# core/models/person.py - Person Schema
# =============================================================================
# The single record type served by the API. The same model is used for
# request bodies (POST/PUT) and responses.
#
# Stored MongoDB documents look like:
#   {"_id": ObjectId("..."), "name": "Ann", "age": 30, "address": "1 Main St"}
#
# and are exposed over HTTP as:
#   {"id": "65a1f0c2e4b0a1b2c3d4e5f6", "name": "Ann", "age": 30, "address": "1 Main St"}
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

# Range of a signed 64-bit integer, the widest int BSON stores
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Person(BaseModel):
    """
    A person record.

    Missing or null fields in a request body fall back to empty values; a
    field of the wrong JSON type (e.g. "age": "thirty") fails decoding.

    Example:
        {
            "name": "Ann",
            "age": 30,
            "address": "1 Main St"
        }
    """

    # Store-assigned identifier (24-character hex). Ignored on create.
    id: str | None = Field(
        default=None,
        description="Store-assigned identifier, omitted when unset"
    )

    name: str = Field(
        default="",
        description="Person's name"
    )

    age: int = Field(
        default=0,
        strict=True,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Person's age in years"
    )

    address: str = Field(
        default="",
        description="Postal address"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Ann", "age": 30, "address": "1 Main St"},
            ]
        }
    }

    @field_validator("name", "age", "address", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat an explicit null like a missing field."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    def to_document(self) -> dict[str, Any]:
        """
        Build the stored field set.

        The identifier is never part of the document body; MongoDB owns `_id`.
        """
        return {
            "name": self.name,
            "age": self.age,
            "address": self.address,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Person":
        """Build a Person from a raw MongoDB document."""
        object_id = document.get("_id")
        return cls.model_validate(
            {
                "id": str(object_id) if object_id is not None else None,
                "name": document.get("name", ""),
                "age": document.get("age", 0),
                "address": document.get("address", ""),
            }
        )
