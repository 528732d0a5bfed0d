"""
Pydantic schemas for API requests and responses.

Request bodies are strict: unknown fields are rejected, strings must be JSON
strings and numbers must be JSON numbers. Field names match the persisted
document exactly (camelCase timestamps).
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Common/Utility Schemas
# ---------------------------------------------------------------------------

# PUBLIC_INTERFACE
class HealthResponse(BaseModel):
    """Basic health response schema."""
    status: str = Field(..., description="Health status message, e.g., 'ok'")


# PUBLIC_INTERFACE
class MessageResponse(BaseModel):
    """Error body returned for every 4xx response."""
    message: str = Field(..., description="Human readable error message.")


# PUBLIC_INTERFACE
class DeleteResponse(BaseModel):
    """Confirmation returned after a resource is removed."""
    message: str = Field(default="Deleted", description="Always 'Deleted'.")
    id: str = Field(..., description="Identifier of the removed resource.")


# ---------------------------------------------------------------------------
# Resource Schemas
# ---------------------------------------------------------------------------

_STRICT_BODY = ConfigDict(extra="forbid", strict=True, allow_inf_nan=False)


# PUBLIC_INTERFACE
class ResourceCreate(BaseModel):
    """Payload for creating a resource."""
    name: str = Field(..., description="Resource name.")
    type: str = Field(..., description="Resource type.")
    amount: Number = Field(default=0, description="Quantity held, defaults to 0.")
    price: Number = Field(default=0, description="Unit price, defaults to 0.")

    model_config = ConfigDict(
        **_STRICT_BODY,
        json_schema_extra={"example": {"name": "Widget", "type": "tool", "amount": 10, "price": 2.5}},
    )


# PUBLIC_INTERFACE
class ResourceReplace(ResourceCreate):
    """Payload for replacing a resource; same contract as creation."""


# PUBLIC_INTERFACE
class ResourcePatch(BaseModel):
    """Payload for a partial update. Only amount and price may change."""
    amount: Optional[Number] = Field(default=None, description="New quantity.")
    price: Optional[Number] = Field(default=None, description="New unit price.")

    model_config = ConfigDict(
        **_STRICT_BODY,
        json_schema_extra={"example": {"price": 9}},
    )

    @field_validator("amount", "price")
    @classmethod
    def _reject_null(cls, value: Optional[Number]) -> Number:
        # Omitting a field leaves it untouched; an explicit null is not a number.
        if value is None:
            raise ValueError("must be a number")
        return value


# PUBLIC_INTERFACE
class Resource(BaseModel):
    """A resource as stored and returned by the API."""
    id: str = Field(..., description="Server generated identifier (UUID string).")
    name: str
    type: str
    amount: Number = 0
    price: Number = 0
    createdAt: str = Field(..., description="ISO-8601 creation timestamp.")
    updatedAt: str = Field(..., description="ISO-8601 timestamp of the last change.")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "id": "f3b803f2-8c9e-4f5b-9b64-8cd3f1a5b7e1",
                "name": "Widget",
                "type": "tool",
                "amount": 10,
                "price": 2.5,
                "createdAt": "2024-01-01T00:00:00.000Z",
                "updatedAt": "2024-01-01T00:00:00.000Z",
            }
        },
    )
