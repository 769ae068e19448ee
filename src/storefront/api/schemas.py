"""Pydantic request/response schemas for the Storefront API.

These are the external JSON contracts: camelCase keys, ISO-8601 timestamps.
They are kept separate from the Order aggregate.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, field_validator

from storefront.order.validation import is_iso_timestamp, is_valid_email


def camelize(name: str) -> str:
    """``customer_email`` -> ``customerEmail``; dotted paths are converted per segment."""
    segments = []
    for segment in name.split("."):
        head, *rest = segment.split("_")
        segments.append(head + "".join(part[:1].upper() + part[1:] for part in rest))
    return ".".join(segments)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=camelize, populate_by_name=True)


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class CamelRequest(CamelModel):
    model_config = ConfigDict(alias_generator=camelize, populate_by_name=True, str_strip_whitespace=True)


class OrderItemRequest(CamelRequest):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    price: StrictFloat = Field(gt=0, allow_inf_nan=False)
    quantity: StrictInt = Field(gt=0)


class CreateOrderRequest(CamelRequest):
    customer_name: str = Field(min_length=1)
    customer_phone: str = Field(min_length=1)
    customer_email: str
    customer_address: str = Field(min_length=1)
    delivery_time: str
    items: list[OrderItemRequest] = Field(min_length=1)
    special_instructions: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customerName": "Ada Baker",
                    "customerPhone": "+2348012345678",
                    "customerEmail": "ada@example.com",
                    "customerAddress": "12 Crumb Lane, Lagos",
                    "deliveryTime": "2026-10-20T09:30:00Z",
                    "items": [{"id": "bread", "name": "Bread", "price": 100, "quantity": 2}],
                    "specialInstructions": "No nuts",
                }
            ]
        }
    }

    @field_validator("customer_email")
    @classmethod
    def email_must_be_valid(cls, value):
        if not is_valid_email(value):
            raise ValueError("A valid email address is required")
        return value

    @field_validator("delivery_time")
    @classmethod
    def delivery_time_must_be_iso(cls, value):
        if not is_iso_timestamp(value):
            raise ValueError("A valid ISO-8601 timestamp is required")
        return value


class UpdateStatusRequest(CamelRequest):
    status: str | None = None
    message: str | None = None


class MessageRequest(CamelRequest):
    type: str = Field(min_length=1)
    content: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderItemSchema(CamelModel):
    id: str
    name: str
    price: float
    quantity: int


class OrderMessageSchema(CamelModel):
    id: str
    type: str
    content: str
    timestamp: datetime | None = None

    @classmethod
    def from_message(cls, message) -> "OrderMessageSchema":
        return cls(
            id=str(message.id),
            type=message.type,
            content=message.content,
            timestamp=message.timestamp,
        )


class OrderSchema(CamelModel):
    id: str
    customer_name: str
    customer_phone: str
    customer_email: str
    customer_address: str
    delivery_time: str
    special_instructions: str = ""
    items: list[OrderItemSchema]
    total: float
    status: str
    timestamp: datetime | None = None
    updated_at: datetime | None = None
    messages: list[OrderMessageSchema] = []

    @classmethod
    def from_order(cls, order) -> "OrderSchema":
        return cls(
            id=str(order.id),
            customer_name=order.customer_name,
            customer_phone=order.customer_phone,
            customer_email=order.customer_email,
            customer_address=order.customer_address,
            delivery_time=order.delivery_time,
            special_instructions=order.special_instructions or "",
            items=[
                OrderItemSchema(
                    id=item.product_id,
                    name=item.name,
                    price=item.price,
                    quantity=item.quantity,
                )
                for item in order.items
            ],
            total=order.total,
            status=order.status,
            timestamp=order.created_at,
            updated_at=order.updated_at,
            messages=[OrderMessageSchema.from_message(m) for m in order.messages],
        )


class OrderIdSchema(CamelModel):
    order_id: str


class SentMessageSchema(CamelModel):
    message_id: str
    sent: bool


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------
def dump(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def success(data: Any) -> dict[str, Any]:
    return {"success": True, "data": data}


def failure(error: str) -> dict[str, Any]:
    return {"success": False, "error": error}


def field_errors(messages: dict) -> dict[str, Any]:
    """Flatten a field -> messages dict into ``errors: [{field, message}]``."""
    errors = []
    for field, field_messages in messages.items():
        if isinstance(field_messages, str):
            field_messages = [field_messages]
        for message in field_messages:
            errors.append({"field": camelize(field), "message": str(message)})
    return {"success": False, "errors": errors}
