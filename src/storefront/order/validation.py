"""Input rules for placing an order.

All violations are collected before anything is raised, so a caller sees every
bad field at once. Error keys are attribute names; item errors are keyed by
position, e.g. ``items[0].price``.
"""

import math
from datetime import datetime

from protean.exceptions import ValidationError

from storefront.order.order import calculate_total

_REQUIRED_TEXT_FIELDS = ("customer_name", "customer_phone", "customer_address")
_FORBIDDEN_EMAIL_CHARS = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def is_valid_email(email) -> bool:
    """Check that ``email`` has a single @, sane local and domain parts."""
    if not isinstance(email, str) or not email:
        return False

    if any(ch.isspace() for ch in email):
        return False

    if email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part:
        return False

    for label in domain_part.split("."):
        if not label or label.startswith("-") or label.endswith("-"):
            return False

    if ".." in local_part:
        return False

    return not any(ch in email for ch in _FORBIDDEN_EMAIL_CHARS)


def is_iso_timestamp(value) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        datetime.fromisoformat(value.strip())
    except ValueError:
        return False
    return True


def _is_non_empty_text(value) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _positive_number(value):
    """Return ``value`` as a float if it is a finite number > 0, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) and number > 0 else None


def _positive_integer(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def _is_representable_total(items) -> bool:
    try:
        total = calculate_total(items)
    except OverflowError:
        return False
    return math.isfinite(total)


def _item_errors(index, item):
    errors = {}
    prefix = f"items[{index}]"

    if not isinstance(item, dict):
        return {prefix: ["Item must be an object"]}

    if not _is_non_empty_text(item.get("id")):
        errors[f"{prefix}.id"] = ["Item id is required"]
    if not _is_non_empty_text(item.get("name")):
        errors[f"{prefix}.name"] = ["Item name is required"]
    if _positive_number(item.get("price")) is None:
        errors[f"{prefix}.price"] = ["Price must be a number greater than 0"]
    if _positive_integer(item.get("quantity")) is None:
        errors[f"{prefix}.quantity"] = ["Quantity must be an integer greater than 0"]

    return errors


def order_input_errors(data: dict) -> dict[str, list[str]]:
    """Return a field -> messages dict describing every violation in ``data``."""
    errors: dict[str, list[str]] = {}

    for field in _REQUIRED_TEXT_FIELDS:
        if not _is_non_empty_text(data.get(field)):
            errors[field] = ["This field is required"]

    if not is_valid_email(data.get("customer_email")):
        errors["customer_email"] = ["A valid email address is required"]

    if not is_iso_timestamp(data.get("delivery_time")):
        errors["delivery_time"] = ["A valid ISO-8601 timestamp is required"]

    special_instructions = data.get("special_instructions")
    if special_instructions is not None and not isinstance(special_instructions, str):
        errors["special_instructions"] = ["Special instructions must be text"]

    items = data.get("items")
    if not isinstance(items, list) or not items:
        errors["items"] = ["At least one item is required"]
    else:
        item_errors = {}
        for index, item in enumerate(items):
            item_errors.update(_item_errors(index, item))
        if not item_errors and not _is_representable_total(items):
            item_errors["items"] = ["Order total is too large"]
        errors.update(item_errors)

    return errors


def validate_order_input(data: dict) -> dict:
    """Raise ValidationError on any violation, else return normalized input."""
    errors = order_input_errors(data)
    if errors:
        raise ValidationError(errors)

    return {
        "customer_name": data["customer_name"].strip(),
        "customer_phone": data["customer_phone"].strip(),
        "customer_email": data["customer_email"].strip(),
        "customer_address": data["customer_address"].strip(),
        "delivery_time": data["delivery_time"].strip(),
        "special_instructions": data.get("special_instructions") or "",
        "items_data": [
            {
                "id": item["id"].strip(),
                "name": item["name"].strip(),
                "price": _positive_number(item["price"]),
                "quantity": _positive_integer(item["quantity"]),
            }
            for item in data["items"]
        ],
    }


def message_input_errors(message_type, content) -> dict[str, list[str]]:
    errors = {}
    if not _is_non_empty_text(message_type):
        errors["type"] = ["Message type is required"]
    if not _is_non_empty_text(content):
        errors["content"] = ["Message content is required"]
    return errors
