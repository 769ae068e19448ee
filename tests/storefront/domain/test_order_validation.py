"""Tests for order input validation. Every violation is reported at once."""

import pytest
from protean.exceptions import ValidationError
from storefront.order.validation import (
    is_iso_timestamp,
    is_valid_email,
    message_input_errors,
    order_input_errors,
    validate_order_input,
)


def _input(**overrides):
    data = {
        "customer_name": "Ada Baker",
        "customer_phone": "+2348012345678",
        "customer_email": "ada@example.com",
        "customer_address": "12 Crumb Lane",
        "delivery_time": "2026-10-20T09:30:00Z",
        "items": [{"id": "bread", "name": "Bread", "price": 100, "quantity": 2}],
        "special_instructions": None,
    }
    data.update(overrides)
    return data


class TestEmailRules:
    @pytest.mark.parametrize(
        "email",
        ["ada@example.com", "first.last@bakery.co.uk", "orders+cake@example.org"],
    )
    def test_valid_addresses(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [
            "",
            None,
            "ada",
            "ada@",
            "@example.com",
            "ada@@example.com",
            "ada@example",
            "ada@.example.com",
            "ada.@example.com",
            "a..da@example.com",
            "ada baker@example.com",
            "ada@-example.com",
            "ada@example..com",
            "ada;x@example.com",
        ],
    )
    def test_invalid_addresses(self, email):
        assert not is_valid_email(email)


class TestTimestampRules:
    @pytest.mark.parametrize(
        "value",
        ["2026-10-20T09:30:00Z", "2026-10-20T09:30:00+01:00", "2026-10-20T09:30", "2026-10-20"],
    )
    def test_iso_values(self, value):
        assert is_iso_timestamp(value)

    @pytest.mark.parametrize("value", ["", "tomorrow", "20/10/2026", None, 1760952600])
    def test_non_iso_values(self, value):
        assert not is_iso_timestamp(value)


class TestOrderInputErrors:
    def test_valid_input_has_no_errors(self):
        assert order_input_errors(_input()) == {}

    @pytest.mark.parametrize("field", ["customer_name", "customer_phone", "customer_address"])
    def test_blank_required_text(self, field):
        errors = order_input_errors(_input(**{field: "   "}))
        assert field in errors

    def test_missing_email(self):
        errors = order_input_errors(_input(customer_email=None))
        assert list(errors) == ["customer_email"]

    def test_bad_delivery_time(self):
        errors = order_input_errors(_input(delivery_time="soon"))
        assert "delivery_time" in errors

    def test_items_required(self):
        assert "items" in order_input_errors(_input(items=[]))
        assert "items" in order_input_errors(_input(items=None))
        assert "items" in order_input_errors(_input(items="bread"))

    @pytest.mark.parametrize(
        "price",
        [0, -1, "free", "2.50", "Infinity", None, True, float("inf"), float("-inf"), float("nan"), 10**400],
    )
    def test_non_positive_or_non_finite_price(self, price):
        errors = order_input_errors(_input(items=[{"id": "bread", "name": "Bread", "price": price, "quantity": 1}]))
        assert "items[0].price" in errors

    @pytest.mark.parametrize("quantity", [0, -2, 1.5, 2.0, "2.5", "3", "two", None, True])
    def test_bad_quantity(self, quantity):
        errors = order_input_errors(
            _input(items=[{"id": "bread", "name": "Bread", "price": 1, "quantity": quantity}])
        )
        assert "items[0].quantity" in errors

    def test_total_that_overflows_is_rejected(self):
        errors = order_input_errors(
            _input(items=[{"id": "bread", "name": "Bread", "price": 1e308, "quantity": 10}])
        )
        assert errors == {"items": ["Order total is too large"]}

    def test_large_but_finite_total_is_accepted(self):
        errors = order_input_errors(
            _input(items=[{"id": "bread", "name": "Bread", "price": 1e300, "quantity": 10}])
        )
        assert errors == {}

    def test_item_errors_are_keyed_by_position(self):
        items = [
            {"id": "bread", "name": "Bread", "price": 1, "quantity": 1},
            {"id": "", "name": "", "price": 1, "quantity": 1},
            "cake",
        ]
        errors = order_input_errors(_input(items=items))
        assert set(errors) == {"items[1].id", "items[1].name", "items[2]"}

    def test_all_violations_reported_together(self):
        errors = order_input_errors(
            {
                "customer_name": "",
                "customer_email": "nope",
                "items": [],
            }
        )
        assert set(errors) == {
            "customer_name",
            "customer_phone",
            "customer_address",
            "customer_email",
            "delivery_time",
            "items",
        }

    def test_special_instructions_must_be_text(self):
        errors = order_input_errors(_input(special_instructions=42))
        assert "special_instructions" in errors


class TestValidateOrderInput:
    def test_raises_validation_error_with_field_messages(self):
        with pytest.raises(ValidationError) as exc:
            validate_order_input(_input(customer_email=""))
        assert "customer_email" in exc.value.messages

    def test_normalizes_items_and_strips_text(self):
        data = validate_order_input(
            _input(
                customer_name="  Ada  ",
                items=[{"id": " bread ", "name": "Bread", "price": 2.5, "quantity": 3}],
            )
        )
        assert data["customer_name"] == "Ada"
        assert data["special_instructions"] == ""
        assert data["items_data"] == [{"id": "bread", "name": "Bread", "price": 2.5, "quantity": 3}]

    def test_integer_price_becomes_float(self):
        data = validate_order_input(_input(items=[{"id": "b", "name": "B", "price": 100, "quantity": 2}]))
        assert data["items_data"][0]["price"] == 100.0
        assert isinstance(data["items_data"][0]["price"], float)

    def test_overflowing_total_raises(self):
        with pytest.raises(ValidationError) as exc:
            validate_order_input(_input(items=[{"id": "b", "name": "B", "price": 1e308, "quantity": 10}]))
        assert "items" in exc.value.messages


class TestMessageInputErrors:
    def test_valid(self):
        assert message_input_errors("email", "Hi") == {}

    def test_missing_both(self):
        assert set(message_input_errors(None, "")) == {"type", "content"}

    def test_blank_content(self):
        assert set(message_input_errors("whatsapp", "  ")) == {"content"}
