from storefront.errors import first_error_message


def test_custom_validator_message_is_used_verbatim():
    errors = [{"type": "value_error", "loc": ("body", "items"), "msg": "Value error, Order items are required"}]
    assert first_error_message(errors) == "Order items are required"


def test_field_name_prefixes_generic_messages():
    errors = [
        {"type": "missing", "loc": ("body", "totalPrice"), "msg": "Field required"},
        {"type": "missing", "loc": ("body", "items"), "msg": "Field required"},
    ]
    assert first_error_message(errors) == "totalPrice: Field required"


def test_nested_locations_are_joined():
    errors = [{"type": "greater_than_equal", "loc": ("body", "items", 0, "quantity"), "msg": "Input should be greater than or equal to 1"}]
    assert first_error_message(errors) == "items.0.quantity: Input should be greater than or equal to 1"


def test_invalid_json_and_empty_errors():
    assert first_error_message([{"type": "json_invalid", "loc": ("body", 3), "msg": "JSON decode error"}]) == "Invalid JSON body"
    assert first_error_message([]) == "Invalid request"


def test_unhandled_errors_become_generic_500(app):
    from fastapi.testclient import TestClient

    @app.get("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    with TestClient(app, raise_server_exceptions=False) as c:
        response = c.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_library_value_errors_keep_field_name():
    errors = [{
        "type": "value_error",
        "loc": ("body", "email"),
        "msg": "value is not a valid email address: An email address must have an @-sign.",
    }]
    assert first_error_message(errors).startswith("email: value is not a valid email address")
