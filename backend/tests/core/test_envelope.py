"""Response Envelope — verifies the Ok/Err wire shapes."""

from warehouse.core.envelope import Err, Ok


def test_ok_with_data_and_message():
    body = Ok(data={"id": 1}, message="Item created successfully").to_response()
    assert body == {
        "success": True,
        "data": {"id": 1},
        "message": "Item created successfully",
    }


def test_ok_omits_absent_keys():
    assert Ok(message="Item deleted successfully").to_response() == {
        "success": True, "message": "Item deleted successfully",
    }


def test_ok_keeps_empty_list_payload():
    assert Ok(data=[]).to_response() == {"success": True, "data": []}


def test_err_minimal():
    assert Err(error="Item not found").to_response() == {
        "success": False, "error": "Item not found",
    }


def test_err_with_validation_errors_uses_camel_case_key():
    body = Err(
        error="Validation failed", validation_errors={"name": "Name is required"},
    ).to_response()
    assert body == {
        "success": False,
        "error": "Validation failed",
        "validationErrors": {"name": "Name is required"},
    }
    assert "data" not in body
