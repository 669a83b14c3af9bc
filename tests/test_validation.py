from __future__ import annotations

from datetime import datetime, timezone

import pytest

from user_admin.models import AddressType, UserStatus
from user_admin.schemas import FieldError
from user_admin.validation import validate_address_data, validate_user_data


def _address(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "user_id": 1,
        "address_type": "WORK",
        "post_code": "12345",
        "city": "Berlin",
        "country_code": "DEU",
        "street": "Unter den Linden",
        "building_number": "5",
    }
    payload.update(overrides)
    return payload


def test_valid_user_payload_is_normalised() -> None:
    form, errors = validate_user_data(
        {"first_name": "", "last_name": "Doe", "initials": "", "email": "d@x.com", "status": "ACTIVE"}
    )

    assert errors == []
    assert form is not None
    assert form.first_name is None
    assert form.initials is None
    assert form.status is UserStatus.ACTIVE


def test_user_validation_collects_every_field_error() -> None:
    form, errors = validate_user_data({"first_name": "x" * 61, "email": "not-an-email", "status": "GONE"})

    assert form is None
    assert {error.field for error in errors} == {"firstName", "lastName", "email", "status"}
    messages = {error.field: error.message for error in errors}
    assert messages["firstName"] == "First name must be at most 60 characters"
    assert messages["lastName"] == "Last name is required"
    assert messages["email"] == "Invalid email format"
    assert "ACTIVE | INACTIVE" in messages["status"]


@pytest.mark.parametrize(
    ("email", "message"),
    [
        ("", "Email is required"),
        (f"{'a' * 95}@x.com", "Email must be at most 100 characters"),
        ("missing-at.example.com", "Invalid email format"),
        ("Doe <d@x.com>", "Invalid email format"),
    ],
)
def test_user_email_rules(email: str, message: str) -> None:
    _, errors = validate_user_data({"last_name": "Doe", "email": email, "status": "ACTIVE"})

    assert errors == [FieldError(field="email", message=message)]


def test_initials_are_length_capped() -> None:
    _, errors = validate_user_data(
        {"last_name": "Doe", "initials": "J" * 31, "email": "d@x.com", "status": "INACTIVE"}
    )

    assert errors == [FieldError(field="initials", message="Initials must be at most 30 characters")]


def test_non_mapping_payload_reports_general_error() -> None:
    form, errors = validate_user_data(None)  # type: ignore[arg-type]

    assert form is None
    assert [error.field for error in errors] == ["general"]


def test_address_validation_reports_one_error_per_invalid_field() -> None:
    form, errors = validate_address_data(_address(post_code="!!!!!!!", country_code="AB"))

    assert form is None
    assert len(errors) == 2
    assert {error.field for error in errors} == {"postCode", "countryCode"}


def test_post_code_pattern_is_enforced() -> None:
    _, errors = validate_address_data(_address(post_code="12@45"))

    assert errors == [
        FieldError(
            field="postCode",
            message="Post code must contain only letters, numbers, spaces, and hyphens",
        )
    ]


def test_country_code_must_be_letters() -> None:
    _, errors = validate_address_data(_address(country_code="D3U"))

    assert errors == [
        FieldError(
            field="countryCode",
            message="Country code must be 3 uppercase letters (ISO3166-1 alpha-3)",
        )
    ]


def test_country_code_is_uppercased() -> None:
    form, errors = validate_address_data(_address(country_code="usa"))

    assert errors == []
    assert form is not None
    assert form.country_code == "USA"


def test_missing_fields_map_to_camel_case_names() -> None:
    form, errors = validate_address_data({})

    assert form is None
    assert {error.field for error in errors} == {
        "userId",
        "addressType",
        "postCode",
        "city",
        "countryCode",
        "street",
        "buildingNumber",
    }
    messages = {error.field: error.message for error in errors}
    assert messages["userId"] == "User ID is required"
    assert messages["buildingNumber"] == "Building number is required"


def test_unknown_address_type_is_rejected() -> None:
    _, errors = validate_address_data(_address(address_type="CABIN"))

    assert [error.field for error in errors] == ["addressType"]


def test_valid_from_accepts_iso_strings() -> None:
    form, errors = validate_address_data(_address(valid_from="2024-05-01T08:30:00+00:00"))

    assert errors == []
    assert form is not None
    assert form.address_type is AddressType.WORK
    assert isinstance(form.valid_from, datetime)
    assert form.valid_from.year == 2024


def test_address_owner_and_validity_accept_form_keys() -> None:
    payload = _address(validFrom="2023-02-01T00:00:00+00:00", userId=5)
    del payload["user_id"]

    form, errors = validate_address_data(payload)

    assert errors == []
    assert form is not None
    assert form.user_id == 5
    assert form.valid_from == datetime(2023, 2, 1, tzinfo=timezone.utc)
