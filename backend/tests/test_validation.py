"""Field validation rules on wire records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.schemas import OwnerRecord, PetRecord, VisitRecord
from app.schemas.validation import require_text


def _error_fields(exc: ValidationError) -> set[str]:
    return {".".join(str(part) for part in error["loc"]) for error in exc.errors()}


@pytest.mark.parametrize("value", ["", " ", "\t\n"])
def test_require_text_rejects_blank(value: str) -> None:
    with pytest.raises(ValueError):
        require_text(value)


def test_require_text_keeps_value() -> None:
    assert require_text("Rosy") == "Rosy"


@pytest.mark.parametrize(
    "payload, fields",
    [
        ({"lastName": "Franklin"}, {"firstName"}),
        ({"firstName": None, "lastName": "Franklin"}, {"firstName"}),
        ({"firstName": "George", "lastName": "  "}, {"lastName"}),
        ({}, {"firstName", "lastName"}),
        ({"firstName": "G" * 31, "lastName": "Franklin"}, {"firstName"}),
        (
            {"firstName": "George", "lastName": "Franklin", "telephone": "+1 608"},
            {"telephone"},
        ),
        (
            {"firstName": "George", "lastName": "Franklin", "telephone": "1" * 21},
            {"telephone"},
        ),
    ],
)
def test_owner_record_rejects(payload: dict, fields: set[str]) -> None:
    with pytest.raises(ValidationError) as excinfo:
        OwnerRecord.model_validate(payload)

    assert _error_fields(excinfo.value) == fields


def test_owner_record_accepts_minimal_payload() -> None:
    record = OwnerRecord.model_validate({"firstName": "Betty", "lastName": "Davis"})

    assert record.first_name == "Betty"
    assert record.pets == []


def test_nested_pet_errors_are_located() -> None:
    with pytest.raises(ValidationError) as excinfo:
        OwnerRecord.model_validate(
            {"firstName": "George", "lastName": "Franklin", "pets": [{"name": ""}]}
        )

    assert _error_fields(excinfo.value) == {"pets.0.name"}


def test_pet_record_requires_type_id_when_type_given() -> None:
    with pytest.raises(ValidationError) as excinfo:
        PetRecord.model_validate({"name": "Rosy", "type": {"name": "dog"}})

    assert _error_fields(excinfo.value) == {"type.id"}


def test_pet_record_rejects_malformed_birth_date() -> None:
    with pytest.raises(ValidationError) as excinfo:
        PetRecord.model_validate({"name": "Rosy", "birthDate": "08/06/2015"})

    assert _error_fields(excinfo.value) == {"birthDate"}


def test_visit_record_requires_description() -> None:
    with pytest.raises(ValidationError) as excinfo:
        VisitRecord.model_validate({"date": "2024-05-01", "description": ""})

    assert _error_fields(excinfo.value) == {"description"}
