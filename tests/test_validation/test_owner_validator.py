"""
Pruebas del validador de propietarios.

Las pruebas cubren:
- Cuerpo ausente
- Campos obligatorios y límites de longitud (255 válido, 256 no)
- Formato de teléfono y email
- Acumulación de violaciones de varios campos
"""

import pytest

from models.owners import CreateOwnerRequest, UpdateOwnerRequest
from validators.owner_validator import (
    validate_create_owner_request,
    validate_update_owner_request,
    BODY_IS_MISSING,
    FIRST_NAME_REQUIRED,
    FIRST_NAME_TOO_LONG,
    TELEPHONE_INVALID_FORMAT,
)
from core.exceptions import ValidationException


VALIDATORS = [
    pytest.param(validate_create_owner_request, CreateOwnerRequest, id="create"),
    pytest.param(validate_update_owner_request, UpdateOwnerRequest, id="update"),
]


def valid_owner(request_class, **overrides):
    data = {
        "first_name": "George",
        "last_name": "Franklin",
        "address": "110 W. Liberty St.",
        "city": "Madison",
        "telephone": "6085551023",
    }
    data.update(overrides)
    return request_class(**data)


def violations_of(validator, request):
    with pytest.raises(ValidationException) as exc_info:
        validator(request)
    return exc_info.value.violations


@pytest.mark.parametrize("validator, request_class", VALIDATORS)
class TestOwnerValidator:
    
    def test_valid_request_passes(self, validator, request_class):
        validator(valid_owner(request_class))
    
    def test_missing_body(self, validator, request_class):
        assert violations_of(validator, None) == [
            {"field": None, "code": "body_missing", "message": BODY_IS_MISSING}
        ]
    
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_first_name_required(self, validator, request_class, value):
        violations = violations_of(validator, valid_owner(request_class, first_name=value))
        
        assert violations == [{"field": "firstName", "code": "required", "message": FIRST_NAME_REQUIRED}]
    
    def test_length_boundaries(self, validator, request_class):
        validator(valid_owner(request_class, first_name="a" * 255, city="c" * 255, telephone="1" * 255))
        
        violations = violations_of(validator, valid_owner(request_class, first_name="a" * 256))
        
        assert violations == [{"field": "firstName", "code": "too_long", "message": FIRST_NAME_TOO_LONG}]
    
    @pytest.mark.parametrize("field, alias", [
        ("last_name", "lastName"),
        ("address", "address"),
        ("city", "city"),
        ("telephone", "telephone"),
        ("email", "email"),
    ])
    def test_too_long_fields(self, validator, request_class, field, alias):
        violations = violations_of(validator, valid_owner(request_class, **{field: "1" * 256}))
        
        assert [(v["field"], v["code"]) for v in violations] == [(alias, "too_long")]
    
    def test_telephone_must_be_digits(self, validator, request_class):
        violations = violations_of(validator, valid_owner(request_class, telephone="608 555 1023"))
        
        assert violations == [{"field": "telephone", "code": "invalid_format", "message": TELEPHONE_INVALID_FORMAT}]
    
    @pytest.mark.parametrize("telephone", [None, ""])
    def test_telephone_is_optional(self, validator, request_class, telephone):
        validator(valid_owner(request_class, telephone=telephone))
    
    @pytest.mark.parametrize("email", ["george@example.com", "g.franklin+pets@mail.example.org"])
    def test_valid_email(self, validator, request_class, email):
        validator(valid_owner(request_class, email=email))
    
    @pytest.mark.parametrize("email", ["george", "george@example", "@example.com", "george@@example.com"])
    def test_invalid_email(self, validator, request_class, email):
        violations = violations_of(validator, valid_owner(request_class, email=email))
        
        assert [(v["field"], v["code"]) for v in violations] == [("email", "invalid_format")]
    
    def test_violations_accumulate_in_field_order(self, validator, request_class):
        request = request_class(first_name=None, last_name="", telephone="abc", email="x")
        
        violations = violations_of(validator, request)
        
        assert [(v["field"], v["code"]) for v in violations] == [
            ("firstName", "required"),
            ("lastName", "required"),
            ("telephone", "invalid_format"),
            ("email", "invalid_format"),
        ]
