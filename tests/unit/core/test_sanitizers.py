"""Unit tests for input sanitization."""

from datetime import date, datetime

import pytest

from user_registry.core.adapters import BleachXssSanitizer
from user_registry.core.errors import InvalidParamError
from user_registry.core.sanitizers import DefaultUserCreateDataSanitizer
from user_registry.entities.core.user import UserCreateData


class TestBleachXssSanitizer:
    """Markup stripping with bleach."""

    def setup_method(self):
        self.sanitizer = BleachXssSanitizer()

    def test_plain_text_unchanged(self):
        assert self.sanitizer.sanitize("Maria Souza") == "Maria Souza"

    def test_strips_tags_keeping_text(self):
        assert self.sanitizer.sanitize("<b>Maria</b> <i>Souza</i>") == "Maria Souza"

    def test_strips_event_handler_attributes(self):
        result = self.sanitizer.sanitize("<img src=x onerror=alert(1)>Ana")

        assert result == "Ana"

    def test_removes_comments(self):
        assert self.sanitizer.sanitize("<!-- oculto -->Ana") == "Ana"

    def test_script_markup_is_not_kept(self):
        result = self.sanitizer.sanitize("<script>alert('x')</script>Maria")

        assert "<script" not in result
        assert result.endswith("Maria")

    def test_empty_string(self):
        assert self.sanitizer.sanitize("") == ""


class TestDefaultUserCreateDataSanitizer:
    """Field normalization before validation."""

    @pytest.fixture
    def sanitizer(self):
        return DefaultUserCreateDataSanitizer(BleachXssSanitizer())

    @pytest.mark.parametrize("raw", [None, {}])
    def test_empty_input_yields_empty_data(self, sanitizer, raw):
        result = sanitizer.sanitize(raw)

        assert result == UserCreateData()

    def test_email_trimmed_and_lowercased(self, sanitizer):
        result = sanitizer.sanitize({"email": "  JOAO@Empresa.COM.br "})

        assert result.email == "joao@empresa.com.br"

    def test_name_whitespace_collapsed(self, sanitizer):
        result = sanitizer.sanitize({"name": "  João   da\tSilva  "})

        assert result.name == "João da Silva"

    def test_name_markup_removed(self, sanitizer):
        result = sanitizer.sanitize({"name": "<b> </b>João <i>da Silva</i>"})

        assert result.name == "João da Silva"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("(11) 98765-4321", "11987654321"),
            (" +55 (11) 98765-4321 ", "+5511987654321"),
            ("11.98765.4321", "11987654321"),
            ("++55 (11) 98765-4321", "+5511987654321"),
            ("11 98765+4321", "11987654321"),
            ("+55 +11 98765-4321", "+5511987654321"),
        ],
    )
    def test_phone_keeps_digits_and_plus(self, sanitizer, raw, expected):
        assert sanitizer.sanitize({"phone": raw}).phone == expected

    def test_password_and_birthdate_untouched(self, sanitizer):
        result = sanitizer.sanitize(
            {"password": " Segura@2024 ", "birthdate": date(1990, 5, 15)}
        )

        assert result.password == " Segura@2024 "
        assert result.birthdate == date(1990, 5, 15)

    def test_missing_text_fields_become_empty(self, sanitizer):
        result = sanitizer.sanitize({"password": "Segura@2024"})

        assert result.name == ""
        assert result.email == ""
        assert result.phone == ""

    def test_accepts_user_create_data(self, sanitizer, valid_user_payload):
        data = UserCreateData(**valid_user_payload)

        result = sanitizer.sanitize(data)

        assert result.email == "joao.silva@empresa.com.br"
        assert result is not data
        assert data.email == "Joao.Silva@Empresa.com.br"

    def test_is_idempotent(self, sanitizer, valid_user_payload):
        payload = {**valid_user_payload, "name": "  <b>João</b>   da Silva "}

        once = sanitizer.sanitize(payload)
        twice = sanitizer.sanitize(once)

        assert twice == once

    @pytest.mark.parametrize(
        "phone", ["++55 (11) 98765-4321", "11 98765+4321", " +55 11 98765-4321 "]
    )
    def test_phone_is_idempotent(self, sanitizer, phone):
        once = sanitizer.sanitize({"phone": phone}).phone

        assert sanitizer.sanitize({"phone": once}).phone == once
        assert once.count("+") <= 1
        assert "+" not in once[1:]

    def test_datetime_birthdate_keeps_calendar_date(self, sanitizer):
        result = sanitizer.sanitize({"birthdate": datetime(1990, 5, 15, 12, 30)})

        assert result.birthdate == date(1990, 5, 15)

    def test_unrepresentable_value_is_a_typed_error(self, sanitizer):
        with pytest.raises(InvalidParamError) as exc_info:
            sanitizer.sanitize({"birthdate": ["1990", "05", "15"]})

        assert exc_info.value.message == (
            "Parâmetro inválido: Data de nascimento. Formato inválido."
        )
