"""Unit tests for the application error taxonomy."""

import pytest

from user_registry.core.errors import (
    ApplicationError,
    DuplicateResourceError,
    InvalidParamError,
    MissingParamError,
    ServerError,
)


class TestApplicationErrors:
    """Messages and status codes of the typed errors."""

    def test_missing_param_error(self):
        error = MissingParamError("nome")

        assert error.message == "Parâmetro obrigatório não informado: nome"
        assert str(error) == error.message
        assert error.status_code == 400
        assert error.name == "MissingParamError"
        assert isinstance(error, ApplicationError)

    def test_invalid_param_error_with_reason(self):
        error = InvalidParamError("e-mail", "formato inválido")

        assert error.message == "Parâmetro inválido: E-mail. Formato inválido."
        assert error.status_code == 400
        assert error.param == "e-mail"
        assert error.reason == "formato inválido"

    @pytest.mark.parametrize("reason", [None, "", "   "])
    def test_invalid_param_error_without_reason(self, reason):
        error = InvalidParamError("senha", reason)

        assert error.message == "Parâmetro inválido: Senha."

    def test_duplicate_resource_error(self):
        error = DuplicateResourceError("e-mail")

        assert error.message == "E-mail já cadastrado no sistema"
        assert error.status_code == 409
        assert error.name == "DuplicateResourceError"

    def test_server_error_wraps_exception(self):
        original = RuntimeError("falha de conexão")

        error = ServerError(original)

        assert error.message == "Erro inesperado do servidor. Falha de conexão"
        assert error.status_code == 500
        assert error.original_error is original

    def test_server_error_from_string(self):
        error = ServerError("tempo esgotado")

        assert error.message == "Erro inesperado do servidor. Tempo esgotado"
        assert error.original_error is None

    @pytest.mark.parametrize("cause", [None, "", RuntimeError()])
    def test_server_error_unknown_detail(self, cause):
        error = ServerError(cause)

        assert error.message == "Erro inesperado do servidor. Erro desconhecido"

    def test_server_error_keeps_original_traceback(self):
        try:
            raise ValueError("origem")
        except ValueError as e:
            original = e

        error = ServerError(original)

        assert error.__traceback__ is original.__traceback__

    def test_errors_are_raisable_and_catchable_as_base(self):
        with pytest.raises(ApplicationError) as exc_info:
            raise DuplicateResourceError("e-mail")

        assert exc_info.value.status_code == 409
