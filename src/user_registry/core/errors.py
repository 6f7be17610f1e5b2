"""Application error taxonomy.

Every error raised on purpose by the application derives from
``ApplicationError`` and carries the HTTP status code that best describes it.
The status is only a hint: nothing in this module knows about HTTP, the
controllers are the single place where it is turned into a response.
"""


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


class ApplicationError(Exception):
    """Base class for typed application errors."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def name(self) -> str:
        return type(self).__name__


class MissingParamError(ApplicationError):
    """A required parameter was not supplied."""

    def __init__(self, param: str) -> None:
        super().__init__(f"Parâmetro obrigatório não informado: {param}", 400)
        self.param = param


class InvalidParamError(ApplicationError):
    """A parameter was supplied but failed a format, range or strength rule."""

    def __init__(self, param: str, reason: str | None = None) -> None:
        if reason and reason.strip():
            message = (
                f"Parâmetro inválido: {_capitalize(param)}. {_capitalize(reason)}."
            )
        else:
            message = f"Parâmetro inválido: {_capitalize(param)}."
        super().__init__(message, 400)
        self.param = param
        self.reason = reason


class DuplicateResourceError(ApplicationError):
    """A uniqueness constraint was violated."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"{_capitalize(resource)} já cadastrado no sistema", 409)
        self.resource = resource


UNKNOWN_ERROR_MESSAGE = "erro desconhecido"


class ServerError(ApplicationError):
    """Unexpected failure wrapping the error that caused it.

    The original traceback is kept on the new exception and the original error
    is available as ``original_error``. Callers should still raise it with
    ``raise ServerError(err) from err`` so the chain shows up in logs.
    """

    def __init__(self, error: BaseException | str | None) -> None:
        if isinstance(error, BaseException):
            detail = str(error) or UNKNOWN_ERROR_MESSAGE
        else:
            detail = error or UNKNOWN_ERROR_MESSAGE
        super().__init__(f"Erro inesperado do servidor. {_capitalize(detail)}", 500)
        self.original_error = error if isinstance(error, BaseException) else None
        if self.original_error is not None and self.original_error.__traceback__:
            self.with_traceback(self.original_error.__traceback__)
