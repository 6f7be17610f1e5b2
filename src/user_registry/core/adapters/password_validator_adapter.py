"""Password strength validation."""

from collections.abc import Callable, Iterable

from user_registry.core.contracts.validators import UserPasswordValidator
from user_registry.core.errors import ApplicationError, InvalidParamError, ServerError

DEFAULT_PASSWORD_DENYLIST = (
    "Password123",
    "Admin123!",
    "12345678",
    "Senha123!",
    "Abc123!@#",
)

PasswordRule = tuple[str, Callable[[str], bool]]


def _is_symbol(char: str) -> bool:
    return not char.isalnum() and not char.isspace()


class RuleSetPasswordValidator(UserPasswordValidator):
    """Checks a password against an ordered rule set.

    Only the first violated rule is reported.
    """

    def __init__(
        self,
        min_length: int = 8,
        denylist: Iterable[str] = DEFAULT_PASSWORD_DENYLIST,
    ) -> None:
        blocked = frozenset(denylist)
        self._rules: list[PasswordRule] = [
            (
                f"deve ter pelo menos {min_length} caracteres",
                lambda p: len(p) >= min_length,
            ),
            (
                "deve conter pelo menos uma letra maiúscula",
                lambda p: any(c.isupper() for c in p),
            ),
            (
                "deve conter pelo menos uma letra minúscula",
                lambda p: any(c.islower() for c in p),
            ),
            (
                "deve conter pelo menos um número",
                lambda p: any(c.isdigit() for c in p),
            ),
            (
                "deve conter pelo menos um caractere especial",
                lambda p: any(_is_symbol(c) for c in p),
            ),
            ("não deve conter espaços", lambda p: not any(c.isspace() for c in p)),
            ("é muito comum ou previsível", lambda p: p not in blocked),
        ]

    def validate(self, password: str) -> None:
        try:
            for reason, check in self._rules:
                if not check(password):
                    raise InvalidParamError("senha", reason)
        except ApplicationError:
            raise
        except Exception as e:
            raise ServerError(e) from e
