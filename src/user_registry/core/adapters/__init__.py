"""Adapters wrapping third-party validation and sanitization libraries."""

from .birthdate_validator_adapter import AgeWindowBirthdateValidator
from .bleach_xss_sanitizer import BleachXssSanitizer
from .email_validator_adapter import EmailValidatorAdapter
from .password_validator_adapter import (
    DEFAULT_PASSWORD_DENYLIST,
    RuleSetPasswordValidator,
)
from .phonenumbers_validator_adapter import PhonenumbersValidatorAdapter

__all__ = [
    "DEFAULT_PASSWORD_DENYLIST",
    "AgeWindowBirthdateValidator",
    "BleachXssSanitizer",
    "EmailValidatorAdapter",
    "PhonenumbersValidatorAdapter",
    "RuleSetPasswordValidator",
]
