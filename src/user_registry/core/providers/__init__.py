from .argon2_hash import DEFAULT_HASH_OPTIONS, Argon2Hash
from .loguru_logger import LoguruLoggerProvider

__all__ = ["DEFAULT_HASH_OPTIONS", "Argon2Hash", "LoguruLoggerProvider"]
