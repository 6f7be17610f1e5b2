"""Argon2id password hashing provider."""

from __future__ import annotations

import asyncio

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerifyMismatchError

from user_registry.core.contracts.hash_provider import HashOptions, HashProvider
from user_registry.core.errors import InvalidParamError, ServerError

DEFAULT_HASH_OPTIONS = HashOptions(
    iterations=3,
    memory_cost=65536,  # KiB, i.e. 64 MiB
    parallelism=4,
    hash_length=32,
)


class Argon2Hash(HashProvider):
    """Argon2id hashing with per-instance and per-call cost overrides.

    Salts are generated by argon2-cffi and embedded in the encoded hash, so
    ``compare`` needs no options: they are read back from the hash itself.
    Hashing is CPU bound and runs in a worker thread.
    """

    def __init__(self, options: HashOptions | None = None) -> None:
        self._options = options.model_copy() if options else HashOptions()

    @property
    def options(self) -> HashOptions:
        return self._options.model_copy()

    def _hasher(self, options: HashOptions | None) -> PasswordHasher:
        merged = DEFAULT_HASH_OPTIONS.merged_with(self._options).merged_with(options)
        return PasswordHasher(
            time_cost=merged.iterations,
            memory_cost=merged.memory_cost,
            parallelism=merged.parallelism,
            hash_len=merged.hash_length,
            type=Type.ID,
        )

    async def hash(self, plaintext: str, options: HashOptions | None = None) -> str:
        if not plaintext:
            raise InvalidParamError("texto", "não pode ser vazio")

        try:
            hasher = self._hasher(options)
            return await asyncio.to_thread(hasher.hash, plaintext)
        except Exception as e:
            raise ServerError(e) from e

    async def compare(self, plaintext: str, hashed_text: str) -> bool:
        if not plaintext:
            raise InvalidParamError("texto", "não pode ser vazio")
        if not hashed_text:
            raise InvalidParamError("hash", "não pode ser vazio")

        try:
            return await asyncio.to_thread(
                PasswordHasher().verify, hashed_text, plaintext
            )
        except VerifyMismatchError:
            return False
        except InvalidHashError as e:
            raise InvalidParamError("hash", "formato inválido") from e
        except Exception as e:
            if "invalid" in str(e).lower():
                raise InvalidParamError("hash", "formato inválido") from e
            raise ServerError(e) from e

    def with_options(self, options: HashOptions) -> Argon2Hash:
        return Argon2Hash(self._options.merged_with(options))
