"""Unit tests for the Argon2id hash provider."""

from unittest.mock import patch

import pytest

from tests.fixtures.core import LIGHT_HASH_OPTIONS
from user_registry.core.contracts.hash_provider import HashOptions
from user_registry.core.errors import InvalidParamError, ServerError
from user_registry.core.providers import DEFAULT_HASH_OPTIONS, Argon2Hash


class TestArgon2Hash:
    @pytest.mark.asyncio
    async def test_hash_and_compare(self, hash_provider):
        hashed = await hash_provider.hash("Segura@2024")

        assert hashed.startswith("$argon2id$")
        assert "Segura@2024" not in hashed
        assert await hash_provider.compare("Segura@2024", hashed) is True

    @pytest.mark.asyncio
    async def test_compare_mismatch_returns_false(self, hash_provider):
        hashed = await hash_provider.hash("Segura@2024")

        assert await hash_provider.compare("Outra@2024", hashed) is False

    @pytest.mark.asyncio
    async def test_each_hash_is_salted(self, hash_provider):
        first = await hash_provider.hash("Segura@2024")
        second = await hash_provider.hash("Segura@2024")

        assert first != second

    @pytest.mark.asyncio
    async def test_instance_options_are_encoded(self, hash_provider):
        hashed = await hash_provider.hash("Segura@2024")

        assert "m=1024,t=1,p=1" in hashed

    @pytest.mark.asyncio
    async def test_call_options_override_instance_options(self, hash_provider):
        hashed = await hash_provider.hash("Segura@2024", HashOptions(iterations=2))

        assert "m=1024,t=2,p=1" in hashed

    @pytest.mark.asyncio
    async def test_rejects_empty_plaintext(self, hash_provider):
        with pytest.raises(InvalidParamError) as exc_info:
            await hash_provider.hash("")

        assert exc_info.value.message == "Parâmetro inválido: Texto. Não pode ser vazio."

    @pytest.mark.asyncio
    async def test_compare_rejects_empty_arguments(self, hash_provider):
        with pytest.raises(InvalidParamError, match="Texto"):
            await hash_provider.compare("", "$argon2id$...")
        with pytest.raises(InvalidParamError, match="Hash. Não pode ser vazio"):
            await hash_provider.compare("Segura@2024", "")

    @pytest.mark.asyncio
    async def test_compare_rejects_malformed_hash(self, hash_provider):
        with pytest.raises(InvalidParamError) as exc_info:
            await hash_provider.compare("Segura@2024", "not-a-hash")

        assert exc_info.value.message == "Parâmetro inválido: Hash. Formato inválido."

    @pytest.mark.asyncio
    async def test_library_failure_becomes_server_error(self, hash_provider):
        with patch(
            "user_registry.core.providers.argon2_hash.PasswordHasher"
        ) as hasher_cls:
            hasher_cls.return_value.hash.side_effect = RuntimeError("sem memória")

            with pytest.raises(ServerError) as exc_info:
                await hash_provider.hash("Segura@2024")

        assert exc_info.value.message == "Erro inesperado do servidor. Sem memória"

    def test_with_options_returns_new_provider(self, hash_provider):
        stronger = hash_provider.with_options(HashOptions(iterations=4))

        assert stronger is not hash_provider
        assert stronger.options.iterations == 4
        assert stronger.options.memory_cost == LIGHT_HASH_OPTIONS.memory_cost
        assert hash_provider.options.iterations == LIGHT_HASH_OPTIONS.iterations

    def test_options_property_is_a_copy(self, hash_provider):
        options = hash_provider.options
        options.iterations = 99

        assert hash_provider.options.iterations == LIGHT_HASH_OPTIONS.iterations

    def test_defaults_apply_without_options(self):
        hasher = Argon2Hash()._hasher(None)

        assert hasher.time_cost == DEFAULT_HASH_OPTIONS.iterations
        assert hasher.memory_cost == DEFAULT_HASH_OPTIONS.memory_cost
        assert hasher.parallelism == DEFAULT_HASH_OPTIONS.parallelism
        assert hasher.hash_len == DEFAULT_HASH_OPTIONS.hash_length

    def test_merged_with_keeps_unset_values(self):
        merged = DEFAULT_HASH_OPTIONS.merged_with(HashOptions(parallelism=1))

        assert merged.parallelism == 1
        assert merged.iterations == DEFAULT_HASH_OPTIONS.iterations
        assert DEFAULT_HASH_OPTIONS.parallelism == 4
