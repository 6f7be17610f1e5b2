"""Password hashing contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


class HashOptions(BaseModel):
    """Cost parameters for a one-way hash.

    Unset fields fall back to the next configuration level: per-call options
    first, then the provider instance options, then the built-in defaults.
    """

    iterations: int | None = Field(default=None, ge=1, description="Time cost")
    memory_cost: int | None = Field(default=None, ge=8, description="Memory in KiB")
    parallelism: int | None = Field(default=None, ge=1, description="Lanes/threads")
    hash_length: int | None = Field(default=None, ge=4, description="Output bytes")

    def merged_with(self, override: HashOptions | None) -> HashOptions:
        """Return a new instance where values set on ``override`` win."""
        if override is None:
            return self.model_copy()
        return self.model_copy(update=override.model_dump(exclude_none=True))


class HashProvider(ABC):
    @abstractmethod
    async def hash(self, plaintext: str, options: HashOptions | None = None) -> str:
        """Hash ``plaintext``; raises InvalidParamError when it is empty."""
        pass

    @abstractmethod
    async def compare(self, plaintext: str, hashed_text: str) -> bool:
        """Check ``plaintext`` against a hash produced by ``hash``."""
        pass

    @abstractmethod
    def with_options(self, options: HashOptions) -> HashProvider:
        """Return a new provider configured with ``options`` on top of ours."""
        pass
