"""Transport-agnostic request/response shapes used by controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HttpRequest(BaseModel):
    body: Any = None
    params: dict[str, Any] = Field(default_factory=dict)
    query: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    request_id: str | None = None


class ResponseMetadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: str
    request_id: str | None = None


class ResponseBody(BaseModel):
    """Uniform response envelope."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    data: Any = None
    error_message: str | None = None
    metadata: ResponseMetadata


class HttpResponse(BaseModel):
    status_code: int
    body: ResponseBody

    def content(self) -> dict[str, Any]:
        """JSON-ready envelope with camelCase keys and unset optionals left out."""
        return self.body.model_dump(mode="json", by_alias=True, exclude_none=True)


class Controller(ABC):
    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        pass
