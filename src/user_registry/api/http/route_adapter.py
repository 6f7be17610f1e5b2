"""Bridge between FastAPI requests and transport-agnostic controllers."""

import json
from typing import Any

from fastapi import Request
from starlette.responses import JSONResponse

from user_registry.api.controllers import Controller, HttpRequest, HttpResponse
from user_registry.api.controllers.responses import handle_error
from user_registry.core.errors import InvalidParamError


async def _read_json_body(request: Request) -> Any:
    raw = await request.body()
    if not raw:
        return None
    return json.loads(raw)


def _render(response: HttpResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.content())


async def adapt_route(request: Request, controller: Controller) -> JSONResponse:
    """Run ``controller`` for ``request`` and render its envelope."""
    request_id = getattr(request.state, "request_id", None)
    try:
        body = await _read_json_body(request)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        error = InvalidParamError("corpo da requisição", "JSON inválido")
        error.__cause__ = e
        return _render(handle_error(error, request_id))

    http_request = HttpRequest(
        body=body,
        params=dict(request.path_params),
        query=dict(request.query_params),
        headers=dict(request.headers),
        request_id=request_id,
    )
    return _render(await controller.handle(http_request))
