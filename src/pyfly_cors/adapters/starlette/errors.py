# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Error responders — turn a rejected CORS decision into a response."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from starlette.requests import Request
from starlette.responses import Response

DEFAULT_ERROR_STATUS = 401

# (request, response, context) -> response; may be a coroutine function.
ErrorHandler = Callable[[Request, Response, dict[str, Any]], Any]


@runtime_checkable
class ErrorResponder(Protocol):
    async def respond(self, request: Request, context: Mapping[str, Any]) -> Response: ...


class DefaultErrorResponder:
    """Answers every CORS failure with an empty 401."""

    async def respond(self, request: Request, context: Mapping[str, Any]) -> Response:
        return Response(status_code=DEFAULT_ERROR_STATUS)


class HandlerErrorResponder:
    """Delegates to a user handler.

    The handler receives the request, a fresh 401 response and the failure
    context. Whatever response it returns is used; any other return value
    (``None``, a string) falls back to the 401 it was given.
    """

    def __init__(self, handler: ErrorHandler) -> None:
        self._handler = handler

    async def respond(self, request: Request, context: Mapping[str, Any]) -> Response:
        response = Response(status_code=DEFAULT_ERROR_STATUS)
        result = self._handler(request, response, dict(context))
        if inspect.isawaitable(result):
            result = await result
        return result if isinstance(result, Response) else response


def error_responder(handler: ErrorHandler | None) -> ErrorResponder:
    """Resolve the ``error`` option once, at construction time."""
    if handler is None:
        return DefaultErrorResponder()
    return HandlerErrorResponder(handler)
