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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from pyfly_cors.adapters.starlette.cors_filter import CorsFilter, apply_cors_headers
from pyfly_cors.core.config import Config
from pyfly_cors.engine import Outcome
from pyfly_cors.properties import CorsProperties


class CorsMiddleware:
    """Wraps an ASGI app with the CORS policy of a :class:`CorsFilter`.

    Unlike running :class:`CorsFilter` inside a filter chain, the downstream
    response is never buffered: CORS headers are injected into the
    ``http.response.start`` message on its way out, so streaming responses
    keep streaming.

    Usage::

        app = Starlette(
            routes=routes,
            middleware=[Middleware(CorsMiddleware, options={"origin": ["*.example.com"]})],
        )
    """

    def __init__(
        self,
        app: ASGIApp,
        options: Mapping[str, Any] | CorsProperties | None = None,
        **kwargs: Any,
    ) -> None:
        self.app = app
        self._filter = CorsFilter(options, **kwargs)

    @classmethod
    def from_config(cls, app: ASGIApp, config: Config, **kwargs: Any) -> CorsMiddleware:
        return cls(app, CorsFilter.from_config(config).properties, **kwargs)

    @property
    def cors_filter(self) -> CorsFilter:
        return self._filter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        if self._filter.should_not_filter(request):
            await self.app(scope, receive, send)
            return

        decision = self._filter.evaluate(request)
        if decision.outcome is Outcome.PASS_THROUGH:
            await self.app(scope, receive, send)
            return
        if decision.is_terminal:
            response = await self._filter.terminal_response(request, decision)
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                apply_cors_headers(MutableHeaders(scope=message), decision.headers)
            await send(message)

        await self.app(scope, receive, send_with_cors)
