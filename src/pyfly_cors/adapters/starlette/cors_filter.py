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
"""CORS filter — enforces the CORS policy inside a WebFilter chain."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, cast

import structlog
from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import Response

from pyfly_cors.adapters.starlette.errors import error_responder
from pyfly_cors.core.config import Config
from pyfly_cors.engine import VARY, CorsDecision, CorsEngine, Outcome, merge_vary
from pyfly_cors.filters import OncePerRequestFilter
from pyfly_cors.logging.structlog_adapter import StructlogAdapter
from pyfly_cors.ordering import HIGHEST_PRECEDENCE, order
from pyfly_cors.ports.filter import CallNext
from pyfly_cors.properties import CorsProperties

logger = structlog.get_logger("pyfly_cors")


def apply_cors_headers(headers: MutableHeaders, cors_headers: Mapping[str, str]) -> None:
    """Copy *cors_headers* onto a response's headers, merging ``Vary``."""
    for name, value in cors_headers.items():
        if name == VARY:
            headers[VARY] = merge_vary(headers.get(VARY), value)
        else:
            headers[name] = value


def _event_logger(configured: Any) -> Any:
    """Return a logger accepting ``logger.warning(event, **fields)``.

    Stdlib loggers and adapters are wrapped in a structlog ``BoundLogger``
    that renders the fields into the message.
    """
    if configured is None:
        return logger
    if isinstance(configured, (logging.Logger, logging.LoggerAdapter)):
        return structlog.wrap_logger(
            configured,
            processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
            wrapper_class=structlog.stdlib.BoundLogger,
        )
    return configured


@order(HIGHEST_PRECEDENCE + 50)
class CorsFilter(OncePerRequestFilter):
    """Answers preflights, rejects disallowed requests and decorates the rest.

    Accepts the options either as a mapping with the dotted option keys, as
    keyword arguments, or as a ready :class:`CorsProperties`::

        CorsFilter({"origin": ["*.example.com"], "headers.allow": ["Authorization"]})
        CorsFilter(origin="*", credentials=True, cache=86400)

    The filter supports both calling conventions of HTTP middleware:
    single-pass ``do_filter(request, call_next)`` and double-pass
    ``await cors(request, response, next)`` where ``next(request, response)``
    returns the downstream response.
    """

    def __init__(
        self,
        options: Mapping[str, Any] | CorsProperties | None = None,
        *,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
        **kwargs: Any,
    ) -> None:
        if isinstance(options, CorsProperties):
            properties = CorsProperties.from_options(dict(options), **kwargs) if kwargs else options
        else:
            properties = CorsProperties.from_options(options, **kwargs)

        self._engine = CorsEngine(properties)
        self._errors = error_responder(properties.error)
        self._logger = _event_logger(properties.logger)
        if url_patterns:
            self.url_patterns = tuple(url_patterns)
        if exclude_patterns:
            self.exclude_patterns = tuple(exclude_patterns)

    @classmethod
    def from_config(cls, config: Config, **kwargs: Any) -> CorsFilter:
        """Build a filter from the ``pyfly.cors`` section of *config*.

        A ``pyfly.logging`` section, when present, configures structlog
        through :class:`StructlogAdapter` first.
        """
        if config.get_section("pyfly.logging"):
            StructlogAdapter().configure(config)
        return cls(config.bind(CorsProperties), **kwargs)

    @property
    def properties(self) -> CorsProperties:
        return self._engine.properties

    @property
    def engine(self) -> CorsEngine:
        return self._engine

    def evaluate(self, request: Request) -> CorsDecision:
        """Evaluate *request* and log the decision."""
        decision = self._engine.evaluate(request)
        if decision.failure is not None:
            self._logger.warning(
                "cors_request_rejected",
                code=decision.failure.code,
                request_type=decision.request_type.value,
                path=request.url.path,
                **decision.failure.context,
            )
        elif decision.outcome is Outcome.PREFLIGHT:
            self._logger.debug("cors_preflight_handled", path=request.url.path)
        elif decision.outcome is Outcome.PASS_THROUGH:
            self._logger.debug("cors_pass_through", request_type=decision.request_type.value)
        return decision

    async def terminal_response(self, request: Request, decision: CorsDecision) -> Response:
        """Build the response for a preflight or a rejected request."""
        if decision.outcome is Outcome.PREFLIGHT:
            return Response(status_code=200, headers=decision.headers)
        if decision.failure is None:
            raise ValueError(f"Decision {decision.outcome.value!r} has no terminal response")
        return await self._errors.respond(request, decision.failure.to_context())

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        decision = self.evaluate(request)
        if decision.outcome is Outcome.PASS_THROUGH:
            return cast(Response, await call_next(request))
        if decision.is_terminal:
            return await self.terminal_response(request, decision)

        response = cast(Response, await call_next(request))
        apply_cors_headers(response.headers, decision.headers)
        return response

    async def __call__(
        self,
        request: Request,
        response: Response,
        next_handler: Callable[[Request, Response], Any],
    ) -> Response:
        async def call_next(req: Request) -> Response:
            result = next_handler(req, response)
            if inspect.isawaitable(result):
                result = await result
            return cast(Response, result)

        if self.should_not_filter(request):
            return await call_next(request)
        return await self.do_filter(request, call_next)
