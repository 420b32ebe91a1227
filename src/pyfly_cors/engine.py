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
"""CORS decision engine — framework-agnostic.

The engine only needs a request object exposing ``method`` and a
case-insensitive ``headers.get(name)``; Starlette's ``Request`` fits, as
does any lightweight stand-in used in tests. It never builds responses:
:meth:`CorsEngine.evaluate` returns a :class:`CorsDecision` that the
adapters turn into a preflight response, an error response, or headers
attached to the downstream response.

Flow::

    classify ─┬─ NON_CORS ───────────────────────────────► PASS_THROUGH
              ├─ PREFLIGHT ─ origin ─ method ─ headers ─┬► PREFLIGHT
              │                                         └► REJECTED
              └─ ACTUAL ──── origin ────────────────────┬► ACTUAL
                                                        └► REJECTED
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from pyfly_cors.exceptions import CorsException, HeaderNotAllowed, MethodNotAllowed, OriginNotAllowed
from pyfly_cors.methods import method_resolver, split_tokens
from pyfly_cors.properties import CorsProperties
from pyfly_cors.settings import OriginPolicy

ORIGIN = "Origin"
VARY = "Vary"
REQUEST_METHOD = "Access-Control-Request-Method"
REQUEST_HEADERS = "Access-Control-Request-Headers"
ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"
MAX_AGE = "Access-Control-Max-Age"


class RequestType(enum.Enum):
    NON_CORS = "non_cors"
    PREFLIGHT = "preflight"
    ACTUAL = "actual"


class Outcome(enum.Enum):
    PASS_THROUGH = "pass_through"
    PREFLIGHT = "preflight"
    ACTUAL = "actual"
    REJECTED = "rejected"


@dataclass(frozen=True)
class CorsDecision:
    """Result of evaluating one request.

    Attributes:
        outcome: What the adapter must do next.
        request_type: How the request was classified.
        headers: CORS headers to emit (preflight response or actual response).
        failure: The policy rejection when ``outcome`` is ``REJECTED``.
    """

    outcome: Outcome
    request_type: RequestType
    headers: dict[str, str] = field(default_factory=dict)
    failure: CorsException | None = None

    @property
    def is_terminal(self) -> bool:
        """``True`` when the next handler must not be invoked."""
        return self.outcome in (Outcome.PREFLIGHT, Outcome.REJECTED)


def merge_vary(existing: str | None, value: str) -> str:
    """Add *value* to a ``Vary`` header unless it is already listed."""
    if not existing:
        return value
    listed = {token.lower() for token in split_tokens(existing)}
    if value.lower() in listed or "*" in listed:
        return existing
    return f"{existing}, {value}"


class CorsEngine:
    """Evaluates requests against immutable :class:`CorsProperties`."""

    def __init__(self, properties: CorsProperties | None = None) -> None:
        self._props = properties or CorsProperties()
        self._origins = OriginPolicy(self._props.origin)
        self._methods = method_resolver(self._props.methods)
        self._allowed_headers = frozenset(h.lower() for h in self._props.headers_allow)

    @property
    def properties(self) -> CorsProperties:
        return self._props

    @property
    def origin_policy(self) -> OriginPolicy:
        return self._origins

    def classify(self, request: Any) -> RequestType:
        origin = request.headers.get(ORIGIN)
        if not origin:
            return RequestType.NON_CORS
        if self._props.origin_server is not None and origin == self._props.origin_server:
            return RequestType.NON_CORS
        if request.method == "OPTIONS" and request.headers.get(REQUEST_METHOD) is not None:
            return RequestType.PREFLIGHT
        return RequestType.ACTUAL

    def evaluate(self, request: Any) -> CorsDecision:
        request_type = self.classify(request)
        if request_type is RequestType.NON_CORS or self._origins.is_empty:
            return CorsDecision(Outcome.PASS_THROUGH, request_type)

        origin: str = request.headers.get(ORIGIN)
        try:
            self._check_origin(origin)
            if request_type is RequestType.PREFLIGHT:
                return CorsDecision(Outcome.PREFLIGHT, request_type, self._preflight_headers(request, origin))
        except CorsException as exc:
            return CorsDecision(Outcome.REJECTED, request_type, failure=exc)

        return CorsDecision(Outcome.ACTUAL, request_type, self._actual_headers(origin))

    def _check_origin(self, origin: str) -> None:
        if not self._origins.is_origin_allowed(origin):
            raise OriginNotAllowed("CORS request origin is not allowed.", context={"origin": origin})

    def _allow_origin_value(self, origin: str) -> str:
        if self._props.credentials or not self._origins.allows_all:
            return origin
        return "*"

    def _preflight_headers(self, request: Any, origin: str) -> dict[str, str]:
        requested_method: str = request.headers.get(REQUEST_METHOD)
        allowed_methods = self._methods.resolve(request)
        if requested_method not in allowed_methods:
            raise MethodNotAllowed(
                "CORS requested method is not supported.",
                context={"origin": origin, "method": requested_method, "allowed": list(allowed_methods)},
            )

        requested_headers = split_tokens(request.headers.get(REQUEST_HEADERS))
        rejected = [h for h in requested_headers if h.lower() not in self._allowed_headers]
        if rejected:
            raise HeaderNotAllowed(
                "CORS requested header is not allowed.",
                context={"origin": origin, "headers": rejected},
            )

        headers = {
            ALLOW_ORIGIN: self._allow_origin_value(origin),
            ALLOW_METHODS: ",".join(allowed_methods),
        }
        allow_headers = requested_headers or self._props.headers_allow
        if allow_headers:
            headers[ALLOW_HEADERS] = ",".join(allow_headers)
        if self._props.credentials:
            headers[ALLOW_CREDENTIALS] = "true"
        if self._props.cache is not None:
            headers[MAX_AGE] = str(self._props.cache)
        return headers

    def _actual_headers(self, origin: str) -> dict[str, str]:
        headers = {ALLOW_ORIGIN: self._allow_origin_value(origin)}
        if self._props.credentials:
            headers[ALLOW_CREDENTIALS] = "true"
        headers[VARY] = ORIGIN
        if self._props.headers_expose:
            headers[EXPOSE_HEADERS] = ",".join(self._props.headers_expose)
        return headers
