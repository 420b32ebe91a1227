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
"""Exception hierarchy for pyfly-cors.

Policy rejections (origin, method, headers) are raised inside the decision
engine and caught at its boundary, where they become the ``failure`` of a
:class:`~pyfly_cors.engine.CorsDecision`. They never reach the host server.

Configuration errors are raised at construction time and are meant to fail
application startup.
"""

from __future__ import annotations

from typing import Any


class CorsException(Exception):
    """Base exception for all CORS policy rejections.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. ``"origin_not_allowed"``).
        context: Key-value pairs describing the rejected request.
    """

    default_code: str = "cors_error"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.context: dict[str, Any] = context if context is not None else {}

    def to_context(self) -> dict[str, Any]:
        """Build the mapping handed to error handlers."""
        return {"message": self.message, "code": self.code, **self.context}


class OriginNotAllowed(CorsException):
    """The request ``Origin`` matches none of the allowed origins."""

    default_code = "origin_not_allowed"


class MethodNotAllowed(CorsException):
    """The preflight ``Access-Control-Request-Method`` is not allowed."""

    default_code = "method_not_allowed"


class HeaderNotAllowed(CorsException):
    """One of the preflight ``Access-Control-Request-Headers`` is not allowed."""

    default_code = "header_not_allowed"


class CorsConfigurationError(ValueError):
    """Invalid CORS options supplied at construction time."""
