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
"""Starlette adapter — CORS filter, ASGI middleware and filter chain."""

from pyfly_cors.adapters.starlette.cors_filter import CorsFilter, apply_cors_headers
from pyfly_cors.adapters.starlette.errors import (
    DefaultErrorResponder,
    ErrorHandler,
    ErrorResponder,
    HandlerErrorResponder,
    error_responder,
)
from pyfly_cors.adapters.starlette.filter_chain import WebFilterChainMiddleware
from pyfly_cors.adapters.starlette.middleware import CorsMiddleware

__all__ = [
    "CorsFilter",
    "CorsMiddleware",
    "DefaultErrorResponder",
    "ErrorHandler",
    "ErrorResponder",
    "HandlerErrorResponder",
    "WebFilterChainMiddleware",
    "apply_cors_headers",
    "error_responder",
]
