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
"""pyfly-cors — CORS policy enforcement for ASGI applications.

Framework-agnostic pieces (origin policy, method resolvers, decision engine)
are exported next to the default Starlette adapter.
"""

from pyfly_cors.adapters.starlette import (
    CorsFilter,
    CorsMiddleware,
    WebFilterChainMiddleware,
)
from pyfly_cors.core.config import Config, config_properties
from pyfly_cors.engine import CorsDecision, CorsEngine, Outcome, RequestType
from pyfly_cors.exceptions import (
    CorsConfigurationError,
    CorsException,
    HeaderNotAllowed,
    MethodNotAllowed,
    OriginNotAllowed,
)
from pyfly_cors.methods import DynamicMethods, MethodResolver, StaticMethods
from pyfly_cors.properties import CorsProperties
from pyfly_cors.settings import OriginPolicy, Settings

__all__ = [
    # Framework-agnostic
    "Config",
    "CorsConfigurationError",
    "CorsDecision",
    "CorsEngine",
    "CorsException",
    "CorsProperties",
    "DynamicMethods",
    "HeaderNotAllowed",
    "MethodNotAllowed",
    "MethodResolver",
    "OriginNotAllowed",
    "OriginPolicy",
    "Outcome",
    "RequestType",
    "Settings",
    "StaticMethods",
    "config_properties",
    # Default adapter (Starlette)
    "CorsFilter",
    "CorsMiddleware",
    "WebFilterChainMiddleware",
]
