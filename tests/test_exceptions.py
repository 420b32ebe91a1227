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
"""Tests for the CORS exception hierarchy."""

from __future__ import annotations

from pyfly_cors.exceptions import (
    CorsConfigurationError,
    CorsException,
    HeaderNotAllowed,
    MethodNotAllowed,
    OriginNotAllowed,
)


class TestCorsException:
    def test_default_code_per_subclass(self) -> None:
        assert OriginNotAllowed("x").code == "origin_not_allowed"
        assert MethodNotAllowed("x").code == "method_not_allowed"
        assert HeaderNotAllowed("x").code == "header_not_allowed"
        assert CorsException("x").code == "cors_error"

    def test_explicit_code_wins(self) -> None:
        assert OriginNotAllowed("x", code="custom").code == "custom"

    def test_context_defaults_to_fresh_dict(self) -> None:
        exc = CorsException("a")
        exc.context["key"] = "value"
        assert CorsException("b").context == {}

    def test_to_context(self) -> None:
        exc = MethodNotAllowed("CORS requested method is not supported.", context={"method": "PUT"})
        assert exc.to_context() == {
            "message": "CORS requested method is not supported.",
            "code": "method_not_allowed",
            "method": "PUT",
        }


class TestHierarchy:
    def test_rejections_are_cors_exceptions(self) -> None:
        for cls in (OriginNotAllowed, MethodNotAllowed, HeaderNotAllowed):
            assert issubclass(cls, CorsException)

    def test_configuration_error_is_value_error(self) -> None:
        assert issubclass(CorsConfigurationError, ValueError)
        assert not issubclass(CorsConfigurationError, CorsException)
