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
"""Tests for CorsProperties — option parsing and validation."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from pyfly_cors.core.config import Config
from pyfly_cors.exceptions import CorsConfigurationError
from pyfly_cors.methods import DynamicMethods, StaticMethods
from pyfly_cors.properties import DEFAULT_METHODS, CorsProperties


class TestDefaults:
    def test_defaults(self) -> None:
        props = CorsProperties()
        assert props.origin == ()
        assert props.origin_server is None
        assert props.methods == DEFAULT_METHODS
        assert props.headers_allow == ()
        assert props.headers_expose == ()
        assert props.credentials is False
        assert props.cache is None
        assert props.error is None
        assert props.logger is None

    def test_frozen(self) -> None:
        props = CorsProperties()
        with pytest.raises(ValidationError):
            props.credentials = True  # type: ignore[misc]


class TestOptionKeys:
    def test_dotted_option_keys(self) -> None:
        props = CorsProperties.from_options(
            {
                "origin": ["*.example.com"],
                "origin.server": "https://example.com",
                "methods": ["GET", "POST"],
                "headers.allow": ["Authorization", "If-Match"],
                "headers.expose": ["Authorization", "Etag"],
                "credentials": True,
                "cache": 86400,
            }
        )
        assert props.origin == ("*.example.com",)
        assert props.origin_server == "https://example.com"
        assert props.methods == ("GET", "POST")
        assert props.headers_allow == ("Authorization", "If-Match")
        assert props.headers_expose == ("Authorization", "Etag")
        assert props.credentials is True
        assert props.cache == 86400

    def test_field_names_as_keywords(self) -> None:
        props = CorsProperties.from_options(headers_allow=["X-Token"], credentials=True)
        assert props.headers_allow == ("X-Token",)
        assert props.credentials is True

    def test_keywords_override_mapping(self) -> None:
        props = CorsProperties.from_options({"credentials": False}, credentials=True)
        assert props.credentials is True

    def test_origin_string(self) -> None:
        assert CorsProperties.from_options({"origin": "*"}).origin == ("*",)
        assert CorsProperties.from_options({"origin": "https://a.com, https://b.com"}).origin == (
            "https://a.com",
            "https://b.com",
        )

    def test_nested_headers_section(self) -> None:
        props = CorsProperties.from_options({"headers": {"allow": ["Authorization"], "expose": ["Etag"]}})
        assert props.headers_allow == ("Authorization",)
        assert props.headers_expose == ("Etag",)

    def test_callable_methods_kept(self) -> None:
        def methods(request):
            return ["GET"]

        assert CorsProperties.from_options({"methods": methods}).methods is methods

    def test_error_handler_kept(self) -> None:
        def handler(request, response, context):
            return response

        assert CorsProperties.from_options({"error": handler}).error is handler

    def test_method_resolvers_kept(self) -> None:
        static = StaticMethods(["GET"])
        dynamic = DynamicMethods(lambda request: ["GET"])

        assert CorsProperties.from_options({"methods": static}).methods is static
        assert CorsProperties.from_options({"methods": dynamic}).methods is dynamic

    def test_stdlib_logger_accepted(self) -> None:
        log = logging.getLogger("app.cors")
        assert CorsProperties.from_options({"logger": log}).logger is log


class TestValidation:
    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(CorsConfigurationError, match="Invalid CORS options"):
            CorsProperties.from_options({"origins": ["*"]})

    def test_negative_cache_rejected(self) -> None:
        with pytest.raises(CorsConfigurationError):
            CorsProperties.from_options({"cache": -1})

    def test_non_callable_error_rejected(self) -> None:
        with pytest.raises(CorsConfigurationError):
            CorsProperties.from_options({"error": "not callable"})

    def test_non_callable_methods_rejected(self) -> None:
        with pytest.raises(CorsConfigurationError):
            CorsProperties.from_options({"methods": 42})

    def test_logger_without_log_methods_rejected(self) -> None:
        with pytest.raises(CorsConfigurationError, match="logger"):
            CorsProperties.from_options({"logger": "app.cors"})


class TestConfigBinding:
    def test_bind_from_nested_config(self) -> None:
        config = Config(
            {
                "pyfly": {
                    "cors": {
                        "origin": ["https://*.example.com"],
                        "headers": {"allow": ["Authorization"], "expose": ["Etag"]},
                        "credentials": True,
                        "cache": 600,
                    }
                }
            }
        )
        props = config.bind(CorsProperties)
        assert props.origin == ("https://*.example.com",)
        assert props.headers_allow == ("Authorization",)
        assert props.headers_expose == ("Etag",)
        assert props.credentials is True
        assert props.cache == 600

    def test_env_overrides_bound_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PYFLY_CORS_ORIGIN", "https://a.com,https://b.com")
        monkeypatch.setenv("PYFLY_CORS_CREDENTIALS", "true")
        monkeypatch.setenv("PYFLY_CORS_HEADERS_ALLOW", "X-Token")
        config = Config({"pyfly": {"cors": {"origin": ["*"], "headers": {"allow": ["Authorization"]}}}})
        props = config.bind(CorsProperties)
        assert props.origin == ("https://a.com", "https://b.com")
        assert props.credentials is True
        assert props.headers_allow == ("X-Token",)

    def test_invalid_config_fails_fast(self) -> None:
        config = Config({"pyfly": {"cors": {"cache": "soon"}}})
        with pytest.raises(ValueError, match="CorsProperties"):
            config.bind(CorsProperties)
