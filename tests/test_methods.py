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
"""Tests for static and dynamic method resolvers."""

from __future__ import annotations

import pytest

from pyfly_cors.exceptions import CorsConfigurationError
from pyfly_cors.methods import (
    DynamicMethods,
    MethodResolver,
    StaticMethods,
    method_resolver,
    split_tokens,
)


class MethodsHandler:
    def __call__(self, request):
        return ["GET", "POST", "DELETE"]

    @staticmethod
    def methods(request):
        return ["GET", "POST", "DELETE"]


class TestSplitTokens:
    def test_splits_comma_string(self) -> None:
        assert split_tokens("GET, POST ,DELETE") == ("GET", "POST", "DELETE")

    def test_drops_blanks_and_duplicates(self) -> None:
        assert split_tokens(["GET", "", " GET ", "PUT"]) == ("GET", "PUT")

    def test_none_is_empty(self) -> None:
        assert split_tokens(None) == ()


class TestStaticMethods:
    def test_resolves_configured_list(self) -> None:
        resolver = StaticMethods(["GET", "POST"])
        assert resolver.resolve(object()) == ("GET", "POST")
        assert isinstance(resolver, MethodResolver)


class TestDynamicMethods:
    def test_function_receives_request(self) -> None:
        seen = []

        def methods(request):
            seen.append(request)
            return "GET,PUT"

        request = object()
        assert DynamicMethods(methods).resolve(request) == ("GET", "PUT")
        assert seen == [request]

    def test_invokable_object(self) -> None:
        assert DynamicMethods(MethodsHandler()).resolve(None) == ("GET", "POST", "DELETE")


class TestMethodResolverFactory:
    def test_list_gives_static(self) -> None:
        assert isinstance(method_resolver(["GET"]), StaticMethods)

    def test_string_gives_static(self) -> None:
        assert method_resolver("GET,POST").resolve(None) == ("GET", "POST")

    def test_callables_give_dynamic(self) -> None:
        assert isinstance(method_resolver(lambda request: ["GET"]), DynamicMethods)
        assert isinstance(method_resolver(MethodsHandler()), DynamicMethods)
        assert isinstance(method_resolver(MethodsHandler.methods), DynamicMethods)

    def test_resolver_passes_through(self) -> None:
        resolver = StaticMethods(["GET"])
        assert method_resolver(resolver) is resolver

    def test_rejects_other_types(self) -> None:
        with pytest.raises(CorsConfigurationError):
            method_resolver(42)
