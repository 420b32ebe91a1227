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
"""Allowed-method resolution — static lists or per-request callables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable

from pyfly_cors.exceptions import CorsConfigurationError


@runtime_checkable
class MethodResolver(Protocol):
    """Resolves the methods allowed for a given request."""

    def resolve(self, request: Any) -> tuple[str, ...]: ...


def split_tokens(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalise a comma-separated string or iterable into stripped, unique tokens.

    Order of first appearance is preserved.
    """
    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else value
    seen: dict[str, None] = {}
    for item in items:
        token = str(item).strip()
        if token:
            seen.setdefault(token, None)
    return tuple(seen)


class StaticMethods:
    """A fixed set of allowed methods."""

    __slots__ = ("_methods",)

    def __init__(self, methods: str | Iterable[str]) -> None:
        self._methods = split_tokens(methods)

    def resolve(self, request: Any) -> tuple[str, ...]:
        return self._methods

    def __repr__(self) -> str:
        return f"StaticMethods({list(self._methods)!r})"


class DynamicMethods:
    """Allowed methods computed from the request on every call.

    *func* may be a function, a bound method or any object with
    ``__call__``. It receives the request and returns a list of methods
    (or a comma-separated string).
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], str | Iterable[str]]) -> None:
        self._func = func

    def resolve(self, request: Any) -> tuple[str, ...]:
        return split_tokens(self._func(request))

    def __repr__(self) -> str:
        return f"DynamicMethods({self._func!r})"


def method_resolver(methods: Any) -> MethodResolver:
    """Build the resolver matching the configured ``methods`` option."""
    if isinstance(methods, MethodResolver):
        return methods
    if isinstance(methods, (str, list, tuple, set, frozenset)):
        return StaticMethods(methods)
    if callable(methods):
        return DynamicMethods(methods)
    raise CorsConfigurationError(
        f"'methods' must be a list of methods or a callable, got {type(methods).__name__}"
    )
