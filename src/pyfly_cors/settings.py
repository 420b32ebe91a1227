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
"""Origin allow-list evaluation."""

from __future__ import annotations

from collections.abc import Iterable

from pyfly_cors.wildcard import glob_match, has_wildcard

ANY_ORIGIN = "*"


class OriginPolicy:
    """Decides whether a request origin is allowed.

    Exact matches are checked first (``*`` on its own allows everything),
    then each wildcard pattern in configured order. An empty policy allows
    nothing; the engine treats that as "CORS disabled" rather than as a
    rejection.
    """

    __slots__ = ("_origins", "_exact", "_patterns")

    def __init__(self, origins: Iterable[str] = ()) -> None:
        self._origins: tuple[str, ...] = tuple(origins)
        self._exact = frozenset(self._origins)
        self._patterns = tuple(o for o in self._origins if o != ANY_ORIGIN and has_wildcard(o))

    @property
    def origins(self) -> tuple[str, ...]:
        return self._origins

    @property
    def is_empty(self) -> bool:
        return not self._origins

    @property
    def allows_all(self) -> bool:
        return ANY_ORIGIN in self._exact

    def is_origin_allowed(self, origin: str) -> bool:
        if not origin:
            return False
        if self.allows_all or origin in self._exact:
            return True
        return any(glob_match(pattern, origin) for pattern in self._patterns)

    def __repr__(self) -> str:
        return f"OriginPolicy({list(self._origins)!r})"


# Alias for callers that configure the policy as "settings".
Settings = OriginPolicy
