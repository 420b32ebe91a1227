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
"""OncePerRequestFilter — base class for WebFilters with path matching."""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import Any

from pyfly_cors.ports.filter import CallNext
from pyfly_cors.wildcard import glob_match


class OncePerRequestFilter(abc.ABC):
    """Abstract :class:`~pyfly_cors.ports.filter.WebFilter` with URL-pattern matching.

    Attributes:
        url_patterns: Glob patterns the filter applies to. Empty means all paths.
        exclude_patterns: Glob patterns skipped even when ``url_patterns`` match.
    """

    url_patterns: Sequence[str] = ()
    exclude_patterns: Sequence[str] = ()

    def should_not_filter(self, request: Any) -> bool:
        path: str = request.url.path
        if self.url_patterns and not any(glob_match(p, path) for p in self.url_patterns):
            return True
        return any(glob_match(p, path) for p in self.exclude_patterns)

    @abc.abstractmethod
    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        """Execute the filter. Call ``await call_next(request)`` to proceed."""
        ...
