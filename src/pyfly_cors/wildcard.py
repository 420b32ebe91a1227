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
"""Minimal shell-style wildcard matching.

Only ``*`` (any sequence, including empty) and ``?`` (exactly one character)
are special. Every other character, ``[`` and ``]`` included, is a literal,
so there is no such thing as a malformed pattern. Matching is case-sensitive.
"""

from __future__ import annotations

WILDCARD_CHARS = frozenset("*?")


def has_wildcard(pattern: str) -> bool:
    """Return ``True`` if *pattern* contains ``*`` or ``?``."""
    return any(ch in WILDCARD_CHARS for ch in pattern)


def glob_match(pattern: str, text: str) -> bool:
    """Return ``True`` if *text* matches the whole of *pattern*.

    Greedy scan with a single backtrack point (the last ``*`` seen), which
    keeps matching linear in practice and never recurses.
    """
    p = t = 0
    star = -1
    resume = 0

    while t < len(text):
        if p < len(pattern) and (pattern[p] == "?" or pattern[p] == text[t]) and pattern[p] != "*":
            p += 1
            t += 1
        elif p < len(pattern) and pattern[p] == "*":
            star = p
            resume = t
            p += 1
        elif star != -1:
            # Let the last star swallow one more character and retry.
            resume += 1
            t = resume
            p = star + 1
        else:
            return False

    while p < len(pattern) and pattern[p] == "*":
        p += 1
    return p == len(pattern)
