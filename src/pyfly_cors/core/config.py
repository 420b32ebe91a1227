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
"""Configuration loading from YAML/TOML files and env vars, with model binding."""

from __future__ import annotations

import dataclasses
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PREFIX_ATTR = "__pyfly_config_prefix__"

_MAX_PLACEHOLDER_DEPTH = 10


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a pydantic model or dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="pyfly.cors")
        class CorsProperties(BaseModel):
            origin: list[str] = []
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PREFIX_ATTR, prefix)
        return cls

    return decorator


def env_key(key: str) -> str:
    """Environment variable consulted for a dot-notation key.

    ``pyfly.cors.origin`` -> ``PYFLY_CORS_ORIGIN``.
    """
    return key.upper().replace(".", "_").replace("-", "_")


class Config:
    """Hierarchical configuration with dot-notation access.

    Priority (highest wins):
    1. Environment variables (``PYFLY_CORS_ORIGIN`` for ``pyfly.cors.origin``)
    2. Values from the configuration dict or file
    3. Model defaults
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: list[str] | None = None) -> Config:
        """Load a YAML or TOML file, then merge ``<stem>-<profile><suffix>`` overlays.

        A missing base file yields an empty configuration.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        if path.is_file():
            data = cls._load(path)
            for profile in active_profiles or []:
                overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
                if overlay.is_file():
                    data = cls._deep_merge(data, cls._load(overlay))
        return cls(data)

    @staticmethod
    def _load(path: Path) -> dict[str, Any]:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = dict(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def _walk(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return None
            current = current[part]
        return current

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        String values may contain ``${NAME}`` or ``${NAME:default}``
        placeholders, resolved from the environment or from other keys.
        """
        env_val = os.environ.get(env_key(key))
        if env_val is not None:
            return env_val

        value = self._walk(key)
        if value is None:
            return default
        if isinstance(value, str) and "${" in value:
            return self._resolve_placeholders(value)
        return value

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        if _depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(f"Circular placeholder reference while resolving '{value}'")

        def _replace(match: re.Match[str]) -> str:
            ref, sep, fallback = match.group(1).partition(":")
            env_val = os.environ.get(ref)
            if env_val is not None:
                return env_val
            found = self._walk(ref)
            if found is not None:
                text = str(found)
                return self._resolve_placeholders(text, _depth + 1) if "${" in text else text
            if sep:
                return fallback
            raise ValueError(f"Cannot resolve placeholder '${{{match.group(1)}}}'")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get the nested mapping stored under *prefix* (empty if absent)."""
        section = self._walk(prefix)
        return dict(section) if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Bind the section named by ``@config_properties`` to *config_cls*.

        Environment variables override top-level keys of the section, e.g.
        ``PYFLY_CORS_CREDENTIALS=true`` for ``pyfly.cors.credentials``.

        Raises:
            ValueError: If the class is not decorated or validation fails.
        """
        prefix = getattr(config_cls, _CONFIG_PREFIX_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = self.get_section(prefix)
        for name in self._field_names(config_cls):
            env_val = os.environ.get(env_key(f"{prefix}.{name}"))
            if env_val is not None:
                section[name] = env_val

        if issubclass(config_cls, BaseModel):
            try:
                return config_cls.model_validate(section)
            except ValidationError as exc:
                raise ValueError(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
                ) from exc

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            if field.name not in section:
                continue
            value = section[field.name]
            expected = hints.get(field.name)
            if isinstance(value, str) and expected is bool:
                value = value.lower() in ("true", "1", "yes")
            elif isinstance(value, str) and expected in (int, float):
                value = expected(value)
            kwargs[field.name] = value
        return config_cls(**kwargs)

    @staticmethod
    def _field_names(config_cls: type) -> list[str]:
        if issubclass(config_cls, BaseModel):
            return list(config_cls.model_fields)
        return [f.name for f in dataclasses.fields(config_cls)]
