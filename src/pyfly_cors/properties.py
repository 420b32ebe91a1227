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
"""CORS configuration properties (``pyfly.cors.*``).

Options can be supplied with the dotted keys of the option table
(``"headers.allow"``, ``"origin.server"``) or with the field names
(``headers_allow``, ``origin_server``). YAML files may nest the header
lists::

    pyfly:
      cors:
        origin: ["https://*.example.com"]
        headers:
          allow: [Authorization, If-Match]
          expose: [Etag]
        credentials: true
        cache: 86400
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from pyfly_cors.core.config import config_properties
from pyfly_cors.exceptions import CorsConfigurationError
from pyfly_cors.methods import MethodResolver, split_tokens

DEFAULT_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE")


@config_properties(prefix="pyfly.cors")
class CorsProperties(BaseModel):
    """Immutable CORS options resolved once at middleware construction."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    origin: tuple[str, ...] = ()
    origin_server: str | None = Field(default=None, alias="origin.server")
    methods: tuple[str, ...] | MethodResolver | Callable[..., Any] = DEFAULT_METHODS
    headers_allow: tuple[str, ...] = Field(default=(), alias="headers.allow")
    headers_expose: tuple[str, ...] = Field(default=(), alias="headers.expose")
    credentials: bool = False
    cache: int | None = Field(default=None, ge=0)
    error: Callable[..., Any] | None = None
    logger: Any = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_options(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        data = dict(data)
        headers = data.pop("headers", None)
        if isinstance(headers, Mapping):
            for key in ("allow", "expose"):
                if key in headers:
                    data.setdefault(f"headers.{key}", headers[key])
        elif headers is not None:
            data["headers"] = headers  # rejected as an unknown option
        # Field names win over aliases so env overrides beat file values.
        for name, field in cls.model_fields.items():
            if field.alias and name in data:
                data.pop(field.alias, None)
        return data

    @field_validator("origin", "headers_allow", "headers_expose", mode="before")
    @classmethod
    def _split_lists(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (str, list, tuple, set, frozenset)):
            return split_tokens(value)
        return value

    @field_validator("methods", mode="before")
    @classmethod
    def _split_methods(cls, value: Any) -> Any:
        if isinstance(value, (str, list, tuple, set, frozenset)):
            return split_tokens(value)
        return value

    @field_validator("logger")
    @classmethod
    def _check_logger(cls, value: Any) -> Any:
        if value is None or all(callable(getattr(value, name, None)) for name in ("debug", "warning")):
            return value
        raise ValueError(f"'logger' must provide debug() and warning(), got {type(value).__name__}")

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, **kwargs: Any) -> CorsProperties:
        """Validate an option mapping and/or keyword arguments.

        Raises:
            CorsConfigurationError: On unknown options or invalid values.
        """
        merged = {**(options or {}), **kwargs}
        try:
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise CorsConfigurationError(f"Invalid CORS options:\n{exc}") from exc
