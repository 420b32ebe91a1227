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
"""Tests for StructlogAdapter — the LoggingPort implementation."""

from __future__ import annotations

import logging

from pyfly_cors.core.config import Config
from pyfly_cors.logging.port import LoggingPort
from pyfly_cors.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self) -> None:
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_defaults(self) -> None:
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_reads_root_level_and_format(self) -> None:
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyfly": {"logging": {"format": "json", "level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert adapter._format == "json"

    def test_unknown_format_falls_back_to_console(self) -> None:
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyfly": {"logging": {"format": "xml"}}}))
        assert adapter._format == "console"

    def test_applies_per_logger_levels(self) -> None:
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyfly": {"logging": {"level": {"root": "INFO", "pyfly_cors": "DEBUG"}}}}))
        assert adapter._module_levels == {"pyfly_cors": "DEBUG"}
        assert logging.getLogger("pyfly_cors").level == logging.DEBUG


class TestStructlogAdapterLoggers:
    def test_get_logger_supports_structured_calls(self) -> None:
        logger = StructlogAdapter().get_logger("pyfly_cors.tests")
        logger.info("cors_test_event", origin="https://example.com")

    def test_set_level(self) -> None:
        StructlogAdapter().set_level("pyfly_cors.tests.level", "warning")
        assert logging.getLogger("pyfly_cors.tests.level").level == logging.WARNING
