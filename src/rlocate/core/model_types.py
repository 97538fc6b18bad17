# Copyright 2025 CrownOps Engineering
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

"""Enumerations used by the logging and CLI layers."""

from __future__ import annotations

from rlocate.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            message = f"Unknown log format '{raw}'"
            raise ValueError(message) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable system components.

    Attributes:
        LOCATOR: Runfiles discovery.
        MANIFEST: Manifest parsing.
        RESOLVER: Logical path resolution.
        FACTORY: Resolver construction.
        CLI: Command-line interface.
    """

    LOCATOR = "locator"
    MANIFEST = "manifest"
    RESOLVER = "resolver"
    FACTORY = "factory"
    CLI = "cli"


class OutputFormat(StrEnum):
    """Stdout formats supported by the CLI."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> OutputFormat:
        """Create an OutputFormat from a user-provided string.

        Args:
            raw: Text representation of an output format.

        Returns:
            OutputFormat: Normalised output format value.

        Raises:
            ValueError: If the format cannot be parsed.
        """
        token = raw.strip().lower()
        try:
            return cls(token)
        except ValueError as exc:
            message = f"Unknown output format '{raw}'"
            raise ValueError(message) from exc


__all__ = ["LogComponent", "LogFormat", "OutputFormat"]
