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

"""Enumerations shared by the logging, configuration and CLI layers."""

from __future__ import annotations

from listops.compat import StrEnum


class LogComponent(StrEnum):
    """Logical component attached to structured log records."""

    OPS = "ops"
    CLI = "cli"
    CONFIG = "config"


class LogFormat(StrEnum):
    """Supported log output formats.

    Attributes:
        TEXT: Single-line human-readable records.
        JSON: One JSON object per record.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat from a string value.

        Args:
            raw: String representation of the format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class OutputFormat(StrEnum):
    """How the CLI renders operation results."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> OutputFormat:
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown output format '{raw}'"
            raise ValueError(msg) from exc


__all__ = ["LogComponent", "LogFormat", "OutputFormat"]
