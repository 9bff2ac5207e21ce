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

"""Configuration models and validation for listops.

Pydantic models validate the raw TOML/environment payload; the resulting
values are frozen into the :class:`Config` dataclass used at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, field_validator

from listops._internal.logging_utils import LOG_LEVELS
from listops.core.constants import DEFAULT_DELIMITER
from listops.core.model_types import LogFormat, OutputFormat
from listops.exceptions import ListOpsValidationError

if TYPE_CHECKING:
    from pathlib import Path

    from pydantic import ValidationError

CONFIG_VERSION: Final[int] = 0


class ConfigValidationError(ListOpsValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of listops.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails schema validation."""

    def __init__(self, path: Path, error: ValidationError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid listops configuration in {path}: {error}")


class ConfigModel(BaseModel):
    """Pydantic model for validating listops configuration from TOML.

    Attributes:
        config_version: Schema version; only ``0`` is understood.
        delimiter: Default delimiter for splitting and joining CLI values.
        output_format: Default rendering of CLI results.
        log_format: Optional default log format for the CLI.
        log_level: Optional default log level for the CLI.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    config_version: int = CONFIG_VERSION
    delimiter: str = DEFAULT_DELIMITER
    output_format: OutputFormat = OutputFormat.TEXT
    log_format: LogFormat | None = None
    log_level: str | None = None

    @field_validator("config_version")
    @classmethod
    def _check_version(cls, value: int) -> int:
        if value != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(value, CONFIG_VERSION)
        return value

    @field_validator("delimiter")
    @classmethod
    def _require_delimiter(cls, value: str) -> str:
        # whitespace is a legitimate delimiter, so no stripping
        if not value:
            msg = "delimiter must be a non-empty string"
            raise ConfigValidationError(msg)
        return value

    @field_validator("output_format", "log_format", mode="before")
    @classmethod
    def _lower_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str | None:
        if value is None:
            return None
        level = str(value).strip().lower()
        if level not in LOG_LEVELS:
            allowed = ", ".join(LOG_LEVELS)
            msg = f"log_level must be one of: {allowed}"
            raise ConfigValidationError(msg)
        return level


@dataclass(slots=True, frozen=True)
class Config:
    """Runtime configuration consumed by the CLI.

    Attributes:
        delimiter: Delimiter used for list arguments and text output.
        output_format: Rendering of command results.
        log_format: Log format to apply when the command line does not set one.
        log_level: Log level to apply when the command line does not set one.
    """

    delimiter: str = DEFAULT_DELIMITER
    output_format: OutputFormat = OutputFormat.TEXT
    log_format: LogFormat | None = None
    log_level: str | None = None


def config_from_model(model: ConfigModel) -> Config:
    """Freeze a validated :class:`ConfigModel` into a :class:`Config`."""
    return Config(
        delimiter=model.delimiter,
        output_format=model.output_format,
        log_format=model.log_format,
        log_level=model.log_level,
    )


__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
