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

"""Configuration loading for listops.

Project-level settings live in ``listops.toml`` or ``.listops.toml``; either
may nest its keys under ``[tool.listops]``. ``LISTOPS_DELIMITER`` and
``LISTOPS_OUTPUT_FORMAT`` override file values.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Final, cast

from pydantic import ValidationError

from listops._internal.logging_utils import structured_extra
from listops.compat import tomllib
from listops.core.model_types import LogComponent

from .models import Config, ConfigModel, ConfigReadError, InvalidConfigFileError, config_from_model

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("listops.toml", ".listops.toml")
DELIMITER_ENV: Final[str] = "LISTOPS_DELIMITER"
OUTPUT_FORMAT_ENV: Final[str] = "LISTOPS_OUTPUT_FORMAT"

logger: logging.Logger = logging.getLogger("listops.config")


def _read_toml(path: Path) -> dict[str, object]:
    try:
        raw_map: dict[str, object] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(path, exc) from exc
    tool_obj = raw_map.get("tool")
    if isinstance(tool_obj, dict):
        tool_section = cast("dict[str, object]", tool_obj).get("listops")
        if isinstance(tool_section, dict):
            return dict(cast("dict[str, object]", tool_section))
    return raw_map


def _apply_env_overrides(raw: dict[str, object], environ: Mapping[str, str]) -> dict[str, object]:
    merged = dict(raw)
    delimiter = environ.get(DELIMITER_ENV)
    if delimiter:
        merged["delimiter"] = delimiter
    output_format = environ.get(OUTPUT_FORMAT_ENV)
    if output_format:
        merged["output_format"] = output_format
    return merged


def _find_config_file(explicit_path: Path | None, base_dir: Path) -> Path | None:
    if explicit_path is not None:
        if not explicit_path.is_file():
            raise ConfigReadError(explicit_path, FileNotFoundError("no such file"))
        return explicit_path
    for filename in CONFIG_FILENAMES:
        candidate = base_dir / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(
    explicit_path: Path | None = None,
    *,
    base_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load listops configuration from a TOML file, the environment, or defaults.

    The search order is:

    1. ``explicit_path`` when provided (it must exist).
    2. ``listops.toml`` then ``.listops.toml`` inside ``base_dir``.

    Environment overrides are applied on top of whichever source was found,
    and the merged payload is validated as a whole.

    Args:
        explicit_path: Optional configuration file to read instead of searching.
        base_dir: Directory searched for the default filenames. Defaults to
            the current working directory.
        environ: Environment mapping to read overrides from. Defaults to
            ``os.environ``.

    Returns:
        The validated runtime configuration.

    Raises:
        ConfigReadError: If the selected file is missing or is not valid TOML.
        InvalidConfigFileError: If the merged settings fail validation.
    """
    env = os.environ if environ is None else environ
    search_root = Path.cwd() if base_dir is None else base_dir
    path = _find_config_file(explicit_path, search_root)
    raw = _read_toml(path) if path is not None else {}
    payload = _apply_env_overrides(raw, env)
    try:
        model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(path or Path("<environment>"), exc) from exc
    logger.debug(
        "Loaded configuration",
        extra=structured_extra(
            LogComponent.CONFIG,
            path=path or "<defaults>",
            details={"keys": sorted(payload)},
        ),
    )
    return config_from_model(model)


__all__ = ["CONFIG_FILENAMES", "DELIMITER_ENV", "OUTPUT_FORMAT_ENV", "load_config"]
