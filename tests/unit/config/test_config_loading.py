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

"""Unit tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from listops.config import (
    Config,
    ConfigReadError,
    InvalidConfigFileError,
    load_config,
)
from listops.core.model_types import LogFormat, OutputFormat
from listops.exceptions import ListOpsValidationError

pytestmark = pytest.mark.unit


def _write(path: Path, text: str) -> Path:
    _ = path.write_text(text, encoding="utf-8")
    return path


def test_load_config_defaults_without_files(tmp_path: Path) -> None:
    assert load_config(base_dir=tmp_path, environ={}) == Config()


def test_load_config_reads_project_file(tmp_path: Path) -> None:
    _ = _write(
        tmp_path / "listops.toml",
        'config_version = 0\ndelimiter = ";"\noutput_format = "JSON"\nlog_level = "Debug"\n',
    )
    config = load_config(base_dir=tmp_path, environ={})
    assert config.delimiter == ";"
    assert config.output_format is OutputFormat.JSON
    assert config.log_level == "debug"
    assert config.log_format is None


def test_load_config_reads_hidden_file_and_tool_table(tmp_path: Path) -> None:
    _ = _write(tmp_path / ".listops.toml", '[tool.listops]\ndelimiter = " "\nlog_format = "json"\n')
    config = load_config(base_dir=tmp_path, environ={})
    assert config.delimiter == " "
    assert config.log_format is LogFormat.JSON


def test_load_config_prefers_explicit_path(tmp_path: Path) -> None:
    _ = _write(tmp_path / "listops.toml", 'delimiter = ";"\n')
    explicit = _write(tmp_path / "custom.toml", 'delimiter = "|"\n')
    assert load_config(explicit, base_dir=tmp_path, environ={}).delimiter == "|"


def test_load_config_env_overrides_file(tmp_path: Path) -> None:
    _ = _write(tmp_path / "listops.toml", 'delimiter = ";"\n')
    config = load_config(
        base_dir=tmp_path,
        environ={"LISTOPS_DELIMITER": ":", "LISTOPS_OUTPUT_FORMAT": "json"},
    )
    assert config.delimiter == ":"
    assert config.output_format is OutputFormat.JSON


def test_load_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigReadError):
        _ = load_config(tmp_path / "absent.toml", environ={})


def test_load_config_malformed_toml(tmp_path: Path) -> None:
    _ = _write(tmp_path / "listops.toml", "delimiter = \n")
    with pytest.raises(ConfigReadError) as excinfo:
        _ = load_config(base_dir=tmp_path, environ={})
    assert isinstance(excinfo.value, ListOpsValidationError)


@pytest.mark.parametrize(
    "content",
    [
        'delimiter = ""\n',
        "config_version = 3\n",
        'output_format = "yaml"\n',
        'log_level = "verbose"\n',
        'unknown = "x"\n',
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str) -> None:
    _ = _write(tmp_path / "listops.toml", content)
    with pytest.raises(InvalidConfigFileError):
        _ = load_config(base_dir=tmp_path, environ={})
