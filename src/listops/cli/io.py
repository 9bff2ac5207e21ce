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

"""IO helpers for CLI output."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Protocol

from listops import list_utils
from listops.core.model_types import OutputFormat


class _TextStream(Protocol):
    def write(self, s: str, /) -> int: ...


def _select_stream(*, err: bool = False) -> _TextStream:
    return sys.stderr if err else sys.stdout


def echo(message: str, *, newline: bool = True, err: bool = False) -> None:
    """Write a message to stdout/stderr."""
    stream = _select_stream(err=err)
    _ = stream.write(message)
    if newline:
        _ = stream.write("\n")


def render_result(
    result: str | bool | Sequence[str],
    output_format: OutputFormat,
    delimiter: str,
) -> str:
    """Render an operation result for the terminal.

    JSON output is a single document. Text output prints strings verbatim,
    booleans as ``true``/``false`` and lists joined with ``delimiter``.
    """
    if output_format is OutputFormat.JSON:
        payload = result if isinstance(result, (str, bool)) else list(result)
        return json.dumps(payload, ensure_ascii=False)
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, str):
        return result
    return list_utils.join(result, delimiter)


__all__ = ["echo", "render_result"]
