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

"""Common exception hierarchy for listops."""

from __future__ import annotations

__all__ = ["ListOpsError", "ListOpsTypeError", "ListOpsValidationError"]


class ListOpsError(Exception):
    """Base error for all listops exceptions."""


class ListOpsValidationError(ListOpsError, ValueError):
    """Raised when configuration or command-line input fails validation."""


class ListOpsTypeError(ListOpsError, TypeError):
    """Raised when list elements break the contract an operation relies on.

    Set-backed operations need hashable elements and ``join`` needs strings.
    ``None`` and empty inputs never raise.
    """

    def __init__(self, operation: str, detail: str) -> None:
        """Initialise the error with the failing operation and a reason.

        Args:
            operation: Name of the list operation that rejected its input.
            detail: Human-readable description of the contract violation.
        """
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation}: {detail}")
