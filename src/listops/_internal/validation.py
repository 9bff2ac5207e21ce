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

"""Absent/empty guards shared by every list operation."""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import TypeGuard, TypeVar

T = TypeVar("T")

__all__ = ["empty_value", "is_empty", "is_not_empty"]


def is_empty(value: object) -> bool:
    """Return whether ``value`` is absent or has no elements.

    ``None``, empty strings and any sized container of length zero are empty.
    Objects without a length (numbers, iterators) are never considered empty.

    Args:
        value: Candidate input of any type.

    Returns:
        ``True`` when the value should be treated as absent.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_not_empty(value: T | None) -> TypeGuard[T]:
    """Inverse of :func:`is_empty`, narrowing away ``None`` for type checkers."""
    return not is_empty(value)


def empty_value(kind: Callable[[], T]) -> T:
    """Return a freshly allocated empty value of ``kind`` (``list``, ``tuple``, ``str``...).

    A new object is built on every call so callers never share mutable
    defaults.
    """
    return kind()
