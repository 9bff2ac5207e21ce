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

"""Helper functions for flattening and hash-based collection operations."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from itertools import chain
from typing import TypeVar

from listops.exceptions import ListOpsTypeError

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

__all__ = ["dedupe_preserve", "flatten_present", "hashed_members", "without_members"]


def flatten_present(sequences: Iterable[Iterable[T] | None]) -> list[T]:
    """Chain the given iterables into one list, skipping ``None`` entries.

    Args:
        sequences: Iterables to flatten; ``None`` members are ignored.

    Returns:
        A new list holding every element in encounter order, duplicates kept.
    """
    return list(chain.from_iterable(seq for seq in sequences if seq is not None))


def dedupe_preserve(values: Iterable[H], *, operation: str) -> list[H]:
    """Return items in order, dropping subsequent duplicates.

    Args:
        values: Iterable of hashable items whose first occurrence should be
            preserved.
        operation: Public operation name reported if an element is unhashable.

    Returns:
        A list containing the first appearance of each unique value, ordered by
        the original traversal.

    Raises:
        ListOpsTypeError: If an element cannot be hashed.
    """
    seen: set[H] = set()
    result: list[H] = []
    try:
        for value in values:
            if value in seen:
                continue
            seen.add(value)
            result.append(value)
    except TypeError as exc:
        raise ListOpsTypeError(operation, f"elements must be hashable ({exc})") from exc
    return result


def hashed_members(values: Iterable[H], *, operation: str) -> frozenset[H]:
    """Build a membership set for ``values``.

    Raises:
        ListOpsTypeError: If an element cannot be hashed.
    """
    try:
        return frozenset(values)
    except TypeError as exc:
        raise ListOpsTypeError(operation, f"elements must be hashable ({exc})") from exc


def without_members(values: Iterable[H], members: frozenset[H], *, operation: str) -> list[H]:
    """Return ``values`` in order, keeping only items absent from ``members``.

    Raises:
        ListOpsTypeError: If an element cannot be hashed.
    """
    try:
        return [value for value in values if value not in members]
    except TypeError as exc:
        raise ListOpsTypeError(operation, f"elements must be hashable ({exc})") from exc
