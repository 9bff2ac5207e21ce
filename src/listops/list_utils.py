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

"""Generic list operations with absent/empty guards.

Every function is pure: inputs are never mutated and ``None`` or empty inputs
degrade to an empty result instead of raising. The only documented exception
to "outputs are newly allocated" is :func:`concat`, which may hand back one of
its arguments unchanged when the other one is empty.

Operations backed by hashing (:func:`merge_all`, :func:`merge`,
:func:`intersection`, :func:`difference`, :func:`full_difference` and
:func:`has_duplicates`) require hashable elements. Their results are built in
first-occurrence order, but callers must treat the order of ``merge_all``,
``merge``, ``intersection`` and ``full_difference`` as unspecified and compare
them as sets.

Example:
    >>> difference([1, 2, 1, 4, 5], [1, 1, 3, 4, 1])
    [2, 5]
    >>> sorted(full_difference([1, 2, 1, 4, 5], [1, 1, 3, 4, 1]))
    [2, 3, 5]
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Hashable, Sequence, Sized
from itertools import chain
from typing import TypeVar

from listops._internal.collection_utils import (
    dedupe_preserve,
    flatten_present,
    hashed_members,
    without_members,
)
from listops._internal.logging_utils import structured_extra
from listops._internal.validation import empty_value, is_not_empty
from listops.core.constants import DEFAULT_DELIMITER
from listops.core.model_types import LogComponent
from listops.exceptions import ListOpsTypeError

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

logger: logging.Logger = logging.getLogger("listops.ops")

__all__ = [
    "concat",
    "concat_all",
    "difference",
    "full_difference",
    "has_duplicates",
    "intersection",
    "join",
    "merge",
    "merge_all",
    "split",
    "to_array",
    "to_list",
]


def _log_empty_input(operation: str, *inputs: Sized | None) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s received an absent or empty input; returning an empty result",
            operation,
            extra=structured_extra(
                LogComponent.OPS,
                operation=operation,
                sizes=[0 if value is None else len(value) for value in inputs],
            ),
        )


# string <-> list


def join(values: Sequence[str] | None, delimiter: str | None = DEFAULT_DELIMITER) -> str:
    """Join string elements in encounter order, separated by ``delimiter``.

    Args:
        values: Strings to join.
        delimiter: Separator placed between consecutive elements.

    Returns:
        The joined string, or ``""`` when ``values`` or ``delimiter`` is
        absent or empty.

    Raises:
        ListOpsTypeError: If an element is not a string.
    """
    if is_not_empty(values) and is_not_empty(delimiter):
        try:
            return delimiter.join(values)
        except TypeError as exc:
            raise ListOpsTypeError("join", f"elements must be strings ({exc})") from exc
    _log_empty_input("join", values, delimiter)
    return empty_value(str)


def split(source: str | None, delimiter: str | None = DEFAULT_DELIMITER) -> list[str]:
    """Split ``source`` at every literal occurrence of ``delimiter``.

    The delimiter is never interpreted as a pattern, and empty fields are kept
    so that ``split(join(values, d), d) == values`` whenever no element contains
    ``d``.

    Args:
        source: Text to split.
        delimiter: Literal separator.

    Returns:
        The list of fields, or ``[]`` when ``source`` or ``delimiter`` is
        absent or empty.
    """
    if is_not_empty(source) and is_not_empty(delimiter):
        return source.split(delimiter)
    _log_empty_input("split", source, delimiter)
    return empty_value(list)


# array <-> list


def to_list(array: Sequence[T] | None) -> list[T]:
    """Copy a fixed-size sequence into a new mutable list; ``[]`` when absent."""
    if is_not_empty(array):
        return list(array)
    _log_empty_input("to_list", array)
    return empty_value(list)


def to_array(values: Sequence[T] | None) -> tuple[T, ...]:
    """Copy ``values`` into an immutable tuple of the same element type; ``()`` when absent."""
    if is_not_empty(values):
        return tuple(values)
    _log_empty_input("to_array", values)
    return empty_value(tuple)


# concatenation


def concat_all(*sequences: Sequence[T] | None) -> list[T]:
    """Concatenate any number of sequences, skipping ``None`` ones.

    Order and duplicates are preserved; calling with no arguments yields ``[]``.

    Example:
        >>> concat_all([1, 2], None, [3, 4], [5, 6])
        [1, 2, 3, 4, 5, 6]
    """
    return flatten_present(sequences)


def concat(a: list[T] | None, b: list[T] | None) -> list[T]:
    """Concatenate two lists, short-circuiting when one side is empty.

    When exactly one of the inputs is empty the other one is returned as-is,
    so the result may alias a caller-owned list in that case.

    Args:
        a: Leading elements.
        b: Trailing elements.

    Returns:
        ``a`` followed by ``b``; the non-empty input itself when the other is
        empty; a new empty list when both are empty.
    """
    if is_not_empty(a) and is_not_empty(b):
        return [*a, *b]
    if is_not_empty(a):
        return a
    if is_not_empty(b):
        return b
    _log_empty_input("concat", a, b)
    return empty_value(list)


# dedup merge


def merge_all(*sequences: Sequence[H] | None) -> list[H]:
    """Merge any number of sequences into a list of unique elements.

    ``None`` and empty members are skipped. Result order is unspecified.

    Raises:
        ListOpsTypeError: If an element is unhashable.
    """
    return dedupe_preserve(flatten_present(sequences), operation="merge_all")


def merge(a: Sequence[H] | None, b: Sequence[H] | None) -> list[H]:
    """Return the unique elements of ``a`` and ``b``.

    Unlike :func:`merge_all`, an absent or empty input on either side yields
    ``[]`` rather than the other input's unique elements. Result order is
    unspecified.

    Raises:
        ListOpsTypeError: If an element is unhashable.
    """
    if is_not_empty(a) and is_not_empty(b):
        return dedupe_preserve(chain(a, b), operation="merge")
    _log_empty_input("merge", a, b)
    return empty_value(list)


# set-like relations


def intersection(a: Sequence[H] | None, b: Sequence[H] | None) -> list[H]:
    """Return the distinct elements present in both ``a`` and ``b``.

    Duplicates within ``a`` are collapsed. Result order is unspecified, and an
    absent or empty input on either side yields ``[]``.

    Example:
        >>> sorted(intersection([1, 2, 1, 4, 5], [1, 1, 3, 4, 1]))
        [1, 4]

    Raises:
        ListOpsTypeError: If an element is unhashable.
    """
    if is_not_empty(a) and is_not_empty(b):
        members = hashed_members(b, operation="intersection")
        return [value for value in dedupe_preserve(a, operation="intersection") if value in members]
    _log_empty_input("intersection", a, b)
    return empty_value(list)


def difference(a: Sequence[H] | None, b: Sequence[H] | None) -> list[H]:
    """Return the elements of ``a`` that do not occur anywhere in ``b``.

    Order and multiplicity from ``a`` are preserved. An absent or empty input on
    either side yields ``[]``, so ``difference(a, [])`` is empty rather than
    ``a``.

    Raises:
        ListOpsTypeError: If an element is unhashable.
    """
    if is_not_empty(a) and is_not_empty(b):
        members = hashed_members(b, operation="difference")
        return without_members(a, members, operation="difference")
    _log_empty_input("difference", a, b)
    return empty_value(list)


def full_difference(a: Sequence[H] | None, b: Sequence[H] | None) -> list[H]:
    """Return the symmetric difference of ``a`` and ``b`` as unique elements.

    Elements of ``a`` missing from ``b`` are merged with elements of ``b``
    missing from ``a``. Result order is unspecified, and an absent or empty
    input on either side yields ``[]``.

    Raises:
        ListOpsTypeError: If an element is unhashable.
    """
    if is_not_empty(a) and is_not_empty(b):
        operation = "full_difference"
        only_a = without_members(a, hashed_members(b, operation=operation), operation=operation)
        only_b = without_members(b, hashed_members(a, operation=operation), operation=operation)
        return dedupe_preserve(chain(only_a, only_b), operation=operation)
    _log_empty_input("full_difference", a, b)
    return empty_value(list)


# duplicate detection


def has_duplicates(collection: Collection[H] | None) -> bool:
    """Return whether ``collection`` holds fewer distinct elements than elements.

    ``None`` and empty collections report ``False``.

    Raises:
        ListOpsTypeError: If an element is unhashable.
    """
    if is_not_empty(collection):
        return len(hashed_members(collection, operation="has_duplicates")) < len(collection)
    _log_empty_input("has_duplicates", collection)
    return False
