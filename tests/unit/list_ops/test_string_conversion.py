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

"""Unit tests for string and array conversions."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from listops import (
    DEFAULT_DELIMITER,
    WHITE_SPACE_DELIMITER,
    ListOpsTypeError,
    concat,
    has_duplicates,
    join,
    split,
    to_array,
    to_list,
)

pytestmark = pytest.mark.unit


def test_join_uses_default_delimiter() -> None:
    assert DEFAULT_DELIMITER == ","
    assert join(["a", "b", "c"]) == "a,b,c"


def test_join_with_custom_delimiter() -> None:
    assert join(["a", "b"], WHITE_SPACE_DELIMITER) == "a b"
    assert join(["x", "y", "z"], " | ") == "x | y | z"


@pytest.mark.parametrize(
    ("values", "delimiter"),
    [
        (None, ","),
        ([], ","),
        (["a", "b"], ""),
        (["a", "b"], None),
    ],
)
def test_join_returns_empty_string_for_absent_inputs(
    values: list[str] | None,
    delimiter: str | None,
) -> None:
    assert join(values, delimiter) == ""


def test_join_rejects_non_string_elements() -> None:
    with pytest.raises(ListOpsTypeError) as excinfo:
        _ = join([1, 2])  # type: ignore[list-item]
    assert excinfo.value.operation == "join"
    assert isinstance(excinfo.value, TypeError)


def test_split_treats_delimiter_literally() -> None:
    assert split("a.b.c", ".") == ["a", "b", "c"]
    assert split("a|b", "|") == ["a", "b"]
    assert split("1[*]2[*]3", "[*]") == ["1", "2", "3"]


def test_split_keeps_empty_fields() -> None:
    assert split("a,,b,", ",") == ["a", "", "b", ""]


def test_split_without_delimiter_occurrence_returns_whole_source() -> None:
    assert split("abc") == ["abc"]


@pytest.mark.parametrize(
    ("source", "delimiter"),
    [(None, ","), ("", ","), ("a,b", ""), ("a,b", None)],
)
def test_split_returns_empty_list_for_absent_inputs(
    source: str | None,
    delimiter: str | None,
) -> None:
    assert split(source, delimiter) == []


def test_split_logs_short_circuit_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="listops.ops")
    assert split(None) == []
    record = next(record for record in caplog.records if record.name == "listops.ops")
    assert getattr(record, "operation", None) == "split"


def test_to_list_copies_into_new_list() -> None:
    source = ("a", "b", "a")
    result = to_list(source)
    assert result == ["a", "b", "a"]
    result.append("c")
    assert source == ("a", "b", "a")


def test_to_list_of_list_is_not_the_same_object() -> None:
    source = [1, 2]
    result = to_list(source)
    assert result == source
    assert result is not source


def test_to_list_handles_absent_source() -> None:
    assert to_list(None) == []
    assert to_list(()) == []


def test_to_array_keeps_element_type() -> None:
    assert to_array([1, 2, 3]) == (1, 2, 3)
    assert to_array(["a"]) == ("a",)


def test_to_array_handles_absent_source() -> None:
    assert to_array(None) == ()
    assert to_array([]) == ()


@pytest.mark.parametrize(
    ("operation", "call"),
    [
        ("to_list", lambda: to_list(None)),
        ("to_array", lambda: to_array([])),
        ("concat", lambda: concat(None, [])),
        ("has_duplicates", lambda: has_duplicates(())),
        ("join", lambda: join([], ",")),
    ],
)
def test_empty_guards_log_at_debug(
    caplog: pytest.LogCaptureFixture,
    operation: str,
    call: Callable[[], object],
) -> None:
    caplog.set_level(logging.DEBUG, logger="listops.ops")
    _ = call()
    operations = [getattr(record, "operation", None) for record in caplog.records]
    assert operation in operations


def test_present_inputs_do_not_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="listops.ops")
    _ = to_list([1])
    _ = concat([1], [])
    assert not [record for record in caplog.records if record.name == "listops.ops"]
