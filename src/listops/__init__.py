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

"""listops - generic list operations.

Provides guarded, side-effect-free helpers for converting between strings and
lists, concatenating, merging, intersecting and differencing lists, and
detecting duplicates. ``None`` and empty inputs never raise; they yield an
empty result instead.
"""

from __future__ import annotations

from listops.core.constants import DEFAULT_DELIMITER, EMPTY, WHITE_SPACE_DELIMITER
from listops.exceptions import ListOpsError, ListOpsTypeError, ListOpsValidationError

from ._internal.validation import empty_value, is_empty, is_not_empty
from .list_utils import (
    concat,
    concat_all,
    difference,
    full_difference,
    has_duplicates,
    intersection,
    join,
    merge,
    merge_all,
    split,
    to_array,
    to_list,
)

__all__ = [
    "DEFAULT_DELIMITER",
    "EMPTY",
    "WHITE_SPACE_DELIMITER",
    "ListOpsError",
    "ListOpsTypeError",
    "ListOpsValidationError",
    "__version__",
    "concat",
    "concat_all",
    "difference",
    "empty_value",
    "full_difference",
    "has_duplicates",
    "intersection",
    "is_empty",
    "is_not_empty",
    "join",
    "merge",
    "merge_all",
    "split",
    "to_array",
    "to_list",
]

__version__ = "0.1.0"
