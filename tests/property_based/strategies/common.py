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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = ["delimiters", "int_lists", "tokens_without"]


def int_lists(min_size: int = 0, max_size: int = 20) -> st.SearchStrategy[list[int]]:
    """Return a strategy of small integer lists with frequent duplicates."""
    return st.lists(st.integers(min_value=-5, max_value=5), min_size=min_size, max_size=max_size)


def delimiters() -> st.SearchStrategy[str]:
    """Return non-empty delimiters, including regex metacharacters.

    Multi-character delimiters are limited to ones that cannot overlap
    themselves, otherwise a join/split round trip is ambiguous.
    """
    return st.sampled_from([",", " ", ";", "|", ".", "*", "[*]", "\\"])


def tokens_without(delimiter: str, max_size: int = 10) -> st.SearchStrategy[list[str]]:
    """Return non-empty string lists whose elements never contain ``delimiter``.

    Args:
        delimiter: Substring the generated elements must not contain.
        max_size: Maximum number of elements.

    Returns:
        Hypothesis strategy producing lists of at least one element.
    """
    element = st.text(max_size=8).filter(lambda token: delimiter not in token)
    return st.lists(element, min_size=1, max_size=max_size)
