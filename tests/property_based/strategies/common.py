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

"""Strategies producing runfiles path strings."""

from __future__ import annotations

import string

import hypothesis.strategies as st

_SEGMENT_ALPHABET = string.ascii_letters + string.digits + "_-."


def path_segments(max_size: int = 8) -> st.SearchStrategy[str]:
    """Return single path segments that are never ``.`` or ``..``."""
    return st.text(alphabet=_SEGMENT_ALPHABET, min_size=1, max_size=max_size).filter(
        lambda value: value not in {".", ".."},
    )


def logical_paths(max_segments: int = 4) -> st.SearchStrategy[str]:
    """Return well-formed, relative logical runfiles paths."""
    return st.lists(path_segments(), min_size=1, max_size=max_segments).map("/".join)


def absolute_posix_paths() -> st.SearchStrategy[str]:
    return logical_paths().map(lambda path: f"/{path}")


def drive_letter_paths() -> st.SearchStrategy[str]:
    return st.tuples(
        st.sampled_from(string.ascii_letters),
        st.sampled_from(["\\", "/"]),
        logical_paths(),
    ).map(lambda parts: f"{parts[0]}:{parts[1]}{parts[2]}")


def manifest_targets() -> st.SearchStrategy[str]:
    """Return manifest targets, which may contain spaces but no newline."""
    return st.text(alphabet=string.ascii_letters + string.digits + " /:._-", max_size=30)
