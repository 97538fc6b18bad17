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

"""Property-based tests for runfiles resolution and discovery."""

from __future__ import annotations

import hypothesis.strategies as st
import pytest
from hypothesis import assume, given

from rlocate.runfiles.locator import DiscoveredLocation
from rlocate.runfiles.manifest import parse_manifest_lines
from rlocate.runfiles.resolver import UNRESOLVED, Runfiles
from tests.fixtures.stubs import FakeRunfilesTree
from tests.property_based.strategies import (
    absolute_posix_paths,
    drive_letter_paths,
    logical_paths,
    manifest_targets,
    path_segments,
)

pytestmark = pytest.mark.property

RUNFILES = Runfiles({"ws/mapped": "/abs/mapped"}, "/run/x.runfiles", manifest="/run/x.runfiles/MANIFEST")


@given(
    prefix=st.lists(path_segments(), max_size=3),
    suffix=st.lists(path_segments(), max_size=3),
    bad=st.sampled_from([".", "..", ""]),
)
def test_h_dot_segments_and_double_slashes_never_resolve(
    prefix: list[str],
    suffix: list[str],
    bad: str,
) -> None:
    # an empty segment only doubles a slash when it sits between two others
    assume(bad or (prefix and suffix))
    path = "/".join([*prefix, bad, *suffix])
    assert RUNFILES.rlocation(path) == UNRESOLVED


@given(path=st.one_of(absolute_posix_paths(), drive_letter_paths()))
def test_h_absolute_paths_are_returned_unchanged(path: str) -> None:
    assert RUNFILES.rlocation(path) == path


@given(path=logical_paths())
def test_h_unmapped_paths_fall_back_to_directory(path: str) -> None:
    if path == "ws/mapped":
        return
    assert RUNFILES.rlocation(path) == f"/run/x.runfiles/{path}"


@given(path=logical_paths(), target=manifest_targets())
def test_h_manifest_entries_win_over_directory(path: str, target: str) -> None:
    runfiles = Runfiles({path: target}, "/run/x.runfiles")
    assert runfiles.rlocation(path) == target


@given(path=logical_paths())
def test_h_no_directory_and_no_entry_is_unresolved(path: str) -> None:
    runfiles = Runfiles(manifest="/run/x.runfiles_manifest")
    assert runfiles.rlocation(path) == UNRESOLVED


@given(entries=st.dictionaries(logical_paths(), manifest_targets(), max_size=8))
def test_h_first_space_splits_manifest_lines(entries: dict[str, str]) -> None:
    lines = [f"{key} {value}\n" for key, value in entries.items()]
    assert dict(parse_manifest_lines(lines, source="MANIFEST")) == entries


@given(manifest=absolute_posix_paths(), directory=absolute_posix_paths(), argv0=absolute_posix_paths())
def test_h_valid_hints_are_never_second_guessed(manifest: str, directory: str, argv0: str) -> None:
    tree = FakeRunfilesTree.of(manifests={manifest}, directories={directory})

    location = tree.locate(argv0, manifest, directory)

    assert location == DiscoveredLocation(manifest=manifest, directory=directory)
    assert len(tree.probes) == 2
