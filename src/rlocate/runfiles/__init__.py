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

"""Runfiles discovery, manifest parsing and path resolution."""

from __future__ import annotations

from .environment import as_environ, child_environ, env_vars
from .locator import DiscoveredLocation, paths_from
from .manifest import RunfilesIndex, parse_manifest, parse_manifest_lines
from .paths import (
    is_absolute,
    is_normalized,
    looks_like_runfiles_directory,
    looks_like_runfiles_manifest,
)
from .resolver import UNRESOLVED, Runfiles

__all__ = [
    "UNRESOLVED",
    "DiscoveredLocation",
    "Runfiles",
    "RunfilesIndex",
    "as_environ",
    "child_environ",
    "env_vars",
    "is_absolute",
    "is_normalized",
    "looks_like_runfiles_directory",
    "looks_like_runfiles_manifest",
    "parse_manifest",
    "parse_manifest_lines",
    "paths_from",
]
