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

"""Names and suffixes that make up the runfiles layout conventions."""

from __future__ import annotations

from typing import Final

MANIFEST_ENV: Final[str] = "RUNFILES_MANIFEST_FILE"
DIRECTORY_ENV: Final[str] = "RUNFILES_DIR"
# Legacy duplicate of RUNFILES_DIR still read by older Java launchers.
LEGACY_DIRECTORY_ENV: Final[str] = "JAVA_RUNFILES"

CONSUMED_ENV_VARS: Final[tuple[str, ...]] = (MANIFEST_ENV, DIRECTORY_ENV)
EXPORTED_ENV_VARS: Final[tuple[str, ...]] = (MANIFEST_ENV, DIRECTORY_ENV, LEGACY_DIRECTORY_ENV)

RUNFILES_DIR_SUFFIX: Final[str] = ".runfiles"
MANIFEST_BASENAME: Final[str] = "MANIFEST"
MANIFEST_IN_DIR_SUFFIX: Final[str] = "/MANIFEST"
MANIFEST_SIBLING_SUFFIX: Final[str] = "_manifest"
RUNFILES_MANIFEST_SUFFIX: Final[str] = ".runfiles_manifest"

# "/MANIFEST" and "_manifest" share this length.
MANIFEST_SUFFIX_LENGTH: Final[int] = 9

__all__ = [
    "CONSUMED_ENV_VARS",
    "DIRECTORY_ENV",
    "EXPORTED_ENV_VARS",
    "LEGACY_DIRECTORY_ENV",
    "MANIFEST_BASENAME",
    "MANIFEST_ENV",
    "MANIFEST_IN_DIR_SUFFIX",
    "MANIFEST_SIBLING_SUFFIX",
    "MANIFEST_SUFFIX_LENGTH",
    "RUNFILES_DIR_SUFFIX",
    "RUNFILES_MANIFEST_SUFFIX",
]
