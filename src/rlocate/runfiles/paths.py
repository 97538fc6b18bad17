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

"""String and filesystem predicates over runfiles paths.

The string predicates never touch the filesystem. The two ``looks_like_*``
predicates are the defaults handed to the locator: a cheap name check first,
then a single ``stat``-style call.
"""

from __future__ import annotations

import os
import string
from typing import Final

from rlocate.config.constants import (
    MANIFEST_BASENAME,
    RUNFILES_DIR_SUFFIX,
    RUNFILES_MANIFEST_SUFFIX,
)

_DRIVE_LETTERS: Final[frozenset[str]] = frozenset(string.ascii_letters)
_PARENT_SEGMENT: Final[str] = ".."
_CURRENT_SEGMENT: Final[str] = "."


def is_absolute(path: str) -> bool:
    """Return True for POSIX (``/x`` but not ``//x``) or drive-letter (``C:\\x``, ``C:/x``) paths."""
    if not path:
        return False
    first = path[0]
    if first == "/":
        return len(path) < 2 or path[1] != "/"
    return len(path) >= 3 and first in _DRIVE_LETTERS and path[1] == ":" and path[2] in "\\/"


def _has_segment(path: str, segment: str) -> bool:
    return (
        path == segment
        or path.startswith(f"{segment}/")
        or f"/{segment}/" in path
        or path.endswith(f"/{segment}")
    )


def is_normalized(path: str) -> bool:
    """Return True when ``path`` is a well-formed logical runfiles path.

    A well-formed path is non-empty and has no ``.`` or ``..`` segment and no
    doubled ``//`` separator.
    """
    if not path or "//" in path:
        return False
    return not (_has_segment(path, _PARENT_SEGMENT) or _has_segment(path, _CURRENT_SEGMENT))


def has_manifest_name(path: str) -> bool:
    return path.endswith((MANIFEST_BASENAME, RUNFILES_MANIFEST_SUFFIX))


def has_directory_name(path: str) -> bool:
    return path.endswith(RUNFILES_DIR_SUFFIX)


def looks_like_runfiles_manifest(path: str) -> bool:
    """Return True when ``path`` is named like a manifest and is a readable file."""
    return has_manifest_name(path) and os.path.isfile(path) and os.access(path, os.R_OK)


def looks_like_runfiles_directory(path: str) -> bool:
    """Return True when ``path`` is named like a runfiles tree and is a directory."""
    return has_directory_name(path) and os.path.isdir(path)


__all__ = [
    "has_directory_name",
    "has_manifest_name",
    "is_absolute",
    "is_normalized",
    "looks_like_runfiles_directory",
    "looks_like_runfiles_manifest",
]
