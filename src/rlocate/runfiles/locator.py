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

"""Runfiles discovery.

``paths_from`` decides which manifest file and which runfiles directory a
program should use, starting from its own launch path and two optional hints
(normally ``RUNFILES_MANIFEST_FILE`` and ``RUNFILES_DIR``). It only builds
candidate strings and asks the two injected predicates about them, so the
decision logic can be exercised without a real filesystem.

Probing order:

1. The hints, exactly as given.
2. If neither hint is valid: ``<argv0>.runfiles/MANIFEST`` and
   ``<argv0>.runfiles``, then ``<argv0>.runfiles_manifest`` for the manifest.
3. With only a directory: ``<dir>/MANIFEST``, then ``<dir>_manifest``.
4. With only a manifest: the manifest path minus its ``/MANIFEST`` or
   ``_manifest`` suffix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rlocate._internal.exceptions import RunfilesNotFoundError
from rlocate._internal.logging_utils import structured_extra
from rlocate.config.constants import (
    MANIFEST_IN_DIR_SUFFIX,
    MANIFEST_SIBLING_SUFFIX,
    MANIFEST_SUFFIX_LENGTH,
    RUNFILES_DIR_SUFFIX,
    RUNFILES_MANIFEST_SUFFIX,
)
from rlocate.core.model_types import LogComponent

if TYPE_CHECKING:
    from rlocate.core.type_aliases import PathPredicate

logger: logging.Logger = logging.getLogger("rlocate.locator")


@dataclass(slots=True, frozen=True)
class DiscoveredLocation:
    """Manifest and directory chosen by discovery; ``""`` marks an absent one."""

    manifest: str = ""
    directory: str = ""

    @property
    def has_manifest(self) -> bool:
        return bool(self.manifest)

    @property
    def has_directory(self) -> bool:
        return bool(self.directory)


def _probe(predicate: PathPredicate, candidate: str, *, kind: str) -> bool:
    valid = predicate(candidate)
    logger.debug(
        "Runfiles %s candidate %r: %s",
        kind,
        candidate,
        "valid" if valid else "rejected",
        extra=structured_extra(LogComponent.LOCATOR, path=candidate, details={"kind": kind, "valid": valid}),
    )
    return valid


def paths_from(
    argv0: str,
    manifest_hint: str | None,
    directory_hint: str | None,
    *,
    is_runfiles_manifest: PathPredicate,
    is_runfiles_directory: PathPredicate,
) -> DiscoveredLocation:
    """Discover the runfiles manifest and directory for a program.

    Explicit hints always win over paths derived from ``argv0``. When both
    hints are valid they are returned unchanged and nothing is derived.

    Args:
        argv0: Launch path of the running program.
        manifest_hint: Candidate manifest path, ``None`` or ``""`` if unset.
        directory_hint: Candidate runfiles directory, ``None`` or ``""`` if unset.
        is_runfiles_manifest: Predicate accepting a valid manifest path.
        is_runfiles_directory: Predicate accepting a valid runfiles directory.

    Returns:
        DiscoveredLocation: The chosen manifest and/or directory. One of them
            may be empty, e.g. a manifest-only deployment with no tree on disk.

    Raises:
        RunfilesNotFoundError: If neither a manifest nor a directory is valid.
    """
    manifest = manifest_hint or ""
    directory = directory_hint or ""
    manifest_valid = _probe(is_runfiles_manifest, manifest, kind="manifest")
    directory_valid = _probe(is_runfiles_directory, directory, kind="directory")

    if not manifest_valid and not directory_valid:
        manifest = f"{argv0}{RUNFILES_DIR_SUFFIX}{MANIFEST_IN_DIR_SUFFIX}"
        directory = f"{argv0}{RUNFILES_DIR_SUFFIX}"
        manifest_valid = _probe(is_runfiles_manifest, manifest, kind="manifest")
        directory_valid = _probe(is_runfiles_directory, directory, kind="directory")
        if not manifest_valid:
            manifest = f"{argv0}{RUNFILES_MANIFEST_SUFFIX}"
            manifest_valid = _probe(is_runfiles_manifest, manifest, kind="manifest")

    if not manifest_valid and not directory_valid:
        logger.debug(
            "No runfiles found for argv0 %r",
            argv0,
            extra=structured_extra(LogComponent.LOCATOR, path=argv0),
        )
        raise RunfilesNotFoundError(argv0)

    if not manifest_valid:
        manifest = f"{directory}{MANIFEST_IN_DIR_SUFFIX}"
        manifest_valid = _probe(is_runfiles_manifest, manifest, kind="manifest")
        if not manifest_valid:
            manifest = f"{directory}{MANIFEST_SIBLING_SUFFIX}"
            manifest_valid = _probe(is_runfiles_manifest, manifest, kind="manifest")

    if not directory_valid:
        directory = manifest[:-MANIFEST_SUFFIX_LENGTH]
        directory_valid = _probe(is_runfiles_directory, directory, kind="directory")

    location = DiscoveredLocation(
        manifest=manifest if manifest_valid else "",
        directory=directory if directory_valid else "",
    )
    logger.debug(
        "Discovered runfiles for argv0 %r",
        argv0,
        extra=structured_extra(
            LogComponent.LOCATOR,
            manifest=location.manifest,
            directory=location.directory,
        ),
    )
    return location


__all__ = ["DiscoveredLocation", "paths_from"]
