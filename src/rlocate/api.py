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

"""Public construction entry points for runfiles resolvers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rlocate._internal.logging_utils import structured_extra
from rlocate.config.constants import DIRECTORY_ENV, MANIFEST_ENV
from rlocate.config.settings import environ_lookup
from rlocate.core.model_types import LogComponent
from rlocate.runfiles.locator import DiscoveredLocation, paths_from
from rlocate.runfiles.manifest import RunfilesIndex, parse_manifest
from rlocate.runfiles.paths import looks_like_runfiles_directory, looks_like_runfiles_manifest
from rlocate.runfiles.resolver import Runfiles

if TYPE_CHECKING:
    from rlocate.config.settings import RunfilesSettings
    from rlocate.core.type_aliases import EnvLookup, PathPredicate

logger: logging.Logger = logging.getLogger("rlocate.factory")


def discover(
    argv0: str,
    *,
    env_lookup: EnvLookup | None = None,
    is_runfiles_manifest: PathPredicate = looks_like_runfiles_manifest,
    is_runfiles_directory: PathPredicate = looks_like_runfiles_directory,
) -> DiscoveredLocation:
    """Run discovery for ``argv0`` using hints read through ``env_lookup``.

    Args:
        argv0: Launch path of the running program.
        env_lookup: Environment lookup; defaults to reading ``os.environ``
            for ``RUNFILES_MANIFEST_FILE`` and ``RUNFILES_DIR`` only.
        is_runfiles_manifest: Manifest predicate, filesystem-backed by default.
        is_runfiles_directory: Directory predicate, filesystem-backed by default.

    Returns:
        DiscoveredLocation: The chosen manifest and/or directory.

    Raises:
        RunfilesNotFoundError: If no runfiles were found.
    """
    lookup = env_lookup or environ_lookup
    return paths_from(
        argv0,
        lookup(MANIFEST_ENV),
        lookup(DIRECTORY_ENV),
        is_runfiles_manifest=is_runfiles_manifest,
        is_runfiles_directory=is_runfiles_directory,
    )


def from_location(location: DiscoveredLocation) -> Runfiles:
    """Load the manifest of ``location`` (if any) and build a resolver.

    Raises:
        ManifestOpenError: If the manifest cannot be opened.
        ManifestParseError: If the manifest has a malformed line.
    """
    index = parse_manifest(location.manifest) if location.has_manifest else RunfilesIndex()
    runfiles = Runfiles(index, location.directory, manifest=location.manifest)
    logger.info(
        "Runfiles ready",
        extra=structured_extra(
            LogComponent.FACTORY,
            manifest=location.manifest,
            directory=location.directory,
            entries=len(index),
        ),
    )
    return runfiles


def create(argv0: str, *, env_lookup: EnvLookup | None = None) -> Runfiles:
    """Create a resolver for the program launched as ``argv0``.

    Args:
        argv0: Launch path of the running program, usually ``sys.argv[0]``.
        env_lookup: Environment lookup; defaults to reading ``os.environ``
            for ``RUNFILES_MANIFEST_FILE`` and ``RUNFILES_DIR`` only.

    Returns:
        Runfiles: A ready resolver.

    Raises:
        RunfilesNotFoundError: If neither a manifest nor a directory is found.
        ManifestOpenError: If the discovered manifest cannot be opened.
        ManifestParseError: If the discovered manifest has a malformed line.
    """
    return from_location(discover(argv0, env_lookup=env_lookup))


def create_from_settings(settings: RunfilesSettings) -> Runfiles:
    """Create a resolver from already-resolved :class:`RunfilesSettings`."""
    return create(settings.argv0, env_lookup=settings.env_lookup())


__all__ = ["create", "create_from_settings", "discover", "from_location"]
