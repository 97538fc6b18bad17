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

"""Logical path resolution against a discovered runfiles location."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rlocate._internal.exceptions import RunfilesValidationError
from rlocate._internal.logging_utils import structured_extra
from rlocate.core.model_types import LogComponent
from rlocate.runfiles.environment import env_vars
from rlocate.runfiles.locator import DiscoveredLocation
from rlocate.runfiles.manifest import RunfilesIndex
from rlocate.runfiles.paths import is_absolute, is_normalized

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rlocate.core.type_aliases import EnvVarSet

logger: logging.Logger = logging.getLogger("rlocate.resolver")

UNRESOLVED = ""


class Runfiles:
    """Resolve logical runfiles paths to filesystem paths.

    Instances are immutable once built and hold no locks; share them freely
    across threads.

    Attributes:
        manifest: Manifest the index was loaded from, ``""`` if none.
        directory: Runfiles tree root, ``""`` if there is no directory fallback.
        index: Parsed manifest entries.
    """

    __slots__ = ("_directory", "_env_vars", "_index", "_manifest")

    def __init__(
        self,
        index: Mapping[str, str] | None = None,
        directory: str = "",
        *,
        manifest: str = "",
    ) -> None:
        """Build a resolver.

        Args:
            index: Manifest entries; empty when runfiles are directory-only.
            directory: Runfiles tree root used for paths missing from ``index``.
            manifest: Path ``index`` was loaded from.

        Raises:
            RunfilesValidationError: If there is neither a manifest nor a directory.
        """
        resolved_index = index if isinstance(index, RunfilesIndex) else RunfilesIndex(index or {})
        if not manifest and not resolved_index and not directory:
            message = "runfiles need a manifest or a directory"
            raise RunfilesValidationError(message)
        self._index = resolved_index
        self._directory = directory
        self._manifest = manifest
        self._env_vars = env_vars(DiscoveredLocation(manifest=manifest, directory=directory))

    @property
    def manifest(self) -> str:
        return self._manifest

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def index(self) -> RunfilesIndex:
        return self._index

    def rlocation(self, path: str) -> str:
        """Return the filesystem path of the runfile ``path``.

        The result is not checked for existence. Malformed input (empty, a
        ``.`` or ``..`` segment, or ``//``) is never an error: it resolves to
        ``""`` like any other unknown path.

        Args:
            path: Logical, runfiles-root-relative path. Absolute paths are
                returned unchanged.

        Returns:
            str: The resolved path, or ``""`` when it cannot be resolved.
        """
        if not is_normalized(path):
            logger.debug(
                "Rejected malformed runfiles path %r",
                path,
                extra=structured_extra(LogComponent.RESOLVER, path=path),
            )
            return UNRESOLVED
        if is_absolute(path):
            return path
        mapped = self._index.get(path)
        if mapped is not None:
            return mapped
        if self._directory:
            return f"{self._directory}/{path}"
        return UNRESOLVED

    def rlocation_path(self, path: str) -> Path | None:
        """Like :meth:`rlocation`, returning a ``Path`` or ``None`` when unresolved."""
        resolved = self.rlocation(path)
        return Path(resolved) if resolved else None

    def env_vars(self) -> EnvVarSet:
        """Return the variables to export to child processes."""
        return self._env_vars

    def __repr__(self) -> str:
        return f"Runfiles(manifest={self._manifest!r}, directory={self._directory!r}, entries={len(self._index)})"


__all__ = ["UNRESOLVED", "Runfiles"]
