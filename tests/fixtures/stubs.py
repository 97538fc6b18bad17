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

"""In-memory stand-ins for the filesystem and the process environment."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rlocate.runfiles.locator import DiscoveredLocation, paths_from

if TYPE_CHECKING:
    from pathlib import Path

    from rlocate.core.type_aliases import EnvLookup


@dataclass
class FakeRunfilesTree:
    """Answers the locator's predicates from two sets and records every probe."""

    manifests: set[str] = field(default_factory=set)
    directories: set[str] = field(default_factory=set)
    probes: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def of(cls, *, manifests: Iterable[str] = (), directories: Iterable[str] = ()) -> FakeRunfilesTree:
        return cls(manifests=set(manifests), directories=set(directories))

    def is_manifest(self, path: str) -> bool:
        self.probes.append(("manifest", path))
        return path in self.manifests

    def is_directory(self, path: str) -> bool:
        self.probes.append(("directory", path))
        return path in self.directories

    def locate(
        self,
        argv0: str,
        manifest_hint: str | None = "",
        directory_hint: str | None = "",
    ) -> DiscoveredLocation:
        return paths_from(
            argv0,
            manifest_hint,
            directory_hint,
            is_runfiles_manifest=self.is_manifest,
            is_runfiles_directory=self.is_directory,
        )


def env_lookup_from(values: Mapping[str, str]) -> EnvLookup:
    """Return an environment lookup backed by ``values``."""

    def _lookup(name: str) -> str:
        return values.get(name, "")

    return _lookup


def write_manifest(path: Path, lines: Iterable[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


__all__ = ["FakeRunfilesTree", "env_lookup_from", "write_manifest"]
