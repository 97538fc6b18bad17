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

"""JSON report models emitted by the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from rlocate.runfiles.locator import DiscoveredLocation

REPORT_MODEL_CONFIG: ConfigDict = ConfigDict(frozen=True, extra="forbid")


class DiscoveryReport(BaseModel):
    """Discovered runfiles location; ``None`` marks an absent source.

    Attributes:
        manifest: Manifest file in use.
        directory: Runfiles tree root in use.
    """

    model_config: ClassVar[ConfigDict] = REPORT_MODEL_CONFIG

    manifest: str | None = None
    directory: str | None = None

    @classmethod
    def from_location(cls, location: DiscoveredLocation) -> DiscoveryReport:
        return cls(manifest=location.manifest or None, directory=location.directory or None)


class ResolutionEntry(BaseModel):
    """Outcome of resolving one logical path."""

    model_config: ClassVar[ConfigDict] = REPORT_MODEL_CONFIG

    path: str
    resolved: str | None = None


class ResolutionReport(BaseModel):
    """Resolver location plus the outcome of every requested path."""

    model_config: ClassVar[ConfigDict] = REPORT_MODEL_CONFIG

    runfiles: DiscoveryReport
    results: list[ResolutionEntry] = Field(default_factory=list)

    @property
    def unresolved(self) -> list[str]:
        return [entry.path for entry in self.results if entry.resolved is None]


__all__ = ["DiscoveryReport", "ResolutionEntry", "ResolutionReport"]
