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

"""Validated settings feeding runfiles discovery.

``RunfilesSettings`` captures the launch path and the two discovery hints
after applying the flag > environment > default precedence chain, and turns
them back into an environment lookup for ``rlocate.create``.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from rlocate._infra.precedence import resolve_with_precedence
from rlocate.config.constants import CONSUMED_ENV_VARS, DIRECTORY_ENV, MANIFEST_ENV

if TYPE_CHECKING:
    from rlocate.core.type_aliases import EnvLookup


def environ_lookup(name: str) -> str:
    """Read ``name`` from ``os.environ``, answering only the consumed variables.

    Any other name, and any unset variable, yields ``""``.
    """
    if name in CONSUMED_ENV_VARS:
        return os.environ.get(name, "")
    return ""


class RunfilesSettings(BaseModel):
    """Launch path and discovery hints for one runfiles lookup.

    Attributes:
        argv0: Launch path of the running program.
        manifest_hint: Candidate manifest path, ``""`` when absent.
        directory_hint: Candidate runfiles directory, ``""`` when absent.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    argv0: str
    manifest_hint: str = ""
    directory_hint: str = ""

    @field_validator("manifest_hint", "directory_hint", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @classmethod
    def from_sources(
        cls,
        *,
        argv0: str | None = None,
        cli_manifest: str | None = None,
        cli_directory: str | None = None,
        env_lookup: EnvLookup | None = None,
    ) -> RunfilesSettings:
        """Build settings from CLI values, falling back to the environment.

        Args:
            argv0: Launch path; defaults to ``sys.argv[0]``.
            cli_manifest: Manifest path given on the command line.
            cli_directory: Runfiles directory given on the command line.
            env_lookup: Environment lookup; defaults to :func:`environ_lookup`.

        Returns:
            RunfilesSettings: Settings with precedence already applied.
        """
        lookup = env_lookup or environ_lookup
        return cls(
            argv0=argv0 if argv0 is not None else sys.argv[0],
            manifest_hint=resolve_with_precedence(
                cli_value=cli_manifest,
                env_value=lookup(MANIFEST_ENV) or None,
                default="",
            ),
            directory_hint=resolve_with_precedence(
                cli_value=cli_directory,
                env_value=lookup(DIRECTORY_ENV) or None,
                default="",
            ),
        )

    def env_lookup(self) -> EnvLookup:
        """Return an environment lookup answering with these settings' hints."""
        values = {MANIFEST_ENV: self.manifest_hint, DIRECTORY_ENV: self.directory_hint}

        def _lookup(name: str) -> str:
            return values.get(name, "")

        return _lookup


__all__ = ["RunfilesSettings", "environ_lookup"]
