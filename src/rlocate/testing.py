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

"""Hooks for tests of programs that use rlocate.

``create_runfiles`` takes a mandatory environment lookup so tests never
depend on the real process environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rlocate.api import create
from rlocate.runfiles.paths import is_absolute

if TYPE_CHECKING:
    from rlocate.core.type_aliases import EnvLookup
    from rlocate.runfiles.resolver import Runfiles


def create_runfiles(argv0: str, env_lookup: EnvLookup) -> Runfiles:
    """Create a resolver reading its hints only from ``env_lookup``."""
    return create(argv0, env_lookup=env_lookup)


__all__ = ["create_runfiles", "is_absolute"]
