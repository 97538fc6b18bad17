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

"""Environment variables passed on to child processes.

A program that launches another runfiles-aware program exports its own
discovery result so the child does not re-run discovery from a different
launch path and land on the wrong runfiles.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from rlocate.config.constants import EXPORTED_ENV_VARS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rlocate.core.type_aliases import EnvVarSet
    from rlocate.runfiles.locator import DiscoveredLocation


def env_vars(location: DiscoveredLocation) -> EnvVarSet:
    """Return the ``(name, value)`` pairs describing ``location``.

    The order is fixed: manifest, directory, then the legacy directory alias.
    Absent locations are exported as empty strings.
    """
    values = (location.manifest, location.directory, location.directory)
    return tuple(zip(EXPORTED_ENV_VARS, values, strict=True))


def as_environ(pairs: EnvVarSet) -> dict[str, str]:
    return dict(pairs)


def child_environ(pairs: EnvVarSet, base: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return a copy of ``base`` (default ``os.environ``) overlaid with ``pairs``.

    Args:
        pairs: Variables produced by :func:`env_vars`.
        base: Environment to start from.

    Returns:
        dict[str, str]: Mapping suitable for ``subprocess.run(env=...)``.
    """
    environ = dict(os.environ if base is None else base)
    environ.update(pairs)
    return environ


__all__ = ["as_environ", "child_environ", "env_vars"]
