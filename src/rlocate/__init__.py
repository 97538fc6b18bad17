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

"""rlocate - runfiles lookup for programs run from a build sandbox.

Finds the runfiles manifest and/or runfiles directory of the running program
and maps logical, build-relative paths to concrete filesystem paths.

Example:
    >>> import sys, rlocate
    >>> runfiles = rlocate.create(sys.argv[0])  # doctest: +SKIP
    >>> runfiles.rlocation("my_workspace/data/config.json")  # doctest: +SKIP
    '/tmp/bin/tool.runfiles/my_workspace/data/config.json'
"""

from __future__ import annotations

from rlocate.exceptions import (
    ManifestError,
    ManifestOpenError,
    ManifestParseError,
    RlocateError,
    RlocateValidationError,
    RunfilesError,
    RunfilesNotFoundError,
    RunfilesValidationError,
)

from .api import create, create_from_settings, discover, from_location
from .config import RunfilesSettings
from .runfiles import (
    UNRESOLVED,
    DiscoveredLocation,
    Runfiles,
    RunfilesIndex,
    child_environ,
    env_vars,
    parse_manifest,
    paths_from,
)

__version__ = "0.1.0"

__all__ = [
    "UNRESOLVED",
    "DiscoveredLocation",
    "ManifestError",
    "ManifestOpenError",
    "ManifestParseError",
    "RlocateError",
    "RlocateValidationError",
    "Runfiles",
    "RunfilesError",
    "RunfilesIndex",
    "RunfilesNotFoundError",
    "RunfilesSettings",
    "RunfilesValidationError",
    "__version__",
    "child_environ",
    "create",
    "create_from_settings",
    "discover",
    "env_vars",
    "from_location",
    "parse_manifest",
    "paths_from",
]
