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

"""Configuration constants and settings for rlocate."""

from __future__ import annotations

from .constants import (
    CONSUMED_ENV_VARS,
    DIRECTORY_ENV,
    EXPORTED_ENV_VARS,
    LEGACY_DIRECTORY_ENV,
    MANIFEST_ENV,
)
from .settings import RunfilesSettings, environ_lookup

__all__ = [
    "CONSUMED_ENV_VARS",
    "DIRECTORY_ENV",
    "EXPORTED_ENV_VARS",
    "LEGACY_DIRECTORY_ENV",
    "MANIFEST_ENV",
    "RunfilesSettings",
    "environ_lookup",
]
