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

"""Compatibility interface for rlocate.

Collects the few version-dependent names the package relies on so the rest
of the code never branches on the interpreter version:

- UTC: timezone instance used by the JSON log formatter
- StrEnum: base class for the string-valued enums in ``rlocate.core``
- Typing helpers: TypedDict, Unpack, override
"""

from __future__ import annotations

from .datetime import UTC
from .enums import StrEnum
from .typing import TypedDict, Unpack, override

__all__ = [
    "UTC",
    "StrEnum",
    "TypedDict",
    "Unpack",
    "override",
]
