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

"""Common exception hierarchy for rlocate."""

from __future__ import annotations

__all__ = [
    "ManifestError",
    "ManifestOpenError",
    "ManifestParseError",
    "RlocateError",
    "RlocateValidationError",
    "RunfilesError",
    "RunfilesNotFoundError",
    "RunfilesValidationError",
]


class RlocateError(Exception):
    """Base error for all rlocate exceptions."""


class RlocateValidationError(RlocateError, ValueError):
    """Raised when input data fails validation checks."""


class RunfilesError(RlocateError):
    """Base error for failures while constructing a runfiles resolver."""


class RunfilesNotFoundError(RunfilesError):
    """Raised when neither a runfiles manifest nor a runfiles directory is found.

    Attributes:
        argv0: Launch path the discovery started from.
    """

    def __init__(self, argv0: str) -> None:
        self.argv0 = argv0
        super().__init__(f'cannot find runfiles (argv0="{argv0}")')


class ManifestError(RunfilesError):
    """Base error for runfiles manifest failures.

    Attributes:
        path: Manifest file that failed.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class ManifestOpenError(ManifestError):
    """Raised when the runfiles manifest cannot be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f'cannot open runfiles manifest "{path}"')


class ManifestParseError(ManifestError):
    """Raised when a manifest line has no space delimiter.

    Attributes:
        line_number: 1-based number of the offending line.
        line: Offending line, without its newline.
    """

    def __init__(self, path: str, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(
            path,
            f'bad runfiles manifest entry in "{path}" line #{line_number}: "{line}"',
        )


class RunfilesValidationError(RlocateValidationError):
    """Raised when a resolver would have neither a manifest index nor a directory."""
