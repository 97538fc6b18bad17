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

"""Runfiles manifest parsing.

A manifest is plain text with one ``<logical-path> <absolute-path>`` entry
per line. Only the first space separates the two fields, so the target may
contain spaces. Parsing stops at the first empty line; lines after it are
ignored without error, which existing manifests rely on.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from rlocate._internal.exceptions import ManifestOpenError, ManifestParseError
from rlocate._internal.logging_utils import structured_extra
from rlocate.compat import override
from rlocate.core.model_types import LogComponent

if TYPE_CHECKING:
    from typing import TextIO

logger: logging.Logger = logging.getLogger("rlocate.manifest")


class RunfilesIndex(Mapping[str, str]):
    """Read-only mapping from logical path to absolute path.

    Keys keep the order in which they were first seen; a repeated key takes
    the value of its last occurrence.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))

    @override
    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @override
    def __len__(self) -> int:
        return len(self._entries)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"


def parse_manifest_lines(lines: Iterable[str], *, source: str) -> RunfilesIndex:
    """Parse manifest lines into a :class:`RunfilesIndex`.

    Args:
        lines: Lines as produced by iterating a text file; a trailing ``\\n``
            is stripped, any other whitespace is kept.
        source: Manifest path used in error messages.

    Returns:
        RunfilesIndex: Entries read before the first empty line or the end.

    Raises:
        ManifestParseError: If a line before the terminator has no space.
    """
    entries: dict[str, str] = {}
    for line_number, raw in enumerate(lines, start=1):
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            break
        logical, separator, target = line.partition(" ")
        if not separator:
            raise ManifestParseError(source, line_number, line)
        entries[logical] = target
    return RunfilesIndex(entries)


def _open_manifest(path: str) -> TextIO:
    try:
        return open(path, encoding="utf-8", errors="surrogateescape", newline="\n")  # noqa: SIM115
    except OSError as exc:
        raise ManifestOpenError(path) from exc


def parse_manifest(path: str | os.PathLike[str]) -> RunfilesIndex:
    """Read and parse the runfiles manifest at ``path``.

    Args:
        path: Manifest file location.

    Returns:
        RunfilesIndex: Parsed entries.

    Raises:
        ManifestOpenError: If the file cannot be opened.
        ManifestParseError: If a line has no space delimiter.
    """
    source = os.fspath(path)
    with _open_manifest(source) as handle:
        index = parse_manifest_lines(handle, source=source)
    logger.debug(
        "Loaded %d runfiles manifest entries from %s",
        len(index),
        source,
        extra=structured_extra(LogComponent.MANIFEST, manifest=source, entries=len(index)),
    )
    return index


__all__ = ["RunfilesIndex", "parse_manifest", "parse_manifest_lines"]
