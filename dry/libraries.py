#
# Copyright (C) 2026 The Android Open Source Project
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Discovery of the native libraries installed for the Dry launcher.

The launcher has to load every native library it ships before the engine can
start, and it has to load them in dependency order. The build installs the
libraries in that order, so modification time is used as the ordering key.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import re
from typing import Iterable, List, NewType, Optional, Protocol, Union


LibraryName = NewType("LibraryName", str)


LIBRARY_FILE_PATTERN = re.compile(r"^lib(.+)\.so$")


class DirectoryAccessError(RuntimeError):
    """An error indicating that a library directory could not be listed."""
    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Cannot list library directory {path}: {reason}")
        self.path = Path(path)


class InvariantViolationError(RuntimeError):
    """A library file name matched but no library name could be extracted."""


@dataclass(frozen=True)
class DirectoryEntry:
    """A direct entry of a library directory.

    Attributes:
        name: File name of the entry, without any directory component.
        modified: Last modification time in seconds since the epoch.
    """

    name: str
    modified: float


class DirectoryLister(Protocol):
    def list_entries(self, path: Path) -> Iterable[DirectoryEntry]:
        """Lists the direct entries of path.

        Raises:
            OSError: The directory does not exist or cannot be read.
        """


class FilesystemLister:
    """Lists directory entries from the host file system.

    Symbolic links are followed for the modification time. An entry whose
    time cannot be read, such as a dangling link or a file deleted during the
    scan, is reported with a modification time of 0 rather than failing the
    listing.
    """

    def list_entries(self, path: Path) -> List[DirectoryEntry]:
        with os.scandir(path) as it:
            return [DirectoryEntry(entry.name, _modified(entry)) for entry in it]


def _modified(entry: os.DirEntry) -> float:
    try:
        return entry.stat().st_mtime
    except OSError:
        return 0.0


def library_name(file_name: str) -> Optional[LibraryName]:
    """Returns the library name of a native library file, if it is one.

    >>> library_name('libDry.so')
    'Dry'

    >>> library_name('lib.so') is None
    True
    """
    match = LIBRARY_FILE_PATTERN.fullmatch(file_name)
    if match is None:
        return None
    return LibraryName(match.group(1))


class LibraryNameResolver:
    """Finds the native libraries in a directory in load order."""

    def __init__(self, lister: Optional[DirectoryLister] = None) -> None:
        self.lister = lister if lister is not None else FilesystemLister()

    def resolve(self, directory: Union[str, Path]) -> List[LibraryName]:
        """Returns the names of the native libraries in directory.

        Only files named lib<name>.so in the directory itself are considered.
        The result is ordered by modification time, oldest first. The order
        of libraries with equal modification times is unspecified.

        Args:
            directory: Directory containing the native libraries.

        Returns:
            The name of each library, with the lib prefix and .so suffix
            removed.

        Raises:
            DirectoryAccessError: directory is missing, is not a directory or
                cannot be read.
        """
        path = Path(directory)
        try:
            entries = list(self.lister.list_entries(path))
        except OSError as ex:
            raise DirectoryAccessError(path, ex.strerror or str(ex)) from ex

        libraries = sorted(
            (e for e in entries if LIBRARY_FILE_PATTERN.fullmatch(e.name)),
            key=lambda e: e.modified,
        )
        names: List[LibraryName] = []
        for entry in libraries:
            name = library_name(entry.name)
            if name is None:
                raise InvariantViolationError(
                    f"Could not extract a library name from {entry.name}"
                )
            names.append(name)
        return names


def resolve(
    directory: Union[str, Path], lister: Optional[DirectoryLister] = None
) -> List[LibraryName]:
    """Returns the native library names in directory in load order.

    See LibraryNameResolver.resolve.
    """
    return LibraryNameResolver(lister).resolve(directory)
