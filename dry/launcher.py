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
"""Loads the Dry native libraries at application start."""
from __future__ import annotations

import ctypes
import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from dry.libraries import DirectoryLister, LibraryName, resolve


NATIVE_LIBRARY_DIR_ENV = "DRY_NATIVE_LIBRARY_DIR"


Loader = Callable[[Path], Any]


def logger() -> logging.Logger:
    """Returns the module logger."""
    return logging.getLogger(__name__)


def native_library_dir(default: Optional[Union[str, Path]] = None) -> Path:
    """Returns the directory the native libraries are installed to.

    $DRY_NATIVE_LIBRARY_DIR takes precedence over default. If neither is set,
    the current directory is used.
    """
    path = os.getenv(NATIVE_LIBRARY_DIR_ENV)
    if path is not None:
        return Path(path)
    if default is not None:
        return Path(default)
    return Path.cwd()


def library_path(directory: Path, name: LibraryName) -> Path:
    """Returns the file of the named library in directory."""
    return directory / f"lib{name}.so"


def load_shared_library(path: Path) -> ctypes.CDLL:
    """Loads the shared library at path into the process."""
    # Global so that libraries loaded later can bind to earlier ones.
    return ctypes.CDLL(str(path), mode=ctypes.RTLD_GLOBAL)


def load_native_libraries(
    directory: Union[str, Path],
    load: Optional[Loader] = None,
    lister: Optional[DirectoryLister] = None,
) -> List[LibraryName]:
    """Loads each native library in directory, earliest built first.

    Args:
        directory: Directory containing the lib<name>.so files.
        load: Called with the path of each library, in load order. Defaults to
            loading the library into the process.
        lister: Lists the directory. Defaults to the host file system.

    Returns:
        The names of the loaded libraries, in load order.

    Raises:
        DirectoryAccessError: The directory could not be listed.
    """
    if load is None:
        load = load_shared_library
    directory = Path(directory)
    names = resolve(directory, lister)
    logger().debug("Load order for %s: %s", directory, ", ".join(names))
    for name in names:
        path = library_path(directory, name)
        logger().info("Loading %s", path)
        load(path)
    return names
