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
"""Build configuration derived from Gradle properties and the environment.

The Android build is configured with Gradle project properties (-PNAME=VALUE)
and a few environment variables. This module turns those into the arguments
for the external native build and the names used when publishing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import datetime
import enum
import os
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from dry.abis import Abi, parse_abi_list


# Gradle properties forwarded to CMake as build options, in forwarding order.
LIBRARY_BUILD_OPTIONS = (
    "DRY_LIB_TYPE",
    "DRY_ANGELSCRIPT",
    "DRY_LUA",
    "DRY_LUAJIT",
    "DRY_LUAJIT_AMALG",
    "DRY_IK",
    "DRY_NETWORK",
    "DRY_PHYSICS",
    "DRY_NAVIGATION",
    "DRY_2D",
    "DRY_PCH",
    "DRY_DATABASE_SQLITE",
    "DRY_WEBP",
    "DRY_FILEWATCHER",
    "DRY_PROFILING",
    "DRY_LOGGING",
    "DRY_THREADING",
)


LAUNCHER_BUILD_OPTIONS = (
    "DRY_LIB_TYPE",
    "DRY_ANGELSCRIPT",
    "DRY_LUA",
)


# The player and samples are only built by the launcher, unless disabled there.
PLAYER_BUILD_OPTIONS = (
    "DRY_PLAYER",
    "DRY_SAMPLES",
)


@enum.unique
class Module(enum.Enum):
    """Android Gradle modules with an external native build."""

    Library = "dry-lib"
    Launcher = "launcher-app"

    @property
    def build_options(self) -> Tuple[str, ...]:
        if self is Module.Library:
            return LIBRARY_BUILD_OPTIONS
        return LAUNCHER_BUILD_OPTIONS

    @property
    def cmake_targets(self) -> Tuple[str, ...]:
        """CMake targets built by the module. Empty means all targets."""
        if self is Module.Library:
            return ("Dry",)
        return ()

    @property
    def ci_timeout(self) -> datetime.timedelta:
        if self is Module.Library:
            return datetime.timedelta(minutes=25)
        return datetime.timedelta(minutes=15)


@enum.unique
class LibraryType(enum.Enum):
    """Linkage of the Dry library."""

    Static = "STATIC"
    Shared = "SHARED"

    @classmethod
    def from_string(cls, value: str) -> LibraryType:
        try:
            return cls(value)
        except ValueError as ex:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(
                f"Unknown library type: {value}. Valid types are: {valid}"
            ) from ex


def parse_property(text: str) -> tuple[str, str]:
    """Parses a NAME=VALUE project property.

    >>> parse_property('DRY_LUA=1')
    ('DRY_LUA', '1')
    """
    name, sep, value = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Expected a property of the form NAME=VALUE: {text}")
    return name, value


@dataclass(frozen=True)
class BuildProperties:
    """Project properties and environment of a single build.

    Attributes:
        properties: Gradle project properties.
        environ: Environment variables. Defaults to a snapshot of os.environ.
        module: The Gradle module being built.
    """

    properties: Mapping[str, str] = field(default_factory=dict)
    environ: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))
    module: Module = Module.Library

    @classmethod
    def from_strings(
        cls,
        properties: Iterable[str],
        environ: Optional[Mapping[str, str]] = None,
        module: Module = Module.Library,
    ) -> BuildProperties:
        """Creates BuildProperties from NAME=VALUE strings.

        Later definitions of a property override earlier ones.
        """
        parsed = dict(parse_property(p) for p in properties)
        if environ is None:
            return cls(parsed, module=module)
        return cls(parsed, dict(environ), module)

    @property
    def library_type(self) -> LibraryType:
        return LibraryType.from_string(
            self.properties.get("DRY_LIB_TYPE", LibraryType.Static.value)
        )

    @property
    def abis(self) -> List[Abi]:
        """ABIs requested by the ANDROID_ABI property, in order."""
        return parse_abi_list(self.properties.get("ANDROID_ABI"))

    @property
    def abi_split_enabled(self) -> bool:
        return "ANDROID_ABI" in self.properties

    @property
    def is_ci(self) -> bool:
        return "CI" in self.environ

    @property
    def native_build_timeout(self) -> Optional[datetime.timedelta]:
        """Timeout of the external native build, if any."""
        if self.is_ci:
            return self.module.ci_timeout
        return None

    @property
    def cmake_targets(self) -> List[str]:
        return list(self.module.cmake_targets)

    def cmake_arguments(self, build_dir: Union[str, Path]) -> List[str]:
        """Returns the arguments for configuring the native build with CMake.

        Args:
            build_dir: The Gradle build directory of the library project. The
                launcher is also given the library build directory.

        Returns:
            A list of -D definitions: the compiler cache from $ANDROID_CCACHE,
            the Gradle build directory, each forwarded DRY_* option of the
            module that is set as a project property, and the player and
            samples options. The library always disables the player and
            samples. The launcher enables them unless a property says
            otherwise.
        """
        args: List[str] = []
        ccache = self.environ.get("ANDROID_CCACHE")
        if ccache is not None:
            args.append(f"-DANDROID_CCACHE={ccache}")
        args.append(f"-DGRADLE_BUILD_DIR={build_dir}")
        args.extend(
            f"-D{name}={self.properties[name]}"
            for name in self.module.build_options
            if name in self.properties
        )
        if self.module is Module.Library:
            args.extend(f"-D{name}=0" for name in PLAYER_BUILD_OPTIONS)
        else:
            args.extend(
                f"-D{name}={self.properties.get(name, '1')}"
                for name in PLAYER_BUILD_OPTIONS
            )
        return args

    def artifact_id(self, project_name: str) -> str:
        """Returns the Maven artifact id of the library.

        >>> BuildProperties({'ANDROID_ABI': 'arm64-v8a,x86'}).artifact_id('dry-lib')
        'dry-lib-STATIC-arm64-v8a-x86'
        """
        artifact_id = f"{project_name}-{self.library_type.value}"
        if self.abi_split_enabled:
            artifact_id += "-" + self.properties["ANDROID_ABI"].replace(",", "-")
        return artifact_id

    def publishable_build_types(self, build_types: Iterable[str]) -> List[str]:
        """Filters the build types whose archives are published.

        Off CI everything is published. On CI, static debug archives are too
        large to upload, so only release is published unless the library is
        shared.
        """
        return [
            build_type
            for build_type in build_types
            if not self.is_ci
            or self.library_type is LibraryType.Shared
            or build_type == "release"
        ]
