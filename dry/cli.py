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
"""Command line front end for the Dry Android tooling.

Installed as `dry-android`. Run `dry-android --help` for usage.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from dry.buildconfig import BuildProperties, Module
from dry.common import plugin_id
from dry.ext.os import touch
from dry.launcher import load_native_libraries, native_library_dir
from dry.libraries import DirectoryAccessError, resolve


def logger() -> logging.Logger:
    """Returns the module logger."""
    return logging.getLogger(__name__)


def build_properties(
    properties: Tuple[str, ...], module: Module = Module.Library
) -> BuildProperties:
    try:
        return BuildProperties.from_strings(properties, module=module)
    except ValueError as ex:
        raise click.BadParameter(str(ex), param_hint="'-P'") from ex


property_option = click.option(
    "-P",
    "--property",
    "properties",
    multiple=True,
    metavar="NAME=VALUE",
    help="Set a project property (repeatable).",
)


library_dir_argument = click.argument(
    "directory",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    default=0,
    help="Increase verbosity (repeatable).",
)
def main(verbose: int) -> None:
    """Helpers for building and launching the Dry engine on Android."""
    log_levels = [logging.WARNING, logging.INFO, logging.DEBUG]
    logging.basicConfig(level=log_levels[min(verbose, len(log_levels) - 1)])


@main.command()
@library_dir_argument
def libraries(directory: Optional[Path]) -> None:
    """Prints the native libraries in DIRECTORY in load order.

    DIRECTORY defaults to $DRY_NATIVE_LIBRARY_DIR, or the current directory.
    """
    if directory is None:
        directory = native_library_dir()
    try:
        names = resolve(directory)
    except DirectoryAccessError as ex:
        raise click.ClickException(str(ex)) from ex
    for name in names:
        click.echo(name)


@main.command()
@library_dir_argument
def load(directory: Optional[Path]) -> None:
    """Loads the native libraries in DIRECTORY in load order.

    Verifies that every library can be loaded once its predecessors are.
    """
    if directory is None:
        directory = native_library_dir()
    try:
        names = load_native_libraries(directory)
    except DirectoryAccessError as ex:
        raise click.ClickException(str(ex)) from ex
    except OSError as ex:
        raise click.ClickException(f"Failed to load library: {ex}") from ex
    click.echo(f"Loaded {len(names)} libraries from {directory}")


@main.command("cmake-args")
@property_option
@click.option(
    "--build-dir",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Gradle build directory of the library project.",
)
@click.option(
    "--module",
    type=click.Choice([m.value for m in Module]),
    default=Module.Library.value,
    show_default=True,
    help="Gradle module whose native build is configured.",
)
def cmake_args(properties: Tuple[str, ...], build_dir: Path, module: str) -> None:
    """Prints the CMake arguments for the native build, one per line."""
    config = build_properties(properties, Module(module))
    logger().debug("CMake targets: %s", ", ".join(config.cmake_targets))
    for arg in config.cmake_arguments(build_dir):
        click.echo(arg)


@main.command("artifact-id")
@property_option
@click.argument("project")
def artifact_id(properties: Tuple[str, ...], project: str) -> None:
    """Prints the Maven artifact id of PROJECT."""
    config = build_properties(properties)
    try:
        click.echo(config.artifact_id(project))
    except ValueError as ex:
        raise click.ClickException(str(ex)) from ex


@main.command("touch")
@click.argument("paths", nargs=-1, type=click.Path(path_type=Path))
def touch_command(paths: Tuple[Path, ...]) -> None:
    """Creates each of PATHS or updates its modification time."""
    for path in paths:
        logger().info("Touching %s", path)
        try:
            touched = touch(path)
        except OSError as ex:
            raise click.ClickException(f"Cannot touch {path}: {ex}") from ex
        if not touched:
            raise click.ClickException(f"Cannot touch {path}")


@main.command("plugin-id")
@click.argument("platform")
def plugin_id_command(platform: str) -> None:
    """Prints the id of the Dry build plugin for PLATFORM."""
    try:
        click.echo(plugin_id(platform))
    except ValueError as ex:
        raise click.ClickException(str(ex)) from ex


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
