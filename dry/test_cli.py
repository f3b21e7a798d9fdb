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
"""Tests for dry.cli."""
import os
from pathlib import Path
from tempfile import TemporaryDirectory
import unittest
from unittest import mock

from click.testing import CliRunner

from dry.cli import main


class CliTest(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_libraries(self) -> None:
        with TemporaryDirectory() as temp_dir:
            for mtime, name in enumerate(["libc++_shared.so", "libDry.so", "x.txt"]):
                path = Path(temp_dir) / name
                path.write_bytes(b"")
                os.utime(path, (1_000_000 + mtime, 1_000_000 + mtime))
            result = self.runner.invoke(main, ["libraries", temp_dir])
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual("c++_shared\nDry\n", result.output)

    def test_libraries_from_environment(self) -> None:
        with TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / "libmain.so").write_bytes(b"")
            result = self.runner.invoke(
                main, ["libraries"], env={"DRY_NATIVE_LIBRARY_DIR": temp_dir}
            )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual("main\n", result.output)

    def test_libraries_missing_directory(self) -> None:
        with TemporaryDirectory() as temp_dir:
            missing = str(Path(temp_dir) / "missing")
            result = self.runner.invoke(main, ["libraries", missing])
        self.assertNotEqual(0, result.exit_code)
        self.assertIn("Cannot list library directory", result.output)

    def test_load(self) -> None:
        with TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / "liba.so").write_bytes(b"")
            with mock.patch("dry.launcher.load_shared_library") as load:
                result = self.runner.invoke(main, ["load", temp_dir])
        self.assertEqual(0, result.exit_code, result.output)
        load.assert_called_once_with(Path(temp_dir) / "liba.so")
        self.assertIn("Loaded 1 libraries", result.output)

    def test_load_failure(self) -> None:
        with TemporaryDirectory() as temp_dir:
            (Path(temp_dir) / "liba.so").write_bytes(b"")
            with mock.patch(
                "dry.launcher.load_shared_library", side_effect=OSError("bad ELF")
            ):
                result = self.runner.invoke(main, ["load", temp_dir])
        self.assertNotEqual(0, result.exit_code)
        self.assertIn("Failed to load library: bad ELF", result.output)

    def test_cmake_args(self) -> None:
        result = self.runner.invoke(
            main,
            ["cmake-args", "-P", "DRY_LUA=1", "--build-dir", "out"],
            env={"ANDROID_CCACHE": "ccache"},
        )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual(
            "-DANDROID_CCACHE=ccache\n"
            "-DGRADLE_BUILD_DIR=out\n"
            "-DDRY_LUA=1\n"
            "-DDRY_PLAYER=0\n"
            "-DDRY_SAMPLES=0\n",
            result.output,
        )

    def test_cmake_args_launcher(self) -> None:
        result = self.runner.invoke(
            main,
            [
                "cmake-args",
                "--module",
                "launcher-app",
                "-P",
                "DRY_PHYSICS=0",
                "-P",
                "DRY_PLAYER=0",
                "--build-dir",
                "lib-out",
            ],
            env={"ANDROID_CCACHE": None},
        )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual(
            "-DGRADLE_BUILD_DIR=lib-out\n-DDRY_PLAYER=0\n-DDRY_SAMPLES=1\n",
            result.output,
        )

    def test_cmake_args_unknown_module(self) -> None:
        result = self.runner.invoke(
            main, ["cmake-args", "--module", "engine", "--build-dir", "out"]
        )
        self.assertEqual(2, result.exit_code)

    def test_cmake_args_bad_property(self) -> None:
        result = self.runner.invoke(
            main, ["cmake-args", "-P", "DRY_LUA", "--build-dir", "out"]
        )
        self.assertEqual(2, result.exit_code)

    def test_artifact_id(self) -> None:
        result = self.runner.invoke(
            main,
            ["artifact-id", "-P", "ANDROID_ABI=arm64-v8a,x86", "dry-lib"],
        )
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual("dry-lib-STATIC-arm64-v8a-x86\n", result.output)

    def test_artifact_id_bad_library_type(self) -> None:
        result = self.runner.invoke(
            main, ["artifact-id", "-P", "DRY_LIB_TYPE=MODULE", "dry-lib"]
        )
        self.assertEqual(1, result.exit_code)
        self.assertIn("Unknown library type: MODULE", result.output)

    def test_touch(self) -> None:
        with TemporaryDirectory() as temp_dir:
            paths = [Path(temp_dir) / "a", Path(temp_dir) / "b"]
            result = self.runner.invoke(main, ["touch"] + [str(p) for p in paths])
            self.assertEqual(0, result.exit_code, result.output)
            for path in paths:
                self.assertTrue(path.exists())

    def test_plugin_id(self) -> None:
        result = self.runner.invoke(main, ["plugin-id", "android"])
        self.assertEqual(0, result.exit_code, result.output)
        self.assertEqual("com.github.urho3d.android\n", result.output)

    def test_plugin_id_unsupported(self) -> None:
        result = self.runner.invoke(main, ["plugin-id", "ios"])
        self.assertEqual(1, result.exit_code)
        self.assertIn("Unsupported platform", result.output)
