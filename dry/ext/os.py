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
"""Helpers for os APIs."""
import contextlib
import os
from pathlib import Path
import time
from typing import ContextManager, Iterator, MutableMapping, Union


def touch(path: Union[str, Path]) -> bool:
    """Naive implementation of the touch command.

    Creates the file if it does not exist, otherwise updates its modification
    time to now.

    Returns:
        True if the file was created or its modification time was updated.
    """
    try:
        with open(path, "x"):
            return True
    except FileExistsError:
        pass
    try:
        now = time.time()
        os.utime(path, (now, now))
    except OSError:
        return False
    return True


@contextlib.contextmanager
def replace_environ(env: MutableMapping[str, str]) -> Iterator[None]:
    """Runs the enclosed block with exactly env as the environment.

    os.environ is updated in place, so child processes and os.getenv see the
    new values. The previous environment is put back on exit.
    """
    old_environ = os.environ.copy()
    os.environ.clear()
    os.environ.update(env)
    try:
        yield
    finally:
        os.environ.clear()
        os.environ.update(old_environ)


def modify_environ(env: MutableMapping[str, str]) -> ContextManager[None]:
    """Runs the enclosed block with env added on top of the environment."""
    new_environ = dict(os.environ)
    new_environ.update(env)
    return replace_environ(new_environ)
