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
"""Constants and helpers shared by the Dry Android build."""


NDK_SIDE_BY_SIDE_VERSION = "21.0.6113669"
CMAKE_VERSION = "3.5.1+"


PLUGIN_ID_PREFIX = "com.github.urho3d"


SUPPORTED_PLATFORMS = ("android",)


def plugin_id(platform: str) -> str:
    """Returns the id of the Dry build plugin for the given platform.

    >>> plugin_id('android')
    'com.github.urho3d.android'

    Raises:
        ValueError: The platform has no Dry build plugin.
    """
    if platform not in SUPPORTED_PLATFORMS:
        raise ValueError(
            f"Unsupported platform: {platform!r}. Supported platforms are: "
            f"{', '.join(SUPPORTED_PLATFORMS)}"
        )
    return f"{PLUGIN_ID_PREFIX}.{platform}"
