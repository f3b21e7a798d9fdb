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
"""Constants and helper functions for Android ABIs."""
from typing import List, NewType, Optional

Abi = NewType("Abi", str)


LP32_ABIS = (
    Abi("armeabi-v7a"),
    Abi("x86"),
)


LP64_ABIS = (
    Abi("arm64-v8a"),
    Abi("x86_64"),
)


ALL_ABIS = sorted(LP32_ABIS + LP64_ABIS)


def parse_abi_list(value: Optional[str]) -> List[Abi]:
    """Parses a comma separated list of ABIs.

    This is the format of the ANDROID_ABI property used to split the build per
    ABI. Whitespace around each ABI is ignored, as are empty items and
    repeated ABIs.

    >>> parse_abi_list('arm64-v8a, x86_64')
    ['arm64-v8a', 'x86_64']

    Raises:
        ValueError: An unknown ABI was named.
    """
    if value is None:
        return []
    abis: List[Abi] = []
    for item in value.split(","):
        name = item.strip()
        if not name:
            continue
        if name not in ALL_ABIS:
            raise ValueError(
                f"Unknown ABI: {name}. Valid ABIs are: {', '.join(ALL_ABIS)}"
            )
        if Abi(name) not in abis:
            abis.append(Abi(name))
    return abis
