# SPDX-FileCopyrightText: NVIDIA CORPORATION & AFFILIATES
# Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
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

from __future__ import annotations

from types import ModuleType
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    import kubernetes as k8s


class LazyImports:
    """Class to handle lazy imports of heavy dependencies."""

    def __init__(self):
        self._k8s: ModuleType | None = None

    @property
    def k8s(self) -> "k8s":  # type: ignore[no-any-return]
        """Lazy import of kubernetes."""
        if self._k8s is None:
            import kubernetes as k8s

            self._k8s = k8s

        return cast("k8s", self._k8s)


lazy = LazyImports()
