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

import warnings
from importlib.metadata import entry_points

ENTRYPOINT_GROUP = "paddlejob.job_parsers"


def register_entrypoint_job_parsers():
    from paddlejob.core import JobParser, Registry

    eps = entry_points(group=ENTRYPOINT_GROUP)
    for ep in eps:
        cls = ep.load()
        if isinstance(cls, type) and issubclass(cls, JobParser):
            Registry().update_job_parser(ep.name, cls)
        else:
            warnings.warn(
                f"Skipping entrypoint: {ep.name} -> {ep.value} class={cls} (not a subclass of JobParser)", stacklevel=2
            )


def register_all():
    """Register the built-in job parser and the ones exposed through entry points."""
    from paddlejob.core import Registry
    from paddlejob.job_parsers import DefaultJobParser

    Registry().update_job_parser("default", DefaultJobParser)

    register_entrypoint_job_parsers()
