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

import logging
from pathlib import Path

import yaml

from .models import JobWorkloads


def render_manifests(workloads: JobWorkloads) -> str:
    """Render the pserver, trainer and master manifests as one multi-document YAML string."""
    return yaml.safe_dump_all(workloads.to_manifests(), sort_keys=False)


def dump_manifests(workloads: JobWorkloads, path: Path) -> Path:
    """
    Write the manifests of a job's workload units to a YAML file.

    Args:
        workloads (JobWorkloads): Generated workload units.
        path (Path): Output file, parent directories are created.

    Returns:
        Path: The written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        f.write(render_manifests(workloads))
    logging.debug(f"Manifests of {[u.name for u in workloads.units()]} written to {path}")
    return path
