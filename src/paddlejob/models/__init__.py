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

from .job import GPU_RESOURCE_NAME, MasterSpec, PserverSpec, ResourceRequirements, TrainerSpec, TrainingJob
from .workload import Container, ContainerPort, EnvVar, JobWorkloads, WorkloadKind, WorkloadUnit

__all__ = [
    "GPU_RESOURCE_NAME",
    "Container",
    "ContainerPort",
    "EnvVar",
    "JobWorkloads",
    "MasterSpec",
    "PserverSpec",
    "ResourceRequirements",
    "TrainerSpec",
    "TrainingJob",
    "WorkloadKind",
    "WorkloadUnit",
]
