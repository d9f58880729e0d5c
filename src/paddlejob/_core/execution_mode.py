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

from enum import Enum
from typing import Dict, List, Tuple

from ..models.job import TrainingJob

LAUNCHER = "paddle_k8s"


class ExecutionMode(Enum):
    """How trainers and pservers of a job are started."""

    FAULT_TOLERANT = "fault_tolerant"
    SIMPLE = "simple"

    @classmethod
    def of(cls, job: TrainingJob) -> "ExecutionMode":
        return cls.FAULT_TOLERANT if job.fault_tolerant else cls.SIMPLE


class Role(Enum):
    """Role of a workload unit within a training job."""

    PSERVER = "pserver"
    TRAINER = "trainer"
    MASTER = "master"


COMMAND_TEMPLATES: Dict[Tuple[Role, ExecutionMode], Tuple[str, ...]] = {
    (Role.PSERVER, ExecutionMode.FAULT_TOLERANT): (LAUNCHER, "start_new_pserver"),
    (Role.PSERVER, ExecutionMode.SIMPLE): (LAUNCHER, "start_pserver"),
    (Role.TRAINER, ExecutionMode.FAULT_TOLERANT): (LAUNCHER, "start_new_trainer"),
    (Role.TRAINER, ExecutionMode.SIMPLE): (LAUNCHER, "start_trainer", "v2"),
    (Role.MASTER, ExecutionMode.FAULT_TOLERANT): (LAUNCHER, "start_master"),
    (Role.MASTER, ExecutionMode.SIMPLE): (LAUNCHER, "start_master"),
}


def role_command(role: Role, mode: ExecutionMode) -> List[str]:
    """
    Command a role's container is started with.

    Args:
        role (Role): Role of the container.
        mode (ExecutionMode): Execution mode of the job.

    Returns:
        List[str]: A fresh command list.

    Raises:
        KeyError: If no command is defined for the pair.
    """
    if (role, mode) not in COMMAND_TEMPLATES:
        raise KeyError(f"No command defined for role '{role.value}' in mode '{mode.value}'.")
    return list(COMMAND_TEMPLATES[(role, mode)])
