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

from typing import Optional

from .core import (
    DEFAULT_CONFIG,
    ExecutionMode,
    InvalidElasticConfigurationError,
    JobDescriptionParser,
    JobDescriptionParsingError,
    JobParser,
    JobValidationError,
    ParserConfig,
    Registry,
    Role,
    format_validation_error,
    role_command,
)
from .job_parsers import DefaultJobParser
from .manifest import dump_manifests, render_manifests
from .models import (
    Container,
    ContainerPort,
    EnvVar,
    JobWorkloads,
    MasterSpec,
    PserverSpec,
    ResourceRequirements,
    TrainerSpec,
    TrainingJob,
    WorkloadKind,
    WorkloadUnit,
)
from .registration import register_all


def get_job_parser(name: str = "default", config: Optional[ParserConfig] = None) -> JobParser:
    """Instantiate a registered job parser, registering the known ones on first use."""
    registry = Registry()
    if name not in registry.job_parsers_map:
        register_all()
    return registry.get_job_parser(name, config)


__all__ = [
    "DEFAULT_CONFIG",
    "Container",
    "ContainerPort",
    "DefaultJobParser",
    "EnvVar",
    "ExecutionMode",
    "InvalidElasticConfigurationError",
    "JobDescriptionParser",
    "JobDescriptionParsingError",
    "JobParser",
    "JobValidationError",
    "JobWorkloads",
    "MasterSpec",
    "ParserConfig",
    "PserverSpec",
    "Registry",
    "ResourceRequirements",
    "Role",
    "TrainerSpec",
    "TrainingJob",
    "WorkloadKind",
    "WorkloadUnit",
    "dump_manifests",
    "format_validation_error",
    "get_job_parser",
    "register_all",
    "render_manifests",
    "role_command",
]
