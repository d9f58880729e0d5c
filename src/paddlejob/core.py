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

"""Core paddlejob base classes and interfaces."""

from ._core.config import DEFAULT_CONFIG, ParserConfig
from ._core.exceptions import (
    InvalidElasticConfigurationError,
    JobDescriptionParsingError,
    JobValidationError,
    format_validation_error,
)
from ._core.execution_mode import COMMAND_TEMPLATES, ExecutionMode, Role, role_command
from ._core.job_description_parser import JobDescriptionParser
from ._core.job_parser import JobParser
from ._core.registry import Registry

__all__ = [
    "COMMAND_TEMPLATES",
    "DEFAULT_CONFIG",
    "ExecutionMode",
    "InvalidElasticConfigurationError",
    "JobDescriptionParser",
    "JobDescriptionParsingError",
    "JobParser",
    "JobValidationError",
    "ParserConfig",
    "Registry",
    "Role",
    "format_validation_error",
    "role_command",
]
