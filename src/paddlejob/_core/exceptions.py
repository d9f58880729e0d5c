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

from typing import Any


class JobValidationError(Exception):
    """
    Exception raised when a training job description is rejected.

    Attributes
        job_name (str): The name of the rejected job.
        message (str): A custom message describing the error.
    """

    def __init__(self, job_name: str, message: str):
        """
        Initialize a JobValidationError instance.

        Args:
            job_name (str): The name of the rejected job.
            message (str): A custom message describing the error.
        """
        super().__init__(message)
        self.job_name = job_name
        self.message = message

    def __str__(self):
        return f"\nERROR: Job Validation Failed\n\tJob Name: {self.job_name}\n\tMessage: {self.message}\n"


class InvalidElasticConfigurationError(JobValidationError):
    """
    Exception raised when an elastic job does not enable fault tolerance.

    Attributes
        min_instance (int): Requested minimum trainer instances.
        max_instance (int): Requested maximum trainer instances.
    """

    def __init__(self, job_name: str, min_instance: int, max_instance: int):
        super().__init__(job_name, "max-instances should equal to min-instances when fault_tolerant is disabled")
        self.min_instance = min_instance
        self.max_instance = max_instance

    def __str__(self):
        return (
            f"{super().__str__()}"
            f"\tTrainer Instances: min={self.min_instance}, max={self.max_instance}\n"
        )


class JobDescriptionParsingError(Exception):
    """Exception raised when a job description or parser configuration file can't be loaded."""

    pass


def format_validation_error(err: Any) -> str:
    """
    Format a single pydantic error entry into a one-line message.

    Args:
        err: An entry of ``ValidationError.errors()``.

    Returns:
        str: ``Field '<dotted.location>' with value '<input>' is invalid: <message>``.
    """
    loc = ".".join(str(part) for part in err["loc"])
    if err.get("type") == "missing":
        return f"Field '{loc}': {err['msg']}"
    return f"Field '{loc}' with value '{err.get('input')}' is invalid: {err['msg']}"
