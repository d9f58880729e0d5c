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
from abc import ABC, abstractmethod
from typing import Optional

from ..models.job import TrainingJob
from ..models.workload import JobWorkloads, WorkloadUnit
from .config import DEFAULT_CONFIG, ParserConfig


class JobParser(ABC):
    """
    Abstract base class for turning a training job description into workload units.

    ``validate`` must be called before any of the ``parse_to_*`` methods, they assume an already validated job and
    perform no checks of their own.
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def validate(self, job: TrainingJob) -> TrainingJob:
        """
        Fill in default values of a job and check it.

        Args:
            job (TrainingJob): The job as submitted.

        Returns:
            TrainingJob: A copy of the job with defaults filled in.

        Raises:
            JobValidationError: If the job is rejected.
        """
        pass

    @abstractmethod
    def parse_to_pserver(self, job: TrainingJob) -> WorkloadUnit:
        """Generate the parameter server workload unit of a validated job."""
        pass

    @abstractmethod
    def parse_to_trainer(self, job: TrainingJob) -> WorkloadUnit:
        """Generate the trainer workload unit of a validated job."""
        pass

    @abstractmethod
    def parse_to_master(self, job: TrainingJob) -> WorkloadUnit:
        """Generate the master workload unit of a validated job."""
        pass

    def parse(self, job: TrainingJob) -> JobWorkloads:
        """
        Validate a job and generate all of its workload units.

        Args:
            job (TrainingJob): The job as submitted.

        Returns:
            JobWorkloads: The pserver, trainer and master units.
        """
        validated = self.validate(job)
        workloads = JobWorkloads(
            pserver=self.parse_to_pserver(validated),
            trainer=self.parse_to_trainer(validated),
            master=self.parse_to_master(validated),
        )
        logging.debug(f"Generated workload units for job '{job.name}': {[u.name for u in workloads.units()]}")
        return workloads
