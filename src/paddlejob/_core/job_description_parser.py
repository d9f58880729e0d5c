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
from typing import Any, Dict, List

import toml
from pydantic import ValidationError

from ..models.job import TrainingJob
from .exceptions import JobDescriptionParsingError, format_validation_error


class JobDescriptionParser:
    """
    Parser for training job descriptions stored as TOML files.

    Attributes
        file_path (Path): The file path to the job description.
    """

    def __init__(self, file_path: Path) -> None:
        """
        Initialize a JobDescriptionParser instance.

        Args:
            file_path (Path): The file path to the job description.
        """
        self.file_path: Path = file_path

    def parse(self) -> TrainingJob:
        """
        Parse the job description file.

        Raises
            FileNotFoundError: If the file path does not exist or is not a file.
            JobDescriptionParsingError: If the content is not a valid job description.

        Returns
            TrainingJob: The parsed job description, defaults not yet filled in.
        """
        if not self.file_path.is_file():
            raise FileNotFoundError(f"The file '{self.file_path}' does not exist.")

        logging.debug(f"Parsing file: {self.file_path}")
        with self.file_path.open("r") as f:
            data: Dict[str, Any] = toml.load(f)

        return self.load_job(data)

    def load_job(self, data: Dict[str, Any]) -> TrainingJob:
        try:
            return TrainingJob.model_validate(data)
        except ValidationError as e:
            logging.error(f"Failed to parse job description: '{self.file_path}'")
            for err in e.errors(include_url=False):
                logging.error(format_validation_error(err))
            raise JobDescriptionParsingError(f"Failed to parse job description '{self.file_path}'") from e

    @staticmethod
    def parse_all(paths: List[Path]) -> List[TrainingJob]:
        """
        Parse several job description files.

        Raises
            ValueError: If two files describe jobs with the same name in the same namespace.
        """
        jobs: List[TrainingJob] = []
        seen: set[tuple[str, str]] = set()
        for path in paths:
            job = JobDescriptionParser(path).parse()
            key = (job.namespace, job.name)
            if key in seen:
                raise ValueError(f"Duplicate job name found: {job.namespace}/{job.name}")
            seen.add(key)
            jobs.append(job)
        return jobs
