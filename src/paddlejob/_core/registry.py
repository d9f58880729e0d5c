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

from typing import TYPE_CHECKING, ClassVar, Optional, Type

if TYPE_CHECKING:
    from .config import ParserConfig
    from .job_parser import JobParser


class Singleton(type):
    """Singleton metaclass."""

    _instance = None

    def __new__(cls, name, bases, dct):
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, name, bases, dct)
        return cls._instance


class Registry(metaclass=Singleton):
    """Registry for job parser implementations."""

    job_parsers_map: ClassVar[dict[str, Type[JobParser]]] = {}

    def add_job_parser(self, name: str, value: Type[JobParser]) -> None:
        """
        Add a new job parser implementation mapping.

        Args:
            name (str): The name of the job parser.
            value (Type[JobParser]): The job parser implementation.

        Raises:
            ValueError: If the job parser implementation already exists.
        """
        if name in self.job_parsers_map:
            raise ValueError(f"Duplicating implementation for '{name}', use 'update()' for replacement.")
        self.update_job_parser(name, value)

    def update_job_parser(self, name: str, value: Type[JobParser]) -> None:
        """
        Create or replace job parser implementation mapping.

        Args:
            name (str): The name of the job parser.
            value (Type[JobParser]): The job parser implementation.
        """
        self.job_parsers_map[name] = value

    def get_job_parser(self, name: str, config: Optional[ParserConfig] = None) -> JobParser:
        """
        Instantiate a registered job parser.

        Args:
            name (str): The name of the job parser.
            config (Optional[ParserConfig]): Configuration passed to the parser, defaults when omitted.

        Raises:
            KeyError: If no job parser is registered under the name.
        """
        if name not in self.job_parsers_map:
            raise KeyError(
                f"Job parser '{name}' not found. Registered parsers: {', '.join(sorted(self.job_parsers_map))}"
            )
        return self.job_parsers_map[name](config)
