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

from pathlib import Path

import pytest
import toml

from paddlejob.core import JobDescriptionParser, ParserConfig
from paddlejob.job_parsers import DefaultJobParser
from paddlejob.manifest import render_manifests

CONF_DIR = Path(__file__).parent.parent / "conf"
TOML_FILES = list(CONF_DIR.glob("**/*.toml"))
JOB_FILES = list((CONF_DIR / "job").glob("*.toml"))
PARSER_CONFIG_FILES = list((CONF_DIR / "parser").glob("*.toml"))


@pytest.mark.parametrize("toml_file", TOML_FILES, ids=lambda x: str(x.relative_to(CONF_DIR)))
def test_toml_files(toml_file: Path):
    """
    Validate the syntax of a .toml file.

    Args:
        toml_file (Path): The path to the .toml file to validate.
    """
    with toml_file.open("r") as f:
        assert toml.load(f) is not None


@pytest.mark.parametrize("job_file", JOB_FILES, ids=lambda x: x.name)
def test_job_descriptions(job_file: Path):
    job = JobDescriptionParser(job_file).parse()
    workloads = DefaultJobParser().parse(job)

    assert [u.name for u in workloads.units()] == [f"{job.name}-pserver", f"{job.name}-trainer", f"{job.name}-master"]
    assert render_manifests(workloads).count("kind: ") == 3


@pytest.mark.parametrize("config_file", PARSER_CONFIG_FILES, ids=lambda x: x.name)
def test_parser_configs(config_file: Path):
    assert ParserConfig.from_toml(config_file) is not None
