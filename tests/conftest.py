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

import pytest

from paddlejob.core import ParserConfig
from paddlejob.job_parsers import DefaultJobParser
from paddlejob.models import PserverSpec, ResourceRequirements, TrainerSpec, TrainingJob


@pytest.fixture
def parser() -> DefaultJobParser:
    return DefaultJobParser()


@pytest.fixture
def wide2_job() -> TrainingJob:
    return TrainingJob(
        name="wide2",
        namespace="ns1",
        fault_tolerant=True,
        trainer=TrainerSpec(
            min_instance=4,
            max_instance=4,
            entrypoint="python train.py",
            workspace="/workspace/wide2",
            resources=ResourceRequirements(requests={"cpu": "2", "memory": "4Gi"}),
        ),
        pserver=PserverSpec(min_instance=2, max_instance=2),
    )


@pytest.fixture
def validated_job(parser: DefaultJobParser, wide2_job: TrainingJob) -> TrainingJob:
    return parser.validate(wide2_job)


@pytest.fixture
def simple_job(parser: DefaultJobParser, wide2_job: TrainingJob) -> TrainingJob:
    return parser.validate(wide2_job.model_copy(update={"fault_tolerant": False}))


@pytest.fixture
def gpu_job(parser: DefaultJobParser) -> TrainingJob:
    job = TrainingJob(
        name="mnist-gpu",
        namespace="paddle",
        fault_tolerant=True,
        volumes=[{"name": "data", "hostPath": {"path": "/mnt/data"}}],
        volume_mounts=[{"name": "data", "mountPath": "/data"}],
        image_pull_secrets=[{"name": "registry-credentials"}],
        host_network=True,
        trainer=TrainerSpec(
            min_instance=2,
            max_instance=8,
            resources=ResourceRequirements(
                requests={"cpu": "4", "nvidia.com/gpu": 2}, limits={"nvidia.com/gpu": 2}
            ),
        ),
        pserver=PserverSpec(min_instance=3, resources=ResourceRequirements(requests={"cpu": "1"})),
    )
    return parser.validate(job)


@pytest.fixture
def custom_config() -> ParserConfig:
    return ParserConfig(
        default_image="registry.local/paddle:ci",
        default_port=9000,
        default_ports_num=2,
        default_ports_num_for_sparse=3,
        default_passes=7,
        image_pull_policy="IfNotPresent",
        etcd_image="registry.local/etcd:v3.5.0",
    )
