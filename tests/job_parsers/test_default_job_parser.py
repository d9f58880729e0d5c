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

from paddlejob.core import InvalidElasticConfigurationError
from paddlejob.job_parsers import DefaultJobParser
from paddlejob.manifest import render_manifests
from paddlejob.models import PserverSpec, TrainerSpec, TrainingJob


@pytest.mark.parametrize(
    "fault_tolerant,pserver_cmd,trainer_cmd",
    [
        (True, ["paddle_k8s", "start_new_pserver"], ["paddle_k8s", "start_new_trainer"]),
        (False, ["paddle_k8s", "start_pserver"], ["paddle_k8s", "start_trainer", "v2"]),
    ],
)
def test_command_selection(parser: DefaultJobParser, fault_tolerant: bool, pserver_cmd: list, trainer_cmd: list):
    job = parser.validate(TrainingJob(name="j", fault_tolerant=fault_tolerant))

    assert parser.parse_to_pserver(job).container("pserver").command == pserver_cmd
    assert parser.parse_to_trainer(job).container("trainer").command == trainer_cmd


def test_wide2_end_to_end(parser: DefaultJobParser):
    job = TrainingJob(
        name="wide2",
        namespace="ns1",
        port=0,
        ports_num=0,
        ports_num_for_sparse=0,
        fault_tolerant=True,
        trainer=TrainerSpec(min_instance=4, max_instance=4),
        pserver=PserverSpec(min_instance=2),
    )

    workloads = parser.parse(job)

    pserver = workloads.pserver
    assert pserver.name == "wide2-pserver"
    assert pserver.replicas == 2
    assert len(pserver.containers) == 1
    assert pserver.containers[0].command == ["paddle_k8s", "start_new_pserver"]
    assert [p.name for p in pserver.containers[0].ports] == ["jobport-7164", "jobport-7165"]

    trainer = workloads.trainer
    assert trainer.name == "wide2-trainer"
    assert trainer.replicas == 4
    assert trainer.containers[0].command == ["paddle_k8s", "start_new_trainer"]
    assert trainer.restart_policy == "Never"

    assert workloads.master.name == "wide2-master"


def test_parse_rejects_before_building(parser: DefaultJobParser, wide2_job: TrainingJob):
    job = wide2_job.model_copy(
        update={"fault_tolerant": False, "trainer": TrainerSpec(min_instance=4, max_instance=8)}
    )
    with pytest.raises(InvalidElasticConfigurationError):
        parser.parse(job)


def test_regeneration_is_idempotent(parser: DefaultJobParser, gpu_job: TrainingJob):
    first = parser.parse(gpu_job)
    second = parser.parse(gpu_job)

    assert first == second
    assert render_manifests(first) == render_manifests(second)


def test_validated_job_is_stable(parser: DefaultJobParser, validated_job: TrainingJob):
    assert parser.validate(validated_job) == validated_job
