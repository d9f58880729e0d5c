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

from paddlejob.job_parsers import DefaultJobParser
from paddlejob.job_parsers.default import compose_environment
from paddlejob.models import TrainingJob, WorkloadKind


class TestParseToPserver:
    def test_unit(self, parser: DefaultJobParser, validated_job: TrainingJob):
        unit = parser.parse_to_pserver(validated_job)

        assert unit.kind == WorkloadKind.REPLICA_SET
        assert unit.api_version == "apps/v1"
        assert unit.name == "wide2-pserver"
        assert unit.namespace == "ns1"
        assert unit.replicas == 2
        assert unit.labels == {"paddle-job-pserver": "wide2"}
        assert unit.restart_policy is None

    def test_container(self, parser: DefaultJobParser, validated_job: TrainingJob):
        unit = parser.parse_to_pserver(validated_job)

        assert len(unit.containers) == 1
        container = unit.container("pserver")
        assert container.image == "paddlepaddle/paddlecloud-job"
        assert container.image_pull_policy is None
        assert container.command == ["paddle_k8s", "start_new_pserver"]
        assert [p.name for p in container.ports] == ["jobport-7164", "jobport-7165"]
        assert container.env == compose_environment(validated_job)
        assert container.volume_mounts == []

    def test_simple_mode_command(self, parser: DefaultJobParser, simple_job: TrainingJob):
        assert parser.parse_to_pserver(simple_job).container("pserver").command == ["paddle_k8s", "start_pserver"]

    def test_pod_settings(self, parser: DefaultJobParser, gpu_job: TrainingJob):
        unit = parser.parse_to_pserver(gpu_job)

        assert unit.replicas == 3
        assert unit.volumes == [{"name": "data", "hostPath": {"path": "/mnt/data"}}]
        assert unit.image_pull_secrets == [{"name": "registry-credentials"}]
        assert unit.host_network is True
        assert unit.container("pserver").resources.requests == {"cpu": "1"}

    def test_does_not_share_volumes_with_job(self, parser: DefaultJobParser, gpu_job: TrainingJob):
        unit = parser.parse_to_pserver(gpu_job)
        unit.volumes[0]["name"] = "changed"
        assert gpu_job.volumes[0]["name"] == "data"
