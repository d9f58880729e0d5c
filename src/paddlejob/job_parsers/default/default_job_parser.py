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

import copy
import logging
from typing import Any, Dict, List, Optional

from paddlejob.core import ExecutionMode, InvalidElasticConfigurationError, JobParser, Role, role_command
from paddlejob.models import Container, TrainingJob, WorkloadKind, WorkloadUnit

from .env import compose_environment
from .ports import allocate_master_ports, allocate_ports


class DefaultJobParser(JobParser):
    """
    Job parser generating a pserver ReplicaSet, a trainer Job and a master ReplicaSet.

    Only the elastic/fault-tolerant rule is checked, every other field is accepted as is.
    """

    def validate(self, job: TrainingJob) -> TrainingJob:
        defaults: Dict[str, Any] = {}
        if job.port == 0:
            defaults["port"] = self.config.default_port
        if job.ports_num == 0:
            defaults["ports_num"] = self.config.default_ports_num
        if job.ports_num_for_sparse == 0:
            defaults["ports_num_for_sparse"] = self.config.default_ports_num_for_sparse
        if job.image == "":
            defaults["image"] = self.config.default_image
        if job.passes == 0:
            defaults["passes"] = self.config.default_passes

        if not job.fault_tolerant and job.elastic():
            err = InvalidElasticConfigurationError(job.name, job.trainer.min_instance, job.trainer.max_instance)
            logging.error(f"Job '{job.name}' rejected: {err.message}")
            raise err

        if defaults:
            logging.debug(f"Filling defaults of job '{job.name}': {defaults}")
        return job.model_copy(update=defaults, deep=True)

    def parse_to_pserver(self, job: TrainingJob) -> WorkloadUnit:
        container = Container(
            name="pserver",
            image=job.image,
            command=role_command(Role.PSERVER, ExecutionMode.of(job)),
            ports=allocate_ports(job.port, job.ports_num, job.ports_num_for_sparse),
            env=compose_environment(job, self.config),
            resources=job.pserver.resources.model_copy(deep=True),
        )
        return self._workload_unit(
            job,
            kind=WorkloadKind.REPLICA_SET,
            role=Role.PSERVER,
            replicas=job.pserver.min_instance,
            labels={"paddle-job-pserver": job.name},
            containers=[container],
        )

    def parse_to_trainer(self, job: TrainingJob) -> WorkloadUnit:
        container = Container(
            name="trainer",
            image=job.image,
            image_pull_policy=self.config.image_pull_policy,
            command=role_command(Role.TRAINER, ExecutionMode.of(job)),
            volume_mounts=copy.deepcopy(job.volume_mounts),
            ports=allocate_ports(job.port, job.ports_num, job.ports_num_for_sparse),
            env=compose_environment(job, self.config),
            resources=job.trainer.resources.model_copy(deep=True),
        )
        return self._workload_unit(
            job,
            kind=WorkloadKind.JOB,
            role=Role.TRAINER,
            replicas=job.trainer.min_instance,
            labels={"paddle-job": job.name},
            containers=[container],
            restart_policy="Never",
        )

    def parse_to_master(self, job: TrainingJob) -> WorkloadUnit:
        master = Container(
            name="master",
            image=job.image,
            image_pull_policy=self.config.image_pull_policy,
            ports=allocate_master_ports(self.config),
            command=role_command(Role.MASTER, ExecutionMode.of(job)),
            volume_mounts=copy.deepcopy(job.volume_mounts),
            resources=job.master.resources.model_copy(deep=True),
        )
        return self._workload_unit(
            job,
            kind=WorkloadKind.REPLICA_SET,
            role=Role.MASTER,
            replicas=1,
            labels={"paddle-job-master": job.name},
            containers=[master, self.etcd_container(job)],
        )

    def etcd_container(self, job: TrainingJob) -> Container:
        """Single-node etcd advertising the pod's own IP, which the container resolves from ``POD_IP``."""
        client, legacy_client, peer = (
            self.config.etcd_client_port,
            self.config.etcd_legacy_client_port,
            self.config.etcd_peer_port,
        )
        command = [
            "etcd",
            "-name",
            "etcd0",
            "-advertise-client-urls",
            f"http://$(POD_IP):{client},http://$(POD_IP):{legacy_client}",
            "-listen-client-urls",
            f"http://0.0.0.0:{client},http://0.0.0.0:{legacy_client}",
            "-initial-advertise-peer-urls",
            f"http://$(POD_IP):{peer}",
            "-listen-peer-urls",
            f"http://0.0.0.0:{peer}",
            "-initial-cluster",
            f"etcd0=http://$(POD_IP):{peer}",
            "-initial-cluster-state",
            "new",
        ]
        return Container(
            name="etcd",
            image=self.config.etcd_image,
            image_pull_policy=self.config.image_pull_policy,
            env=compose_environment(job, self.config),
            command=command,
        )

    def _workload_unit(
        self,
        job: TrainingJob,
        kind: WorkloadKind,
        role: Role,
        replicas: int,
        labels: Dict[str, str],
        containers: List[Container],
        restart_policy: Optional[str] = None,
    ) -> WorkloadUnit:
        api_version = self.config.job_api_version if kind == WorkloadKind.JOB else self.config.replica_set_api_version
        unit = WorkloadUnit(
            kind=kind,
            api_version=api_version,
            name=f"{job.name}-{role.value}",
            namespace=job.namespace,
            replicas=replicas,
            labels=labels,
            containers=containers,
            volumes=copy.deepcopy(job.volumes),
            image_pull_secrets=copy.deepcopy(job.image_pull_secrets),
            host_network=job.host_network,
            restart_policy=restart_policy,
        )
        logging.debug(f"Generated {kind.value} '{unit.name}' with {replicas} replica(s)")
        return unit
