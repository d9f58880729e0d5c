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

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..util.quantity import quantity_to_int

GPU_RESOURCE_NAME = "nvidia.com/gpu"


def to_plain(value: Any) -> Any:
    """Recursively convert mapping and list subclasses (e.g. TOML inline tables) into plain ``dict`` and ``list``."""
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


class ResourceRequirements(BaseModel):
    """
    Compute resources of a role, keyed by Kubernetes resource name.

    Quantities are passed through to the generated manifests verbatim, malformed ones included.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    requests: Dict[str, Union[str, int, float]] = Field(default_factory=dict)
    limits: Dict[str, Union[str, int, float]] = Field(default_factory=dict)

    def request(self, name: str) -> int:
        return quantity_to_int(self.requests.get(name))

    def limit(self, name: str) -> int:
        return quantity_to_int(self.limits.get(name))

    def to_manifest(self) -> Dict[str, Dict[str, str]]:
        manifest: Dict[str, Dict[str, str]] = {}
        if self.limits:
            manifest["limits"] = {k: str(v) for k, v in self.limits.items()}
        if self.requests:
            manifest["requests"] = {k: str(v) for k, v in self.requests.items()}
        return manifest


class TrainerSpec(BaseModel):
    """Trainer role of a training job."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_instance: int = 0
    max_instance: int = 0
    entrypoint: str = ""
    workspace: str = ""
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class PserverSpec(BaseModel):
    """Parameter server role of a training job."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_instance: int = 0
    max_instance: int = 0
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class MasterSpec(BaseModel):
    """Master role of a training job."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)


class TrainingJob(BaseModel):
    """
    Description of a distributed PaddlePaddle training job.

    Zero values of ``port``, ``ports_num``, ``ports_num_for_sparse`` and ``passes`` and an empty ``image`` mean
    "unset" and are filled in by a job parser's ``validate``.

    Attributes
        name (str): Job name, used as a prefix of every generated workload unit.
        namespace (str): Namespace of the generated workload units.
        port (int): First port of the job's consecutive port range.
        ports_num (int): Number of dense parameter ports.
        ports_num_for_sparse (int): Number of sparse parameter ports.
        image (str): Container image of the trainer, pserver and master.
        passes (int): Number of training passes.
        fault_tolerant (bool): Run trainers and pservers in fault-tolerant mode.
        volumes (List[Dict[str, Any]]): Pod volumes, passed through verbatim.
        volume_mounts (List[Dict[str, Any]]): Container volume mounts, passed through verbatim.
        image_pull_secrets (List[Dict[str, Any]]): Pod image pull secrets, passed through verbatim.
        host_network (bool): Run pods in the host network namespace.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    namespace: str = "default"
    port: int = 0
    ports_num: int = 0
    ports_num_for_sparse: int = 0
    image: str = ""
    passes: int = 0
    fault_tolerant: bool = False
    volumes: List[Dict[str, Any]] = Field(default_factory=list)
    volume_mounts: List[Dict[str, Any]] = Field(default_factory=list)
    image_pull_secrets: List[Dict[str, Any]] = Field(default_factory=list)
    host_network: bool = False
    trainer: TrainerSpec = Field(default_factory=TrainerSpec)
    pserver: PserverSpec = Field(default_factory=PserverSpec)
    master: MasterSpec = Field(default_factory=MasterSpec)

    @field_validator("volumes", "volume_mounts", "image_pull_secrets", mode="before")
    @classmethod
    def plain_structures(cls, v: Any) -> Any:
        return to_plain(v)

    def elastic(self) -> bool:
        """Trainers may scale between min and max instances."""
        return self.trainer.min_instance != self.trainer.max_instance

    def need_gpu(self, gpu_resource_name: Optional[str] = None) -> bool:
        name = gpu_resource_name or GPU_RESOURCE_NAME
        resources = self.trainer.resources
        return resources.request(name) > 0 or resources.limit(name) > 0
